"""
Logging configuration for the enumerator.

Provides a clean logging system with:
* ``colorlog`` level colours plus ANSI highlights for ``[CATEGORY]`` tags
* GitHub Actions CI support (``::warning::``, ``::error::``)
* Optional plain-text file output at DEBUG level
"""

import logging
import os
from pathlib import Path

import colorlog

log = logging.getLogger("web-enum")

_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# True when running inside GitHub Actions
_CI: bool = os.environ.get("GITHUB_ACTIONS") == "true"

# ── Category colours ───────────────────────────────────────────────
_ANSI_RESET = "\033[0m"
_CATEGORY_STYLES: dict[str, str] = {
    # tag: ansi_colour
    "[ENUM]":        "\033[1;32m",
    "[LIST]":        "\033[1;32m",
    "[OK]":          "\033[1;32m",
    "[DIR]":         "\033[35m",
    "[NO-RESPONSE]": "\033[33m",
    "[BASELINE]":    "\033[90m",
    "[PROBE]":       "\033[90m",
    "[DONE]":        "\033[90m",
    "[SKIP]":        "\033[90m",
    "[ERR]":         "\033[1;31m",
    "[SRC]":         "\033[34m",
    "[SCRIPT]":      "\033[32m",
    "[TEXT]":        "\033[33m",
    "[ARCHIVE]":     "\033[31m",
    "[DATA]":        "\033[36m",
    "[IMAGE]":       "\033[95m",
    "[FILE]":        "\033[90m",
}


def _apply_category_styles(msg: str) -> str:
    """Inject ANSI colours for known ``[CATEGORY]`` tags in *msg*."""
    for tag, style in _CATEGORY_STYLES.items():
        if tag in msg:
            msg = msg.replace(tag, f"{style}{tag}{_ANSI_RESET}")
    return msg


# ── Formatters ─────────────────────────────────────────────────────

class _ColorlogCategoryFormatter(colorlog.ColoredFormatter):
    """Extends ``colorlog.ColoredFormatter`` to also highlight inline
    ``[CATEGORY]`` tags."""

    def format(self, record: logging.LogRecord) -> str:
        return _apply_category_styles(super().format(record))


class _CIFormatter(logging.Formatter):
    """Formatter for GitHub Actions CI environments.

    Emits ``::warning::`` / ``::error::`` workflow commands so that
    warnings and errors appear as annotations in the Actions UI.
    Regular messages keep ANSI category-tag colours.
    """

    _CI_COMMANDS: dict[int, str] = {
        logging.WARNING:  "::warning::",
        logging.ERROR:    "::error::",
        logging.CRITICAL: "::error::",
    }

    def format(self, record: logging.LogRecord) -> str:
        formatted = _apply_category_styles(super().format(record))
        prefix = self._CI_COMMANDS.get(record.levelno, "")
        if prefix:
            return f"{prefix}{formatted}"
        return formatted


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure the package logger with colour output, optional file
    output, and GitHub Actions CI awareness.

    Parameters
    ----------
    debug : bool
        Enable DEBUG-level output (default is INFO).
    log_file : str | None
        If given, also write log messages to this file path.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    # -- Console handler --
    if _CI:
        handler = logging.StreamHandler()
        handler.setFormatter(_CIFormatter(
            "%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"
        ))
    else:
        handler = colorlog.StreamHandler()
        handler.setFormatter(_ColorlogCategoryFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    log.addHandler(handler)

    # -- File handler (optional) --
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)          # always capture full detail
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.info("Logging to file: %s", log_path.resolve())
