"""
Multi-signal existence heuristic for probed candidate paths.

Each of five independent signals adds one point; a candidate is confirmed
when the score reaches the threshold.  The result is deterministic for
identical inputs but is a heuristic, not proof of existence.
"""

import re
from dataclasses import dataclass

from web_enum.config import (
    CONFIRM_THRESHOLD,
    DIRECTORY_PATTERNS,
    NOT_FOUND_TITLE_MARKERS,
    STATUS_OK_CODES,
)
from web_enum.core.baseline import signature

_TITLE_RE = re.compile(r"<title>(.*?)</title>", re.I)
_META_REFRESH_RE = re.compile(r"""http-equiv\s*=\s*["']?refresh""", re.I)


@dataclass(frozen=True)
class Signals:
    not_baseline: bool = False
    status_ok: bool = False
    dir_pattern: bool = False
    title_ok: bool = False
    not_redirect: bool = False

    _LABELS = (
        ("not_baseline", "not-baseline"),
        ("status_ok", "status-ok"),
        ("dir_pattern", "dir-pattern"),
        ("title_ok", "title-ok"),
        ("not_redirect", "not-redirect"),
    )

    @property
    def score(self) -> int:
        return sum(1 for attr, _ in self._LABELS if getattr(self, attr))

    def labels(self) -> list[str]:
        """Names of the signals that fired, in fixed order."""
        return [label for attr, label in self._LABELS if getattr(self, attr)]


def extract_title(body: str) -> str:
    m = _TITLE_RE.search(body)
    return m.group(1) if m else ""


class Classifier:
    """Scores probe responses; thresholds and phrase lists are tunable."""

    def __init__(
        self,
        threshold: int = CONFIRM_THRESHOLD,
        patterns: list[str] | None = None,
        ok_statuses: frozenset[int] = STATUS_OK_CODES,
        title_markers: list[str] | None = None,
    ) -> None:
        self.threshold = threshold
        self.patterns = list(DIRECTORY_PATTERNS if patterns is None else patterns)
        self.ok_statuses = ok_statuses
        self.title_markers = list(
            NOT_FOUND_TITLE_MARKERS if title_markers is None else title_markers
        )

    def classify(
        self,
        body: str,
        status_code: int | None,
        baseline: bytes,
        base_url: str = "",
    ) -> Signals:
        title = extract_title(body)
        redirect_loop = bool(
            base_url
            and _META_REFRESH_RE.search(body)
            and base_url in body
        )
        return Signals(
            not_baseline=signature(body) != baseline,
            status_ok=status_code in self.ok_statuses,
            dir_pattern=any(p in body for p in self.patterns),
            title_ok=bool(title) and not any(m in title for m in self.title_markers),
            not_redirect=not redirect_loop,
        )

    def is_confirmed(self, signals: Signals) -> bool:
        return signals.score >= self.threshold


_DEFAULT = Classifier()


def classify(
    body: str,
    status_code: int | None,
    baseline: bytes,
    base_url: str = "",
) -> int:
    """Score *body* with the default classifier (0-5)."""
    return _DEFAULT.classify(body, status_code, baseline, base_url).score
