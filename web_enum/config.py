"""
Configuration constants for the directory enumerator.
"""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_MAX_DEPTH = 3          # recursion ceiling for `enum`
DEFAULT_LIST_DEPTH = 5         # recursion ceiling for `list`
DEFAULT_CONCURRENCY = 0        # 0 = auto-detect from CPU/RAM
DEFAULT_USER_AGENT = "Mozilla/5.0"
REQUEST_TIMEOUT = 2            # seconds, per request

# Limits for auto-concurrency calculation
_MIN_WORKERS = 2
_MAX_WORKERS = 32
_RAM_PER_WORKER_MB = 64        # estimated RSS per worker thread


def auto_concurrency() -> int:
    """Calculate the number of concurrent workers based on available CPU
    cores and system RAM.

    Heuristic:
      * Start with ``cpu_count * 2`` (I/O-bound workload).
      * Cap by available RAM (``free_mb / _RAM_PER_WORKER_MB``).
      * Clamp between ``_MIN_WORKERS`` and ``_MAX_WORKERS``.
    """
    cpus = os.cpu_count() or 2
    workers = cpus * 2

    try:
        with open("/proc/meminfo") as f:
            for line in f:
                if line.startswith("MemAvailable:"):
                    mem_kb = int(line.split()[1])
                    mem_mb = mem_kb // 1024
                    ram_cap = max(1, mem_mb // _RAM_PER_WORKER_MB)
                    workers = min(workers, ram_cap)
                    break
    except (OSError, ValueError):
        pass

    return max(_MIN_WORKERS, min(workers, _MAX_WORKERS))


# ---------------------------------------------------------------------------
# Candidate directory names probed under every enumerated node
# ---------------------------------------------------------------------------
COMMON_DIRS = [
    "admin/", "private/", "secret/", "hidden/", "config/", "backup/",
    "data/", "uploads/", "files/", "tmp/", "test/", "dev/", "logs/",
    "bin/", "cgi-bin/",
    ".git/", ".svn/", ".env/", ".htaccess", ".htpasswd",
    "db/", "db_backup/", "old/", "new/", "staging/", "beta/", "alpha/",
    "api/", "assets/", "images/", "css/", "js/",
]


def load_wordlist(path: str | Path) -> list[str]:
    """Read candidate names from *path*, one per line.

    Blank lines and ``#`` comments are skipped; duplicates are dropped
    while keeping the first occurrence.
    """
    words: list[str] = []
    seen: set[str] = set()
    text = Path(path).read_text(encoding="utf-8", errors="ignore")
    for line in text.splitlines():
        word = line.strip()
        if not word or word.startswith("#") or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


# ---------------------------------------------------------------------------
# Heuristic classifier tuning
# ---------------------------------------------------------------------------
# Bytes of the body compared against the not-found baseline.
BASELINE_SIGNATURE_BYTES = 512

# A candidate is confirmed when at least this many signals fire (out of 5).
CONFIRM_THRESHOLD = 2

STATUS_OK_CODES = frozenset({200, 301, 302})

# Phrases found in auto-generated directory listings (Apache, nginx,
# IIS, python -m http.server, ...).  Matched case-sensitively.
DIRECTORY_PATTERNS = [
    "Index of",
    "Parent Directory",
    "<title>Index of",
    "Directory listing for",
    "To Parent Directory",
]

# A <title> containing any of these is treated as an error page.
NOT_FOUND_TITLE_MARKERS = [
    "404",
    "Not Found",
]

# ---------------------------------------------------------------------------
# Listing: file categories by extension (used for log tags)
# ---------------------------------------------------------------------------
FILE_CATEGORIES: dict[str, frozenset[str]] = {
    "SRC":     frozenset({"c", "cpp", "h", "hpp"}),
    "SCRIPT":  frozenset({"sh", "py", "pl", "rb"}),
    "TEXT":    frozenset({"txt", "md"}),
    "ARCHIVE": frozenset({"zip", "tar", "gz", "rar"}),
    "DATA":    frozenset({"json", "xml"}),
    "IMAGE":   frozenset({"jpg", "png", "gif"}),
}
DEFAULT_FILE_CATEGORY = "FILE"
