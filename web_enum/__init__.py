"""
web_enum
========
Recursive, heuristic content discovery for HTTP(S) targets.

Given a base URL, finds both linked and unlinked subdirectories and
recurses into each of them up to a depth limit, telling real content
apart from generic "not found" pages with a five-signal score.

Package structure
-----------------
web_enum/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m web_enum``
├── cli.py            – argparse CLI (``enum`` / ``list``)
├── config.py         – defaults, wordlist, classifier tuning
├── session.py        – requests.Session factory and HttpClient
├── core/
│   ├── walker.py     – bounded-pool recursive walk
│   ├── session.py    – EnumerationSession (visited set + baselines)
│   ├── baseline.py   – soft-404 baseline cache
│   ├── classifier.py – five-signal existence heuristic
│   ├── enumerator.py – DirectoryEnumerator
│   └── lister.py     – DirectoryLister
├── extraction/
│   └── links.py      – anchor href extraction via BeautifulSoup
└── utils/
    ├── url.py        – combine_url()
    └── log.py        – colour logging setup

Quick start
-----------
    from web_enum import DirectoryEnumerator, HttpClient

    enumerator = DirectoryEnumerator(HttpClient(), max_depth=2)
    report = enumerator.run("https://example.com")
    for url in report.directories:
        print(url)
"""

from .core import (
    Classifier,
    DirectoryEnumerator,
    DirectoryLister,
    EnumerationReport,
    EnumerationSession,
    ListingReport,
)
from .extraction import extract_links
from .session import FetchResult, HttpClient, build_session
from .utils import combine_url

__all__ = [
    "Classifier",
    "DirectoryEnumerator",
    "DirectoryLister",
    "EnumerationReport",
    "EnumerationSession",
    "ListingReport",
    "extract_links",
    "FetchResult",
    "HttpClient",
    "build_session",
    "combine_url",
]
