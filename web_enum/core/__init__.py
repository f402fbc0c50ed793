"""Core discovery logic – recursive enumerator, lister and shared state."""

from web_enum.core.baseline import BaselineCache
from web_enum.core.classifier import Classifier, Signals, classify
from web_enum.core.enumerator import DirectoryEnumerator, EnumerationReport
from web_enum.core.lister import DirectoryLister, ListingReport
from web_enum.core.session import EnumerationSession

__all__ = [
    "BaselineCache",
    "Classifier",
    "Signals",
    "classify",
    "DirectoryEnumerator",
    "EnumerationReport",
    "DirectoryLister",
    "ListingReport",
    "EnumerationSession",
]
