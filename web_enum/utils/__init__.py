"""Utility helpers for URL combination and logging."""

from web_enum.utils.url import combine_url, is_http_url
from web_enum.utils.log import setup_logging, log

__all__ = [
    "combine_url",
    "is_http_url",
    "setup_logging",
    "log",
]
