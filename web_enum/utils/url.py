"""
URL combination helpers.
"""

import re

_ORIGIN_RE = re.compile(r"^https?://[^/]+")


def is_http_url(value: str) -> bool:
    """Return True if *value* starts with ``http://`` or ``https://``."""
    return value.startswith(("http://", "https://"))


def combine_url(base: str, relative: str) -> str:
    """
    Resolve *relative* against *base*.

    * empty *relative* -> *base* unchanged
    * absolute ``http(s)://`` link -> returned as-is
    * root-relative ``/path`` -> ``scheme://authority`` of *base* + path
    * anything else -> *base* without its trailing ``/`` + ``/`` + *relative*

    ``..`` and ``.`` segments are not collapsed.
    """
    if not relative:
        return base
    if is_http_url(relative):
        return relative

    b = base[:-1] if base.endswith("/") else base
    if relative.startswith("/"):
        m = _ORIGIN_RE.match(b)
        if m:
            return m.group(0) + relative
        return b + relative
    return b + "/" + relative
