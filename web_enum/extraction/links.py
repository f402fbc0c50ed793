"""
Anchor ``href`` extraction via BeautifulSoup.

Only ``<a href=...>`` is considered: the enumerator follows
directory-listing style links, not page assets.
"""

from bs4 import BeautifulSoup

from web_enum.utils.log import log

_BS4_PARSER = "lxml"

_SELF_OR_PARENT = frozenset({"./", "../"})


def extract_links(html: str) -> list[str]:
    """
    Return the ``href`` value of every ``<a>`` tag in *html*, in document
    order.  Values are returned verbatim (not resolved, not de-duplicated).
    """
    if not html:
        return []
    try:
        soup = BeautifulSoup(html, _BS4_PARSER)
    except Exception as exc:
        log.debug("  Could not parse HTML (%s); no links extracted", exc)
        return []

    links: list[str] = []
    for el in soup.find_all("a"):
        href = el.get("href")
        if href is not None:
            links.append(href)
    return links


def is_directory_link(link: str) -> bool:
    """True for links that look like a subdirectory (``name/``)."""
    return bool(link) and link.endswith("/") and link not in _SELF_OR_PARENT


def directory_links(links: list[str]) -> list[str]:
    """Keep directory-looking links, dropping duplicates but not order."""
    seen: set[str] = set()
    dirs: list[str] = []
    for link in links:
        if is_directory_link(link) and link not in seen:
            seen.add(link)
            dirs.append(link)
    return dirs


def split_links(links: list[str]) -> tuple[list[str], list[str]]:
    """Split *links* into ``(directories, files)``, skipping ``./``,
    ``../`` and empty entries."""
    dirs: list[str] = []
    files: list[str] = []
    for link in links:
        if not link or link in _SELF_OR_PARENT:
            continue
        if link.endswith("/"):
            dirs.append(link)
        else:
            files.append(link)
    return dirs, files
