"""
Recursive link listing: follows ``name/`` anchors only, without probing.
"""

from dataclasses import dataclass, field

from web_enum.config import (
    DEFAULT_CONCURRENCY,
    DEFAULT_FILE_CATEGORY,
    DEFAULT_LIST_DEPTH,
    FILE_CATEGORIES,
)
from web_enum.core.session import EnumerationSession
from web_enum.core.walker import Node, TreeWalker
from web_enum.extraction.links import extract_links, split_links
from web_enum.session import HttpClient
from web_enum.utils.log import log
from web_enum.utils.url import combine_url


def file_category(name: str) -> str:
    """Category tag for *name* based on its extension."""
    ext = name.rsplit(".", 1)[-1].lower()
    for category, exts in FILE_CATEGORIES.items():
        if ext in exts:
            return category
    return DEFAULT_FILE_CATEGORY


@dataclass
class ListingNode:
    url: str
    depth: int
    responded: bool
    directories: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


@dataclass
class ListingReport:
    root: str
    nodes: list[ListingNode] = field(default_factory=list)

    @property
    def files(self) -> list[str]:
        """Absolute URLs of every listed file."""
        return [combine_url(n.url, f) for n in self.nodes for f in n.files]


class DirectoryLister(TreeWalker):
    thread_name = "list-node"

    def __init__(
        self,
        client: HttpClient,
        max_depth: int = DEFAULT_LIST_DEPTH,
        concurrency: int | None = DEFAULT_CONCURRENCY,
    ) -> None:
        super().__init__(max_depth, concurrency)
        self.client = client

    def run(
        self,
        url: str,
        session: EnumerationSession | None = None,
    ) -> ListingReport:
        self.session = session if session is not None else EnumerationSession()
        log.info("Target URL       : %s", url)
        log.info("Max depth        : %d", self.max_depth)
        report = ListingReport(root=url, nodes=self.walk(url))
        log.info("Listing complete. pages=%d  files=%d",
                 len(report.nodes), len(report.files))
        return report

    def expand(self, node: Node) -> tuple[ListingNode, list[str]]:
        url = node.url
        indent = "  " * node.depth
        log.info("%s[LIST] Listing: %s", indent, url)

        text = self.client.fetch_text(url)
        if not text:
            log.warning("%s[NO-RESPONSE] (no response) %s", indent, url)
            return ListingNode(url, node.depth, responded=False), []

        links = extract_links(text)
        if not links:
            log.info("%s(no links)", indent)
            return ListingNode(url, node.depth, responded=True), []

        dirs, files = split_links(links)
        if not dirs and not files:
            log.info("%s(no files or directories)", indent)

        for name in files:
            log.info("%s  [%s] %s", indent, file_category(name), name)

        children = []
        for d in dirs:
            log.info("%s[DIR] %s", indent, d)
            children.append(combine_url(url, d))

        return ListingNode(url, node.depth, True, dirs, files), children
