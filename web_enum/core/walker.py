"""
Bounded-concurrency recursive tree walk.

Nodes are ``(url, depth)`` pairs.  Expanding a node runs on a fixed-size
thread pool; the driver loop on the calling thread submits children as
their parent finishes expanding, so no worker ever blocks waiting for a
subtree and the pool cannot deadlock however deep the tree is.  A node
counts as complete once it and every descendant are complete.
"""

from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any

from web_enum.config import DEFAULT_CONCURRENCY, auto_concurrency
from web_enum.core.session import EnumerationSession
from web_enum.utils.log import log


@dataclass(eq=False)
class Node:
    url: str
    depth: int
    parent: "Node | None" = field(default=None, repr=False)
    pending: int = 0
    explored: bool = False
    expanded: bool = False


def resolve_concurrency(concurrency: int | None) -> int:
    """``None`` or ``0`` selects :func:`auto_concurrency`."""
    if not concurrency:
        return auto_concurrency()
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")
    return concurrency


class TreeWalker:
    """
    Base class for depth-bounded recursive walks over a shared
    :class:`EnumerationSession`.

    Subclasses implement :meth:`expand`, returning a per-node report and
    the absolute URLs of the node's children.
    """

    thread_name = "walker"

    def __init__(
        self,
        max_depth: int,
        concurrency: int | None = DEFAULT_CONCURRENCY,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self.concurrency = resolve_concurrency(concurrency)
        self.session = EnumerationSession()

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def expand(self, node: Node) -> tuple[Any, list[str]]:
        raise NotImplementedError

    def on_complete(self, node: Node) -> None:
        log.debug("%s[DONE] %s", "  " * node.depth, node.url)

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def _visit(self, node: Node) -> tuple[Any, list[str]]:
        if not self.session.admit(node.url, node.depth, self.max_depth):
            log.debug("%s[SKIP] %s", "  " * node.depth, node.url)
            return None, []
        return self.expand(node)

    def walk(self, root_url: str) -> list[Any]:
        """Walk from *root_url* and return the reports of every explored
        node, in completion order of their expansion."""
        reports: list[Any] = []
        root = Node(root_url, 0)
        with ThreadPoolExecutor(
            max_workers=self.concurrency,
            thread_name_prefix=self.thread_name,
        ) as pool:
            pending: dict[Future, Node] = {pool.submit(self._visit, root): root}
            while pending:
                done, _ = wait(pending, return_when=FIRST_COMPLETED)
                for fut in done:
                    node = pending.pop(fut)
                    report, children = fut.result()
                    if report is not None:
                        node.explored = True
                        reports.append(report)
                    if node.depth < self.max_depth:
                        for child_url in children:
                            child = Node(child_url, node.depth + 1, parent=node)
                            node.pending += 1
                            pending[pool.submit(self._visit, child)] = child
                    node.expanded = True
                    self._settle(node)
        return reports

    def _settle(self, node: Node | None) -> None:
        while node is not None and node.expanded and node.pending == 0:
            if node.explored:
                self.on_complete(node)
            node = node.parent
            if node is not None:
                node.pending -= 1
