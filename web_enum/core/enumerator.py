"""
Recursive hidden-directory enumerator.

For every node (a directory URL at some depth):

1. claim the URL in the shared visited set (skip if taken or too deep)
2. fetch the page; an empty response ends the node
3. obtain the soft-404 baseline for the node (cached per URL)
4. collect linked subdirectories (``name/`` anchors)
5. probe every wordlist candidate not already linked, all at once,
   and keep the ones the classifier confirms
6. recurse into the union of linked and confirmed directories

Nothing is retried: a failed or empty fetch is simply no evidence.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from web_enum.config import COMMON_DIRS, DEFAULT_CONCURRENCY, DEFAULT_MAX_DEPTH
from web_enum.core.baseline import not_found_url, signature
from web_enum.core.classifier import Classifier, Signals
from web_enum.core.session import EnumerationSession
from web_enum.core.walker import Node, TreeWalker
from web_enum.extraction.links import directory_links, extract_links
from web_enum.session import HttpClient
from web_enum.utils.log import log
from web_enum.utils.url import combine_url


@dataclass
class ProbeResult:
    path: str
    url: str
    status_code: int | None
    signals: Signals
    confirmed: bool

    @property
    def score(self) -> int:
        return self.signals.score


@dataclass
class NodeReport:
    url: str
    depth: int
    responded: bool
    links: list[str] = field(default_factory=list)
    confirmed: list[ProbeResult] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)


@dataclass
class EnumerationReport:
    root: str
    nodes: list[NodeReport] = field(default_factory=list)
    baseline_fetches: int = 0
    baseline_hits: int = 0

    @property
    def explored(self) -> int:
        return len(self.nodes)

    @property
    def directories(self) -> list[str]:
        """Absolute URLs of every discovered directory, first-seen order."""
        seen: set[str] = set()
        out: list[str] = []
        for node in self.nodes:
            for url in node.directories:
                if url not in seen:
                    seen.add(url)
                    out.append(url)
        return out

    @property
    def confirmed(self) -> list[ProbeResult]:
        return [r for node in self.nodes for r in node.confirmed]


class DirectoryEnumerator(TreeWalker):
    """
    Discovers linked and unlinked subdirectories below a base URL.

    Nodes and probes run on two separate pools of ``concurrency`` threads
    each: a node blocks until all of its probes are answered, and keeping
    probes off the node pool means they can always make progress.
    """

    thread_name = "enum-node"

    def __init__(
        self,
        client: HttpClient,
        max_depth: int = DEFAULT_MAX_DEPTH,
        concurrency: int | None = DEFAULT_CONCURRENCY,
        wordlist: list[str] | None = None,
        classifier: Classifier | None = None,
    ) -> None:
        super().__init__(max_depth, concurrency)
        self.client = client
        self.wordlist = list(COMMON_DIRS if wordlist is None else wordlist)
        self.classifier = classifier if classifier is not None else Classifier()
        self._probes: ThreadPoolExecutor | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        base_url: str,
        session: EnumerationSession | None = None,
    ) -> EnumerationReport:
        self.session = session if session is not None else EnumerationSession()
        log.info("Target URL       : %s", base_url)
        log.info("Max depth        : %d", self.max_depth)
        log.info("Workers          : %d (+%d probe)", self.concurrency, self.concurrency)
        log.info("Wordlist         : %d candidates", len(self.wordlist))

        with ThreadPoolExecutor(
            max_workers=self.concurrency, thread_name_prefix="enum-probe"
        ) as probes:
            self._probes = probes
            try:
                nodes = self.walk(base_url)
            finally:
                self._probes = None

        baselines = self.session.baselines
        report = EnumerationReport(
            root=base_url,
            nodes=nodes,
            baseline_fetches=baselines.misses,
            baseline_hits=baselines.hits,
        )
        log.info(
            "Enumeration complete. explored=%d  directories=%d  confirmed=%d  "
            "baselines=%d",
            report.explored,
            len(report.directories),
            len(report.confirmed),
            report.baseline_fetches,
        )
        return report

    # ------------------------------------------------------------------
    # Per-node work
    # ------------------------------------------------------------------

    def expand(self, node: Node) -> tuple[NodeReport, list[str]]:
        url = node.url
        indent = "  " * node.depth
        log.info("%s[ENUM] Enumerating: %s", indent, url)

        page = self.client.fetch(url)
        if page.empty:
            log.warning("%s[NO-RESPONSE] (no response) %s", indent, url)
            return NodeReport(url, node.depth, responded=False), []

        baseline = self.session.baselines.get(url, self._compute_baseline)

        links = extract_links(page.text)
        found = directory_links(links)
        linked = set(found)

        if self._probes is None:
            raise RuntimeError("expand() called outside run()")
        futures = [
            self._probes.submit(self._probe, url, candidate, baseline, indent)
            for candidate in self.wordlist
            if candidate not in linked
        ]
        confirmed = [r for r in (f.result() for f in futures) if r is not None and r.confirmed]
        found.extend(r.path for r in confirmed)

        children = []
        for d in found:
            log.info("%s[DIR] %s", indent, d)
            children.append(combine_url(url, d))

        report = NodeReport(
            url=url,
            depth=node.depth,
            responded=True,
            links=links,
            confirmed=confirmed,
            directories=children,
        )
        return report, children

    def _compute_baseline(self, base_url: str) -> bytes:
        probe_url = not_found_url(base_url)
        sig = signature(self.client.fetch_text(probe_url))
        log.debug("  [BASELINE] %s → %d bytes (via %s)", base_url, len(sig), probe_url)
        return sig

    def _probe(
        self, base_url: str, path: str, baseline: bytes, indent: str
    ) -> ProbeResult | None:
        probe_url = combine_url(base_url, path)
        resp = self.client.fetch(probe_url)
        if resp.empty:
            log.debug("%s  [PROBE] %s – empty", indent, path)
            return None

        signals = self.classifier.classify(
            resp.text, resp.status_code, baseline, base_url
        )
        confirmed = self.classifier.is_confirmed(signals)
        if confirmed:
            log.info("%s[OK] %s  (%s)", indent, path, " ".join(signals.labels()))
        else:
            log.debug("%s  [PROBE] %s – score %d", indent, path, signals.score)
        return ProbeResult(
            path=path,
            url=probe_url,
            status_code=resp.status_code,
            signals=signals,
            confirmed=confirmed,
        )
