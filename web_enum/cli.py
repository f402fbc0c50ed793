"""
Command-line interface for the directory enumerator.
"""

import argparse
import logging
import os
import sys
import time

import urllib3

from web_enum.config import (
    DEFAULT_LIST_DEPTH,
    DEFAULT_MAX_DEPTH,
    DEFAULT_USER_AGENT,
    CONFIRM_THRESHOLD,
    REQUEST_TIMEOUT,
    auto_concurrency,
    load_wordlist,
)
from web_enum.core.classifier import Classifier
from web_enum.core.enumerator import DirectoryEnumerator
from web_enum.core.lister import DirectoryLister
from web_enum.session import HttpClient, build_session
from web_enum.utils.log import setup_logging, log
from web_enum.utils.url import is_http_url


def _add_common_arguments(parser: argparse.ArgumentParser, depth: int) -> None:
    parser.add_argument(
        "url",
        help="Target URL (must start with http:// or https://)",
    )
    parser.add_argument(
        "--depth", type=int, default=depth,
        help=f"Maximum recursion depth (default: {depth})",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--user-agent", default=DEFAULT_USER_AGENT,
        help=f"User-Agent header (default: {DEFAULT_USER_AGENT!r})",
    )
    parser.add_argument(
        "--cookies", default=None, metavar="COOKIES",
        help="Raw Cookie header sent with every request (e.g. 'a=1; b=2')",
    )
    parser.add_argument(
        "--concurrency", default="auto", metavar="N",
        help="Worker ceiling, or 'auto' to detect from CPU/RAM (default: auto)",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="web-enum",
        description="Recursive web directory discovery – finds linked and "
                    "hidden subdirectories below a base URL.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  web-enum enum https://example.com\n"
            "  web-enum enum https://example.com --depth 1 --concurrency 8\n"
            "  web-enum enum http://10.0.0.5 --wordlist dirs.txt --threshold 3\n"
            "  web-enum list https://example.com/pub/ --depth 2\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enum = sub.add_parser(
        "enum", help="Enumerate linked and hidden directories",
    )
    _add_common_arguments(enum, DEFAULT_MAX_DEPTH)
    enum.add_argument(
        "--wordlist", metavar="FILE",
        help="Candidate directory names, one per line (default: built-in list)",
    )
    enum.add_argument(
        "--threshold", type=int, default=CONFIRM_THRESHOLD,
        help=f"Signals (0-5) needed to confirm a candidate "
             f"(default: {CONFIRM_THRESHOLD})",
    )

    lst = sub.add_parser(
        "list", help="List linked files and directories recursively",
    )
    _add_common_arguments(lst, DEFAULT_LIST_DEPTH)
    return parser


def _resolve_concurrency(parser: argparse.ArgumentParser, raw: str) -> int:
    raw = raw.strip().lower()
    if raw in ("auto", "0", ""):
        concurrency = auto_concurrency()
        log.info("Auto-detected concurrency: %d workers (CPU: %s, RAM-aware)",
                 concurrency, os.cpu_count())
        return concurrency
    try:
        concurrency = int(raw)
    except ValueError:
        parser.error(f"invalid --concurrency value: {raw!r}")
    if concurrency < 1:
        parser.error("--concurrency must be >= 1")
    return concurrency


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not is_http_url(args.url):
        parser.error(f"URL must start with http:// or https://: {args.url}")
    if args.depth < 0:
        parser.error("--depth must be >= 0")
    if args.timeout <= 0:
        parser.error("--timeout must be > 0")

    wordlist = None
    if args.command == "enum":
        if not 0 <= args.threshold <= 5:
            parser.error("--threshold must be between 0 and 5")
        if args.wordlist:
            try:
                wordlist = load_wordlist(args.wordlist)
            except OSError as exc:
                parser.error(f"cannot read wordlist {args.wordlist}: {exc}")
            if not wordlist:
                parser.error(f"wordlist {args.wordlist} is empty")

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    concurrency = _resolve_concurrency(parser, args.concurrency)
    session = build_session(
        user_agent=args.user_agent,
        cookies=args.cookies,
        verify_ssl=args.verify_ssl,
        pool_size=concurrency * 2,
    )
    client = HttpClient(session, timeout=args.timeout)

    if args.command == "enum":
        if wordlist is not None:
            log.info("Loaded %d candidates from %s", len(wordlist), args.wordlist)
        runner = DirectoryEnumerator(
            client,
            max_depth=args.depth,
            concurrency=concurrency,
            wordlist=wordlist,
            classifier=Classifier(threshold=args.threshold),
        )
    else:
        runner = DirectoryLister(
            client, max_depth=args.depth, concurrency=concurrency,
        )

    t0 = time.monotonic()
    try:
        runner.run(args.url)
    except KeyboardInterrupt:
        log.warning("Interrupted – waiting requests were abandoned")
        return 130
    finally:
        client.close()
    log.info("Total elapsed time: %.1f s", time.monotonic() - t0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
