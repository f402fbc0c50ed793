"""
HTTP session creation and the fetch client used by the enumerator.

Provides sessions with:
* A fixed User-Agent and optional raw ``Cookie`` header
* No automatic retries (a failed request is a negative result)
* A connection pool sized to the worker ceiling
"""

from dataclasses import dataclass

import requests
import urllib3
from requests.adapters import HTTPAdapter

from web_enum.config import DEFAULT_USER_AGENT, REQUEST_TIMEOUT
from web_enum.utils.log import log


def build_session(
    user_agent: str = DEFAULT_USER_AGENT,
    cookies: str | None = None,
    verify_ssl: bool = True,
    pool_size: int = 20,
) -> requests.Session:
    """Return a ``requests.Session`` with keep-alive, the given
    User-Agent, and retries disabled."""
    session = requests.Session()
    adapter = HTTPAdapter(
        max_retries=0,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "*/*",
        "Connection": "keep-alive",
    })
    if cookies:
        session.headers["Cookie"] = cookies
    return session


@dataclass(frozen=True)
class FetchResult:
    """Body and status of one GET.  ``status_code`` is ``None`` when the
    request never completed (timeout, DNS, refused connection)."""

    text: str = ""
    status_code: int | None = None

    @classmethod
    def failed(cls) -> "FetchResult":
        return cls()

    @property
    def empty(self) -> bool:
        return not self.text


class HttpClient:
    """
    Single-shot GET with a bounded timeout.

    Every completed response (2xx through 5xx) yields its body; transport
    failures and unparsable URLs yield an empty :class:`FetchResult`.  Redirects are not
    followed so that 301/302 stay visible to the classifier.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.session = session if session is not None else build_session()
        self.timeout = timeout

    def fetch(self, url: str) -> FetchResult:
        try:
            resp = self.session.get(
                url, timeout=self.timeout, allow_redirects=False
            )
        except (requests.RequestException,
                urllib3.exceptions.HTTPError,
                ValueError) as exc:
            # LocationParseError from urllib3 is a ValueError, not a
            # RequestException
            log.debug("  [ERR] GET %s failed – %s", url, exc)
            return FetchResult.failed()
        log.debug("  ← HTTP %s  %d bytes  %s",
                  resp.status_code, len(resp.content), url)
        return FetchResult(text=resp.text, status_code=resp.status_code)

    def fetch_text(self, url: str) -> str:
        """Return the body of *url*, or ``""`` on failure."""
        return self.fetch(url).text

    def close(self) -> None:
        self.session.close()
