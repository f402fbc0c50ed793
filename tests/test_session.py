"""
Tests for the HTTP session factory and fetch client.
"""

import unittest
from unittest.mock import MagicMock

import requests
import urllib3
from urllib3.exceptions import LocationParseError

from web_enum.config import DEFAULT_USER_AGENT, REQUEST_TIMEOUT
from web_enum.session import FetchResult, HttpClient, build_session


class TestBuildSession(unittest.TestCase):
    def test_user_agent(self):
        session = build_session(user_agent="TestAgent/1.0")
        self.assertEqual(session.headers["User-Agent"], "TestAgent/1.0")

    def test_default_user_agent(self):
        self.assertEqual(build_session().headers["User-Agent"], DEFAULT_USER_AGENT)

    def test_cookie_header(self):
        session = build_session(cookies="sid=abc; theme=dark")
        self.assertEqual(session.headers["Cookie"], "sid=abc; theme=dark")

    def test_no_cookie_header_by_default(self):
        self.assertNotIn("Cookie", build_session().headers)

    def test_retries_disabled(self):
        session = build_session()
        for prefix in ("http://example.com", "https://example.com"):
            adapter = session.get_adapter(prefix)
            self.assertEqual(adapter.max_retries.total, 0)

    def test_verify_ssl(self):
        self.assertFalse(build_session(verify_ssl=False).verify)
        self.assertTrue(build_session().verify)


class TestFetchResult(unittest.TestCase):
    def test_failed_is_empty(self):
        r = FetchResult.failed()
        self.assertTrue(r.empty)
        self.assertEqual(r.text, "")
        self.assertIsNone(r.status_code)

    def test_non_empty(self):
        self.assertFalse(FetchResult("x", 404).empty)


class TestHttpClient(unittest.TestCase):
    def _response(self, text, status):
        resp = MagicMock()
        resp.text = text
        resp.content = text.encode()
        resp.status_code = status
        return resp

    def test_fetch_returns_body_and_status(self):
        session = MagicMock()
        session.get.return_value = self._response("<html>ok</html>", 200)
        client = HttpClient(session, timeout=1.5)
        result = client.fetch("http://example.com/")
        self.assertEqual(result, FetchResult("<html>ok</html>", 200))
        session.get.assert_called_once_with(
            "http://example.com/", timeout=1.5, allow_redirects=False
        )

    def test_error_statuses_still_return_body(self):
        session = MagicMock()
        for status in (301, 404, 500):
            with self.subTest(status=status):
                session.get.return_value = self._response("body", status)
                result = HttpClient(session).fetch("http://example.com/x/")
                self.assertEqual(result.text, "body")
                self.assertEqual(result.status_code, status)

    def test_transport_errors_become_empty(self):
        session = MagicMock()
        for exc in (requests.ConnectionError("refused"),
                    requests.Timeout("slow"),
                    requests.exceptions.InvalidURL("bad")):
            with self.subTest(exc=type(exc).__name__):
                session.get.side_effect = exc
                result = HttpClient(session).fetch("http://unreachable.invalid/")
                self.assertEqual(result, FetchResult.failed())

    def test_unparsable_url_becomes_empty(self):
        session = MagicMock()
        session.get.side_effect = LocationParseError("a..b")
        result = HttpClient(session).fetch("http://a..b/")
        self.assertEqual(result, FetchResult.failed())

    def test_urllib3_errors_become_empty(self):
        session = MagicMock()
        session.get.side_effect = urllib3.exceptions.ProtocolError("reset")
        self.assertEqual(HttpClient(session).fetch("http://example.com/"),
                         FetchResult.failed())

    def test_single_attempt(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        HttpClient(session).fetch("http://example.com/")
        self.assertEqual(session.get.call_count, 1)

    def test_fetch_text(self):
        session = MagicMock()
        session.get.return_value = self._response("hello", 200)
        self.assertEqual(HttpClient(session).fetch_text("http://example.com/"), "hello")
        session.get.side_effect = requests.Timeout()
        self.assertEqual(HttpClient(session).fetch_text("http://example.com/"), "")

    def test_default_timeout(self):
        client = HttpClient(MagicMock())
        self.assertEqual(client.timeout, REQUEST_TIMEOUT)

    def test_close(self):
        session = MagicMock()
        HttpClient(session).close()
        session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
