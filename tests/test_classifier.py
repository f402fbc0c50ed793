"""
Tests for the five-signal existence classifier.
"""

import unittest

from web_enum.core.baseline import signature
from web_enum.core.classifier import Classifier, Signals, classify, extract_title


BASE = "http://example.com"

REFRESH_HOME = (
    '<html><head><meta http-equiv="refresh" content="0; url=http://example.com">'
    "</head><body>Redirecting…</body></html>"
)

LISTING = (
    "<html><head><title>Index of /backup</title></head>"
    "<body><h1>Index of /backup</h1>"
    '<a href="../">Parent Directory</a></body></html>'
)


class TestSignals(unittest.TestCase):
    def test_empty_signals(self):
        s = Signals()
        self.assertEqual(s.score, 0)
        self.assertEqual(s.labels(), [])

    def test_all_signals(self):
        s = Signals(True, True, True, True, True)
        self.assertEqual(s.score, 5)
        self.assertEqual(
            s.labels(),
            ["not-baseline", "status-ok", "dir-pattern", "title-ok", "not-redirect"],
        )

    def test_partial_labels_keep_order(self):
        s = Signals(not_baseline=True, not_redirect=True)
        self.assertEqual(s.score, 2)
        self.assertEqual(s.labels(), ["not-baseline", "not-redirect"])


class TestExtractTitle(unittest.TestCase):
    def test_title_found(self):
        self.assertEqual(extract_title("<TITLE> Admin </TITLE>"), " Admin ")

    def test_no_title(self):
        self.assertEqual(extract_title("<html></html>"), "")


class TestClassifier(unittest.TestCase):
    def setUp(self):
        self.clf = Classifier()

    def test_baseline_identical_scores_zero(self):
        baseline = signature(REFRESH_HOME)
        signals = self.clf.classify(REFRESH_HOME, 404, baseline, BASE)
        self.assertEqual(signals.score, 0)
        self.assertFalse(self.clf.is_confirmed(signals))

    def test_real_listing_scores_five(self):
        baseline = signature("<html><title>404 Not Found</title></html>")
        signals = self.clf.classify(LISTING, 200, baseline, BASE)
        self.assertEqual(signals.score, 5)
        self.assertTrue(self.clf.is_confirmed(signals))

    def test_module_level_classify(self):
        self.assertEqual(classify(REFRESH_HOME, 404, signature(REFRESH_HOME), BASE), 0)
        self.assertEqual(classify(LISTING, 200, b"other", BASE), 5)

    def test_generic_404_page_not_confirmed(self):
        page = "<html><title>404 Not Found</title><body>nope</body></html>"
        signals = self.clf.classify(page, 404, signature(page), BASE)
        # only "not-redirect" fires
        self.assertEqual(signals.score, 1)
        self.assertFalse(self.clf.is_confirmed(signals))

    def test_soft_404_with_status_200(self):
        page = "<html><title>Page Not Found</title></html>"
        signals = self.clf.classify(page, 200, signature(page), BASE)
        self.assertTrue(signals.status_ok)
        self.assertFalse(signals.not_baseline)
        self.assertFalse(signals.title_ok)
        self.assertEqual(signals.score, 2)

    def test_redirect_statuses_are_ok(self):
        for status in (200, 301, 302):
            with self.subTest(status=status):
                self.assertTrue(self.clf.classify("x", status, b"", BASE).status_ok)
        for status in (None, 204, 403, 404, 500):
            with self.subTest(status=status):
                self.assertFalse(self.clf.classify("x", status, b"", BASE).status_ok)

    def test_directory_patterns(self):
        for phrase in ("Index of /", "Parent Directory",
                       "Directory listing for /", "To Parent Directory"):
            with self.subTest(phrase=phrase):
                self.assertTrue(self.clf.classify(phrase, 404, b"", BASE).dir_pattern)

    def test_directory_patterns_case_sensitive(self):
        self.assertFalse(self.clf.classify("index of /", 404, b"", BASE).dir_pattern)

    def test_title_with_404_rejected(self):
        signals = self.clf.classify("<title>Error 404</title>", 200, b"", BASE)
        self.assertFalse(signals.title_ok)

    def test_empty_title_rejected(self):
        self.assertFalse(self.clf.classify("<title></title>", 200, b"", BASE).title_ok)

    def test_whitespace_title_accepted(self):
        self.assertTrue(self.clf.classify("<title>   </title>", 200, b"", BASE).title_ok)

    def test_meta_refresh_elsewhere_is_not_a_loop(self):
        body = '<meta http-equiv="refresh" content="0; url=https://other.net/">'
        self.assertTrue(self.clf.classify(body, 200, b"", BASE).not_redirect)

    def test_meta_refresh_case_insensitive(self):
        body = '<META HTTP-EQUIV="Refresh" CONTENT="0; URL=http://example.com/">'
        self.assertFalse(self.clf.classify(body, 200, b"", BASE).not_redirect)

    def test_custom_threshold(self):
        strict = Classifier(threshold=4)
        signals = Signals(not_baseline=True, status_ok=True, not_redirect=True)
        self.assertFalse(strict.is_confirmed(signals))
        self.assertTrue(Classifier(threshold=3).is_confirmed(signals))

    def test_custom_patterns(self):
        clf = Classifier(patterns=["Listing of"])
        self.assertTrue(clf.classify("Listing of /x", 404, b"", BASE).dir_pattern)
        self.assertFalse(clf.classify("Index of /x", 404, b"", BASE).dir_pattern)

    def test_deterministic(self):
        a = self.clf.classify(LISTING, 200, b"abc", BASE)
        b = self.clf.classify(LISTING, 200, b"abc", BASE)
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
