import unittest

from pydantic import ValidationError

from ops_checks.models import MembershipCheckConfig, PingCheckConfig


class MembershipCheckConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = MembershipCheckConfig(url="http://es.local:2113/gossip")
        self.assertEqual(cfg.timeout, 15)
        self.assertEqual(cfg.headers, [])
        self.assertFalse(cfg.use_tls)
        self.assertFalse(cfg.has_auth)

    def test_https_scheme_implies_tls(self) -> None:
        cfg = MembershipCheckConfig(url="https://es.local:2113/gossip")
        self.assertTrue(cfg.use_tls)
        self.assertEqual(cfg.request_url, "https://es.local:2113/gossip")

    def test_empty_path_requests_root(self) -> None:
        cfg = MembershipCheckConfig(url="http://es.local:2113?x=1")
        self.assertEqual(cfg.request_url, "http://es.local:2113/?x=1")

    def test_is_frozen(self) -> None:
        cfg = MembershipCheckConfig(url="http://es.local:2113/gossip")
        with self.assertRaises(ValidationError):
            cfg.timeout = 3

    def test_rejects_bad_urls(self) -> None:
        for url in ("es.local:2113/gossip", "ftp://es.local/gossip", "http:///gossip"):
            with self.subTest(url=url):
                with self.assertRaises(ValidationError):
                    MembershipCheckConfig(url=url)

    def test_rejects_non_positive_timeout(self) -> None:
        with self.assertRaises(ValidationError):
            MembershipCheckConfig(url="http://es.local:2113/gossip", timeout=0)


class PingCheckConfigTests(unittest.TestCase):
    def test_default_url(self) -> None:
        self.assertEqual(PingCheckConfig().ping_url, "http://localhost:8000/metrics//ping")


if __name__ == "__main__":
    unittest.main()
