from unittest.mock import MagicMock, patch

import dns.exception
import dns.resolver
import pytest

from dnsbl_lists import AliveCheckResult, LivenessChecker


class TestLivenessChecker:
    @pytest.fixture
    def checker(self):
        checker = LivenessChecker(timeout=1, workers=4, dns_server="127.0.0.1")
        checker.resolver = MagicMock()
        return checker

    def test_resolver_settings(self):
        with patch("dnsbl_lists.liveness.dns.resolver.Resolver") as resolver_cls:
            checker = LivenessChecker(timeout=2, workers=3, dns_server="10.0.0.53")

        resolver_cls.assert_called_once_with(configure=False)
        assert checker.resolver.nameservers == ["10.0.0.53"]
        assert checker.resolver.timeout == 2
        assert checker.resolver.lifetime == 4
        assert checker.workers == 3

    def test_system_resolver_by_default(self):
        with patch("dnsbl_lists.liveness.dns.resolver.Resolver") as resolver_cls:
            LivenessChecker()

        resolver_cls.assert_called_once_with(configure=True)

    def test_zone_with_ns_records_is_alive(self, checker):
        checker.resolver.resolve.return_value = ["ns1.example.net."]

        assert checker.is_alive("bl.example.net.") is True
        checker.resolver.resolve.assert_called_once_with("bl.example.net", "NS")

    @pytest.mark.parametrize(
        "error",
        [
            dns.resolver.NXDOMAIN(),
            dns.resolver.NoAnswer(),
            dns.resolver.NoNameservers(),
            dns.exception.Timeout(),
            dns.exception.DNSException("boom"),
        ],
    )
    def test_dns_failures_mean_dead(self, checker, error):
        checker.resolver.resolve.side_effect = error

        assert checker.is_alive("dead.example.net") is False

    def test_check_all_keeps_input_order(self, checker):
        alive = {"a.example", "c.example"}

        def resolve(zone, rdtype):
            if zone in alive:
                return ["ns." + zone]
            raise dns.resolver.NXDOMAIN()

        checker.resolver.resolve.side_effect = resolve

        results = checker.check_all(["a.example", "b.example", "c.example"])

        assert [(r.host_name, r.is_responsive) for r in results] == [
            ("a.example", True),
            ("b.example", False),
            ("c.example", True),
        ]
        assert all(isinstance(r, AliveCheckResult) for r in results)

    def test_unexpected_error_counts_as_dead(self, checker):
        checker.resolver.resolve.side_effect = RuntimeError("resolver crashed")

        results = checker.check_all(["a.example"])

        assert results[0].is_responsive is False
        assert "resolver crashed" in results[0].error

    def test_check_all_empty(self, checker):
        assert checker.check_all([]) == []
