"""Liveness checks for DNSBL zones.

A blacklist is considered alive when its zone still publishes NS records.
Dead DNSBLs are usually dropped from DNS entirely, so querying them only
costs timeouts.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Optional

import dns.exception
import dns.resolver

from .models import AliveCheckResult


class LivenessChecker:
    """Checks which DNSBL zones are still operational."""

    def __init__(
        self, timeout: float = 5.0, workers: int = 20, dns_server: str = ""
    ):
        self.logger = logging.getLogger(__name__)
        self.workers = max(1, workers)

        self.resolver = dns.resolver.Resolver(configure=not dns_server)
        if dns_server:
            self.resolver.nameservers = [dns_server]
        self.resolver.timeout = timeout
        self.resolver.lifetime = timeout * 2

    def is_alive(self, host_name: str) -> bool:
        """Check a single DNSBL zone for NS records."""
        zone = host_name.strip().rstrip(".")
        try:
            answers = self.resolver.resolve(zone, "NS")
        except (
            dns.resolver.NXDOMAIN,
            dns.resolver.NoAnswer,
            dns.resolver.NoNameservers,
            dns.exception.Timeout,
        ):
            return False
        except dns.exception.DNSException as e:
            self.logger.debug(f"NS lookup error for {zone}: {e}")
            return False

        return len(answers) > 0

    def check(self, host_name: str) -> AliveCheckResult:
        return AliveCheckResult(
            host_name=host_name, is_responsive=self.is_alive(host_name)
        )

    def check_all(self, host_names: list[str]) -> list[AliveCheckResult]:
        """Check all DNSBL zones in parallel, keeping input order."""
        results: list[Optional[AliveCheckResult]] = [None] * len(host_names)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures: dict[Future[AliveCheckResult], int] = {
                executor.submit(self.check, host_name): index
                for index, host_name in enumerate(host_names)
            }

            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except Exception as e:
                    host_name = host_names[index]
                    self.logger.warning(f"Failed to check {host_name}: {e}")
                    results[index] = AliveCheckResult(
                        host_name=host_name, is_responsive=False, error=str(e)
                    )

        alive = [r for r in results if r is not None and r.is_responsive]
        self.logger.info(f"{len(alive)} of {len(host_names)} blacklists are alive")

        return [r for r in results if r is not None]
