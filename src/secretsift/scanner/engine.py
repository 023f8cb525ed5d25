"""Scanner engine — runs both checks over a text and aggregates the result."""

from __future__ import annotations

import logging

from secretsift.core.config import ScanConfig
from secretsift.core.exceptions import InvalidInputError
from secretsift.core.models import Finding, ScanResult
from secretsift.scanner import ALL_CHECKS
from secretsift.scanner.base import BaseCheck

logger = logging.getLogger("secretsift.scanner")


class SecretScanner:
    """Heuristic hard-coded secret scanner.

    Settings are checked and patterns compiled once, here; bad *config* raises
    :class:`~secretsift.core.exceptions.ConfigError` before any scan runs.
    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, config: ScanConfig | None = None):
        self.config = config or ScanConfig()
        self.config.validate()
        self.checks: list[BaseCheck] = [check_cls(self.config) for check_cls in ALL_CHECKS]

    def scan(self, text: str) -> ScanResult:
        """Scan *text* and return its findings."""
        if text is None:
            raise InvalidInputError("No text to scan")
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected str, got {type(text).__name__}")

        findings: list[Finding] = []
        for check in self.checks:
            check_findings = check.run(text)
            logger.debug("%s produced %d finding(s)", check.check_id, len(check_findings))
            findings.extend(check_findings)

        return ScanResult(findings=tuple(findings))


_default_scanner = SecretScanner()


def scan(text: str) -> ScanResult:
    """Scan *text* with the default configuration."""
    return _default_scanner.scan(text)
