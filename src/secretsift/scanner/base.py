"""Base check class for all scanner checks."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from secretsift.core.exceptions import ConfigError
from secretsift.core.models import Finding, FindingKind, Reason


class BaseCheck(ABC):
    """Abstract base class for all scanner checks."""

    check_id: str = ""
    kind: FindingKind = FindingKind.ASSIGNMENT_MATCH
    description: str = ""

    @abstractmethod
    def run(self, text: str) -> list[Finding]:
        """Run the check over *text*. Return findings in text order."""
        ...

    def _compile(self, pattern: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
        try:
            return re.compile(pattern, flags)
        except re.error as exc:
            raise ConfigError(f"{self.check_id}: invalid pattern {pattern!r}: {exc}") from exc

    def _make_finding(
        self,
        reasons: list[Reason],
        variable_name: str | None = None,
        literal_length: int | None = None,
        keywords: tuple[str, ...] = (),
        offset: int | None = None,
    ) -> Finding:
        """Helper to create a Finding with this check's kind."""
        return Finding(
            kind=self.kind,
            reasons=tuple(reasons),
            variable_name=variable_name,
            literal_length=literal_length,
            keywords=keywords,
            offset=offset,
        )
