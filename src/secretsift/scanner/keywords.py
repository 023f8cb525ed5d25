"""Keyword proximity check (SS-002).

A coarse, high-recall pass: any whole-word occurrence of a secret-related
keyword, whether in code, a comment or a string, produces one finding that
asks for manual review.
"""

from __future__ import annotations

from secretsift.core.config import ScanConfig
from secretsift.core.models import Finding, FindingKind, Reason
from secretsift.scanner.base import BaseCheck


class KeywordProximityCheck(BaseCheck):
    """Detect secret-related keywords anywhere in the text."""

    check_id = "SS-002"
    kind = FindingKind.KEYWORD_MATCH
    description = "Secret-related keyword"

    def __init__(self, config: ScanConfig | None = None):
        self.config = config or ScanConfig()
        self.pattern = self._compile(rf"\b({'|'.join(self.config.proximity_keywords)})\b")

    def run(self, text: str) -> list[Finding]:
        first = None
        seen: list[str] = []
        for m in self.pattern.finditer(text):
            if first is None:
                first = m.start()
            word = m.group(1).lower()
            if word not in seen:
                seen.append(word)

        if first is None:
            return []
        return [self._make_finding(
            [Reason.KEYWORD_PROXIMITY],
            keywords=tuple(seen),
            offset=first,
        )]


def find_keyword_finding(text: str, config: ScanConfig | None = None) -> Finding | None:
    """Return the keyword finding for *text*, or None when no keyword occurs."""
    findings = KeywordProximityCheck(config).run(text)
    return findings[0] if findings else None
