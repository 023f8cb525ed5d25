"""Assignment-literal check (SS-001).

Flags declarations such as ``String apiKey = "..."`` when the variable name
looks sensitive or the literal looks like a generated key. Matching is purely
textual: escaped quotes, multi-line literals and nesting are not understood.
"""

from __future__ import annotations

from secretsift.core.config import ScanConfig
from secretsift.core.models import Finding, FindingKind, Reason
from secretsift.scanner.base import BaseCheck

RANDOM_EXTRA_CHARS = "+/=-"


def looks_like_random(
    literal: str,
    min_length: int = 20,
    ratio: float = 0.8,
    extra_chars: str = RANDOM_EXTRA_CHARS,
) -> bool:
    """Return True if *literal* is longer than *min_length* and mostly key-alphabet chars.

    The key alphabet is letters, digits and *extra_chars*, which covers
    base64 and hex tokens.
    """
    if len(literal) <= min_length:
        return False
    allowed = sum(1 for c in literal if c.isalnum() or c in extra_chars)
    return allowed >= len(literal) * ratio


def has_suspicious_name(name: str, keywords: list[str]) -> bool:
    lowered = name.lower()
    return any(k.lower() in lowered for k in keywords)


class AssignmentLiteralCheck(BaseCheck):
    """Detect declarations assigning a secret-looking string literal."""

    check_id = "SS-001"
    kind = FindingKind.ASSIGNMENT_MATCH
    description = "Hard-coded secret in assignment"

    def __init__(self, config: ScanConfig | None = None):
        self.config = config or ScanConfig()
        declarations = "|".join(self.config.declaration_keywords)
        self.pattern = self._compile(
            rf'\b({declarations})\b\s+([a-zA-Z0-9_]+)\s*=\s*"([^"]{{{self.config.min_literal_length},}})"'
        )

    def run(self, text: str) -> list[Finding]:
        findings = []
        for m in self.pattern.finditer(text):
            var_name = m.group(2)
            literal = m.group(3)

            reasons = []
            if has_suspicious_name(var_name, self.config.name_keywords):
                reasons.append(Reason.SUSPICIOUS_NAME)
            if looks_like_random(
                literal,
                self.config.random_min_length,
                self.config.random_ratio,
                self.config.random_extra_chars,
            ):
                reasons.append(Reason.RANDOM_LITERAL)

            if reasons:
                findings.append(self._make_finding(
                    reasons,
                    variable_name=var_name,
                    literal_length=len(literal),
                    offset=m.start(),
                ))
        return findings


def find_assignment_findings(text: str, config: ScanConfig | None = None) -> list[Finding]:
    """Run the assignment-literal check over *text* with *config*."""
    return AssignmentLiteralCheck(config).run(text)
