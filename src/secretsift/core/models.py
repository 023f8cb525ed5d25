"""Shared data models used across secretsift modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class FindingKind(enum.Enum):
    ASSIGNMENT_MATCH = "AssignmentMatch"
    KEYWORD_MATCH = "KeywordMatch"


class Reason(enum.Enum):
    SUSPICIOUS_NAME = "suspicious_name"
    RANDOM_LITERAL = "random_literal"
    KEYWORD_PROXIMITY = "keyword_proximity"


REASON_LABELS = {
    Reason.SUSPICIOUS_NAME: "suspicious variable name",
    Reason.RANDOM_LITERAL: "random-looking literal",
    Reason.KEYWORD_PROXIMITY: "secret-related keyword in text",
}


@dataclass(frozen=True)
class Finding:
    """A single suspected secret (or keyword hint) reported by a scan."""

    kind: FindingKind
    reasons: tuple[Reason, ...]
    variable_name: str | None = None
    literal_length: int | None = None
    keywords: tuple[str, ...] = ()
    offset: int | None = None

    @property
    def is_assignment(self) -> bool:
        return self.kind == FindingKind.ASSIGNMENT_MATCH

    @property
    def message(self) -> str:
        if self.is_assignment:
            return (
                f"possible hard-coded secret found: variable '{self.variable_name}' "
                f"with literal length {self.literal_length}"
            )
        return "secret-related keyword(s) found in source (further manual review recommended)"

    @property
    def reason_text(self) -> str:
        return ", ".join(REASON_LABELS[r] for r in self.reasons)

    def to_dict(self) -> dict:
        data: dict = {
            "kind": self.kind.value,
            "reasons": [r.value for r in self.reasons],
            "offset": self.offset,
            "message": self.message,
        }
        if self.is_assignment:
            data["variable_name"] = self.variable_name
            data["literal_length"] = self.literal_length
        else:
            data["keywords"] = list(self.keywords)
        return data


@dataclass(frozen=True)
class ScanResult:
    """Ordered findings of one scan.

    Assignment findings come first, in the order their matches occur in the
    text, followed by at most one keyword finding.
    """

    findings: tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def any_found(self) -> bool:
        return bool(self.findings)

    @property
    def is_clean(self) -> bool:
        return not self.findings

    @property
    def assignment_findings(self) -> list[Finding]:
        return [f for f in self.findings if f.kind == FindingKind.ASSIGNMENT_MATCH]

    @property
    def keyword_finding(self) -> Finding | None:
        for f in self.findings:
            if f.kind == FindingKind.KEYWORD_MATCH:
                return f
        return None

    def to_dict(self) -> dict:
        return {
            "any_found": self.any_found,
            "findings": [f.to_dict() for f in self.findings],
        }
