"""Heuristic checks for hard-coded secrets."""

from secretsift.scanner.assignments import AssignmentLiteralCheck, looks_like_random
from secretsift.scanner.base import BaseCheck
from secretsift.scanner.keywords import KeywordProximityCheck

# Run order is output order: assignment findings precede the keyword finding.
ALL_CHECKS: list[type[BaseCheck]] = [
    AssignmentLiteralCheck,
    KeywordProximityCheck,
]

__all__ = [
    "ALL_CHECKS",
    "AssignmentLiteralCheck",
    "BaseCheck",
    "KeywordProximityCheck",
    "looks_like_random",
]
