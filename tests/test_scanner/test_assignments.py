"""Tests for the assignment-literal check (SS-001)."""

from __future__ import annotations

import pytest

from secretsift.core.config import ScanConfig
from secretsift.core.exceptions import ConfigError
from secretsift.core.models import FindingKind, Reason
from secretsift.scanner.assignments import (
    AssignmentLiteralCheck,
    find_assignment_findings,
    has_suspicious_name,
    looks_like_random,
)

LONG_KEY = "sec1-test1234ugugugiugtiutuytuyfuyhfghjfjhgjhgjhghjghjkhjkhjkhkjy"


class TestLooksLikeRandom:
    def test_twenty_chars_is_not_random(self):
        """Length must strictly exceed 20."""
        assert looks_like_random("a" * 20) is False

    def test_twenty_one_chars_is_random(self):
        assert looks_like_random("a" * 21) is True

    def test_key_punctuation_counts_as_allowed(self):
        assert looks_like_random("ab+/=-" * 4) is True

    def test_mostly_spaces_is_not_random(self):
        assert looks_like_random("hello there my friend, how are you") is False

    def test_exactly_eighty_percent(self):
        """20 allowed chars out of 25 sits exactly on the threshold."""
        literal = "a" * 20 + " " * 5
        assert looks_like_random(literal) is True

    def test_below_eighty_percent(self):
        literal = "a" * 19 + " " * 6
        assert looks_like_random(literal) is False


class TestSuspiciousName:
    @pytest.mark.parametrize("name", ["password", "dbPassword", "MY_SECRET", "apiKey", "refreshToken"])
    def test_sensitive_names(self, name):
        assert has_suspicious_name(name, ScanConfig().name_keywords)

    def test_api_key_with_underscore_is_not_a_name_match(self):
        """Only the contiguous spelling 'apikey' counts for names."""
        assert not has_suspicious_name("api_key", ScanConfig().name_keywords)

    def test_plain_name(self):
        assert not has_suspicious_name("username", ScanConfig().name_keywords)


class TestAssignmentLiteralCheck:
    def test_name_triggered_match(self):
        findings = find_assignment_findings('String password = "abcd";')
        assert len(findings) == 1
        f = findings[0]
        assert f.kind == FindingKind.ASSIGNMENT_MATCH
        assert f.variable_name == "password"
        assert f.literal_length == 4
        assert f.reasons == (Reason.SUSPICIOUS_NAME,)
        assert f.offset == 0

    def test_both_triggers_yield_one_finding(self):
        findings = find_assignment_findings(f'String apiKey = "{LONG_KEY}";')
        assert len(findings) == 1
        assert findings[0].reasons == (Reason.SUSPICIOUS_NAME, Reason.RANDOM_LITERAL)
        assert findings[0].literal_length == len(LONG_KEY)

    def test_shape_only_match(self):
        findings = find_assignment_findings(f'var x = "{"a" * 21}";')
        assert len(findings) == 1
        assert findings[0].reasons == (Reason.RANDOM_LITERAL,)

    def test_shape_boundary_not_triggered(self):
        assert find_assignment_findings(f'var x = "{"a" * 20}";') == []

    def test_short_literal_ignored(self):
        assert find_assignment_findings('String password = "abc";') == []

    def test_declaration_keyword_case_insensitive(self):
        findings = find_assignment_findings('FINAL token = "abcdef";')
        assert [f.variable_name for f in findings] == ["token"]

    def test_requires_declaration_keyword(self):
        assert find_assignment_findings('password = "abcdef";') == []

    def test_matches_in_text_order(self):
        text = 'String token = "abcd";\nchar secretValue = "wxyz";\nString name = "bob!";'
        findings = find_assignment_findings(text)
        assert [f.variable_name for f in findings] == ["token", "secretValue"]
        assert findings[0].offset < findings[1].offset

    def test_custom_min_literal_length(self):
        check = AssignmentLiteralCheck(ScanConfig(min_literal_length=8))
        assert check.run('String password = "abcdefg";') == []
        assert len(check.run('String password = "abcdefgh";')) == 1

    def test_invalid_declaration_pattern_fails_at_construction(self):
        with pytest.raises(ConfigError):
            AssignmentLiteralCheck(ScanConfig(declaration_keywords=["(String"]))
