"""Tests for the keyword proximity check (SS-002)."""

from __future__ import annotations

import pytest

from secretsift.core.config import ScanConfig
from secretsift.core.exceptions import ConfigError
from secretsift.core.models import FindingKind, Reason
from secretsift.scanner.keywords import KeywordProximityCheck, find_keyword_finding


class TestKeywordProximityCheck:
    def test_keyword_in_comment(self):
        finding = find_keyword_finding("// remember to rotate the api_key next quarter")
        assert finding is not None
        assert finding.kind == FindingKind.KEYWORD_MATCH
        assert finding.reasons == (Reason.KEYWORD_PROXIMITY,)
        assert finding.keywords == ("api_key",)
        assert finding.variable_name is None

    def test_no_keyword(self):
        assert find_keyword_finding("int x = 1;") is None

    @pytest.mark.parametrize("word", ["password", "PASSWD", "Secret", "apikey", "api_key", "TOKEN"])
    def test_each_keyword_case_insensitive(self, word):
        assert find_keyword_finding(f"the {word} here") is not None

    def test_whole_word_only(self):
        """Keywords embedded in longer identifiers are not matched."""
        assert find_keyword_finding("String apiKeyValue = getPasswords();") is None

    def test_distinct_keywords_in_first_occurrence_order(self):
        finding = find_keyword_finding("token, then secret, then TOKEN again")
        assert finding.keywords == ("token", "secret")
        assert finding.offset == 0

    def test_single_finding_for_many_hits(self):
        check = KeywordProximityCheck()
        assert len(check.run("password password secret token")) == 1

    def test_custom_keywords(self):
        check = KeywordProximityCheck(ScanConfig(proximity_keywords=["credential"]))
        assert check.run("password") == []
        assert len(check.run("rotate the credential")) == 1

    def test_invalid_keyword_pattern_fails_at_construction(self):
        with pytest.raises(ConfigError):
            KeywordProximityCheck(ScanConfig(proximity_keywords=["[unclosed"]))
