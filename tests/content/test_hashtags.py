"""Tests for hashtag and mention normalisation.

Tests cover:
- Single tag/handle normalisation
- De-duplication (case-insensitive, first spelling wins)
- Extraction from free text, including unicode
"""

import pytest

from prismo.content import (
    extract_hashtags,
    extract_mentions,
    normalize_hashtag,
    normalize_hashtags,
    normalize_mention,
    normalize_mentions,
)


class TestNormalizeHashtag:
    """Test normalize_hashtag and normalize_hashtags."""

    @pytest.mark.parametrize("raw, expected", [
        ("python", "python"),
        ("#python", "python"),
        ("  ##Python ", "Python"),
        ("#", ""),
        ("", ""),
    ])
    def test_normalize_single(self, raw, expected):
        assert normalize_hashtag(raw) == expected

    def test_dedupe_case_insensitive_keeps_first(self):
        """First spelling and position win."""
        assert normalize_hashtags(["#Python", "python", "#AI", "PYTHON"]) == ["Python", "AI"]

    def test_blanks_dropped(self):
        assert normalize_hashtags(["", "#", "  ", "#ok"]) == ["ok"]


class TestNormalizeMention:
    """Test normalize_mention and normalize_mentions."""

    @pytest.mark.parametrize("raw, expected", [
        ("user", "@user"),
        ("@user", "@user"),
        ("@@user ", "@user"),
        ("@", ""),
    ])
    def test_normalize_single(self, raw, expected):
        assert normalize_mention(raw) == expected

    def test_dedupe(self):
        assert normalize_mentions(["@Ann", "ann", "@bob"]) == ["@Ann", "@bob"]


class TestExtraction:
    """Test extract_hashtags and extract_mentions."""

    def test_extract_hashtags_in_order(self):
        text = "Launch day! #Startup #AI and more #ai"
        assert extract_hashtags(text) == ["Startup", "AI"]

    def test_extract_hashtags_unicode(self):
        assert extract_hashtags("Bom dia #café #日本") == ["café", "日本"]

    def test_extract_hashtags_empty(self):
        assert extract_hashtags("") == []
        assert extract_hashtags("no tags here") == []

    def test_extract_mentions(self):
        text = "Thanks @alice and @bob.smith. Mail me at me@example.com"
        assert extract_mentions(text) == ["@alice", "@bob.smith"]

    def test_extract_mentions_trailing_period(self):
        assert extract_mentions("ping @carol.") == ["@carol"]
