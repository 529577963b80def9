"""Unit tests for the Sentiment enum."""

import pytest

from sentiment_service.models.enums import Sentiment


class TestTryParse:
    """Sentiment.try_parse is total: it never raises."""
    
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("positive", Sentiment.POSITIVE),
            ("negative", Sentiment.NEGATIVE),
            ("neutral", Sentiment.NEUTRAL),
        ],
    )
    def test_canonical_labels(self, text, expected):
        assert Sentiment.try_parse(text) is expected
    
    def test_surrounding_whitespace_is_ignored(self):
        assert Sentiment.try_parse("  neutral \t") is Sentiment.NEUTRAL
    
    @pytest.mark.parametrize(
        "text",
        ["Positive", "NEGATIVE", "positive.", "very positive", "somewhat positive-ish", "", "   "],
    )
    def test_anything_else_is_absent(self, text):
        assert Sentiment.try_parse(text) is None
    
    def test_enum_member_name_is_not_a_label(self):
        assert Sentiment.try_parse("POSITIVE") is None


def test_str_is_canonical_value():
    assert str(Sentiment.NEGATIVE) == "negative"
    assert Sentiment.NEUTRAL.value == "neutral"
