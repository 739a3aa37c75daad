# tests/test_phrases.py
"""
Tests for quoted phrase extraction.

Covers straight and curly quotes, mismatched glyph pairs, length bounds and
duplicate handling.
"""

from bias_review.services.influence_map import extract_quoted_phrases
from bias_review.services.influence_map.phrases import QUOTE_CHARS_CLOSE, QUOTE_CHARS_OPEN


class TestQuoteGlyphs:
    """Tests for the recognized quote glyph sets."""

    def test_open_set(self):
        assert QUOTE_CHARS_OPEN == {"“", "‘", '"', "'"}

    def test_close_set(self):
        assert QUOTE_CHARS_CLOSE == {"”", "’", '"', "'"}


class TestExtractQuotedPhrases:
    """Tests for extract_quoted_phrases."""

    def test_straight_double_quotes(self):
        """Straight double quotes delimit a phrase."""
        body = 'The report called it a "historic betrayal" by officials.'

        assert extract_quoted_phrases(body) == ["historic betrayal"]

    def test_curly_quotes(self):
        """Curly double and single quotes delimit phrases."""
        body = "It calls the plan a “radical agenda” and a ‘war on truth’."

        assert extract_quoted_phrases(body) == ["radical agenda", "war on truth"]

    def test_mismatched_glyphs_within_class(self):
        """Any opening glyph may be closed by any closing glyph."""
        body = "Described as “mixed signals\" and \"open ended”."

        assert extract_quoted_phrases(body) == ["mixed signals", "open ended"]

    def test_phrases_in_order_of_appearance(self):
        """Multiple phrases are returned in the order they appear."""
        body = 'Uses "alpha", then "beta", then "gamma".'

        assert extract_quoted_phrases(body) == ["alpha", "beta", "gamma"]

    def test_duplicates_within_body_are_kept(self):
        """Deduplication happens later, not during extraction."""
        body = '"a b" then "a b"'

        assert extract_quoted_phrases(body) == ["a b", "a b"]

    def test_captured_phrase_is_trimmed(self):
        """Whitespace inside the quotes is trimmed."""
        assert extract_quoted_phrases('Quoted " padded phrase " here') == ["padded phrase"]

    def test_single_character_is_discarded(self):
        """Runs shorter than two characters do not match."""
        assert extract_quoted_phrases('"a" is too short') == []

    def test_whitespace_only_is_discarded(self):
        """A run that trims below two characters is dropped."""
        assert extract_quoted_phrases('Empty "   " quote') == []

    def test_sixty_characters_is_the_limit(self):
        """Runs of up to 60 characters match; longer runs do not."""
        at_limit = "x" * 60
        over_limit = "y" * 61

        assert extract_quoted_phrases(f'"{at_limit}"') == [at_limit]
        assert extract_quoted_phrases(f'"{over_limit}"') == []

    def test_unterminated_quote(self):
        """An opening quote without a closing glyph yields nothing."""
        assert extract_quoted_phrases('It says "never closed') == []

    def test_empty_body(self):
        assert extract_quoted_phrases("") == []

    def test_no_quotes(self):
        assert extract_quoted_phrases("The article is broadly neutral.") == []
