# tests/test_reasons.py
"""
Tests for reason snippet extraction.
"""

from bias_review.services.influence_map import extract_reason
from bias_review.services.influence_map.reasons import truncate_reason


class TestExtractReasonLocated:
    """Tests for phrases found verbatim in their section body."""

    def test_whole_sentence_around_phrase(self):
        """The reason spans the sentence containing the phrase, minus the terminator."""
        body = 'The report called it a "historic betrayal" by officials.'

        reason = extract_reason("historic betrayal", body)

        assert reason == 'The report called it a "historic betrayal" by officials'

    def test_starts_after_previous_sentence(self):
        """The snippet starts after the nearest preceding boundary."""
        body = 'First point here. The piece calls them "thugs" repeatedly! Another point.'

        assert extract_reason("thugs", body) == 'The piece calls them "thugs" repeatedly'

    def test_newline_is_a_boundary(self):
        """Newlines bound the snippet on both sides."""
        body = 'Line one\nIt uses "crisis" language\nNext line'

        assert extract_reason("crisis", body) == 'It uses "crisis" language'

    def test_case_insensitive_lookup(self):
        """The phrase is located regardless of letter case."""
        body = "Officials warned of a HISTORIC BETRAYAL. More follows."

        assert extract_reason("historic betrayal", body) == "Officials warned of a HISTORIC BETRAYAL"

    def test_position_unaffected_by_lowercase_expansion(self):
        """Characters that grow when lowercased do not shift the located sentence."""
        body = '\u0130\u0130\u0130\u0130 said "spin". Then more text follows here.'

        assert extract_reason("spin", body) == '\u0130\u0130\u0130\u0130 said "spin"'

    def test_lookahead_cutoff_without_following_boundary(self):
        """With no boundary after the phrase, the snippet stops 120 chars past it."""
        body = 'Says "word" ' + "y" * 200

        assert extract_reason("word", body) == 'Says "word" ' + "y" * 118

    def test_long_sentence_is_truncated(self):
        """Snippets over 160 characters are cut at a word boundary with an ellipsis."""
        body = 'He said "spin" ' + "long " * 50 + "."

        reason = extract_reason("spin", body)

        assert reason.endswith("…")
        assert len(reason) <= 161
        assert reason.startswith('He said "spin"')


class TestExtractReasonFallback:
    """Tests for phrases paraphrased rather than repeated in the body."""

    def test_first_sentence(self):
        """An unlocated phrase falls back to the first sentence."""
        body = "Framing is one-sided. More detail follows here."

        assert extract_reason("not in body", body) == "Framing is one-sided"

    def test_first_chars_without_terminator(self):
        """Without any sentence terminator the first 120 chars are used."""
        body = "x" * 200

        assert extract_reason("zz", body) == "x" * 120

    def test_terminator_at_start(self):
        """A terminator at position zero does not count as a first sentence."""
        assert extract_reason("zz", ". abc") == ". abc"

    def test_empty_body(self):
        assert extract_reason("anything", "") == ""


class TestTruncateReason:
    """Tests for truncate_reason."""

    def test_short_snippet_unchanged(self):
        snippet = "A short reason."
        assert truncate_reason(snippet) == snippet

    def test_exactly_at_limit_unchanged(self):
        snippet = "z" * 160
        assert truncate_reason(snippet) == snippet

    def test_cut_drops_partial_word(self):
        """The trailing partial word is removed before the ellipsis."""
        snippet = " ".join(["alpha"] * 40)

        truncated = truncate_reason(snippet)

        assert truncated == " ".join(["alpha"] * 26) + "…"

    def test_custom_limit(self):
        assert truncate_reason("one two three", max_chars=9) == "one two…"
