# bias_review/services/influence_map/phrases.py
"""
Quoted phrase extraction.

The analysis quotes its evidence with whatever glyphs the model emitted:
curly or straight, double or single. Any opening glyph may be closed by any
closing glyph, so a phrase opened with U+201C and closed with a straight
double quote still counts.
"""

from bias_review.constants import HighlightLimits

# Using Unicode escapes to ensure curly quotes are correctly defined
QUOTE_CHARS_OPEN = frozenset({
    "\u201c",  # Curly double open (U+201C)
    "\u2018",  # Curly single open (U+2018)
    '"',  # Straight double quote (U+0022)
    "'",  # Straight single quote (U+0027)
})

QUOTE_CHARS_CLOSE = frozenset({
    "\u201d",  # Curly double close (U+201D)
    "\u2019",  # Curly single close (U+2019)
    '"',
    "'",
})

# Characters that may not appear inside a quoted phrase
QUOTE_CHARS = QUOTE_CHARS_OPEN | QUOTE_CHARS_CLOSE


def _quote_free_run(body: str, start: int) -> int:
    """Length of the run of non-quote characters starting at `start`."""
    end = start
    while end < len(body) and body[end] not in QUOTE_CHARS:
        end += 1
    return end - start


def extract_quoted_phrases(
    body: str,
    min_chars: int = HighlightLimits.QUOTE_MIN_CHARS,
    max_chars: int = HighlightLimits.QUOTE_MAX_CHARS,
) -> list[str]:
    """
    Find every quoted phrase in a section body, in order of appearance.

    A phrase is a run of min_chars..max_chars non-quote characters between an
    opening glyph and a closing glyph. Runs longer than max_chars are not
    truncated, they simply do not match. The captured run is trimmed and
    dropped if it ends up shorter than min_chars. Duplicates are kept.
    """
    if not body:
        return []

    phrases = []
    pos = 0
    while pos < len(body):
        if body[pos] not in QUOTE_CHARS_OPEN:
            pos += 1
            continue

        run_start = pos + 1
        run_len = _quote_free_run(body, run_start)
        close_pos = run_start + run_len

        if (
            min_chars <= run_len <= max_chars
            and close_pos < len(body)
            and body[close_pos] in QUOTE_CHARS_CLOSE
        ):
            phrase = body[run_start:close_pos].strip()
            if len(phrase) >= min_chars:
                phrases.append(phrase)
            pos = close_pos + 1
        else:
            pos += 1

    return phrases
