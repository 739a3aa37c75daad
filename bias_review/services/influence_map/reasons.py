# bias_review/services/influence_map/reasons.py
"""
Reason snippets for flagged phrases.

A reason is the clause of the analysis surrounding the place where the phrase
was quoted: from the previous sentence boundary to the next one. When the
analysis paraphrases instead of repeating the phrase verbatim, the first
sentence of the section stands in for it. This is a best-effort heuristic,
not semantic alignment.
"""

import re

from bias_review.constants import HighlightLimits

# Boundaries used when walking out from the phrase
SENTENCE_BOUNDARY_CHARS = frozenset(".!?\n")
SENTENCE_BOUNDARY = re.compile(r"[.!?\n]")

# Boundaries used for the first-sentence fallback (newlines do not end it)
SENTENCE_END = re.compile(r"[.!?]")

_TRAILING_PARTIAL_WORD = re.compile(r"\s\S+$")


def truncate_reason(
    snippet: str,
    max_chars: int = HighlightLimits.REASON_MAX_CHARS,
    ellipsis: str = HighlightLimits.REASON_ELLIPSIS,
) -> str:
    """Cut a snippet to max_chars at a word boundary, marking the cut."""
    if len(snippet) <= max_chars:
        return snippet
    return _TRAILING_PARTIAL_WORD.sub("", snippet[:max_chars], count=1) + ellipsis


def _first_sentence(body: str) -> str:
    stop = SENTENCE_END.search(body)
    if stop and stop.start() > 0:
        return body[: stop.start()].strip()
    return body[: HighlightLimits.REASON_FALLBACK_CHARS].strip()


def _surrounding_sentence(body: str, idx: int, phrase_len: int) -> str:
    start = idx
    while start > 0 and body[start - 1] not in SENTENCE_BOUNDARY_CHARS:
        start -= 1

    after = idx + phrase_len
    stop = SENTENCE_BOUNDARY.search(body, after)
    if stop:
        end = stop.start()
    else:
        end = after + min(HighlightLimits.REASON_LOOKAHEAD_CHARS, len(body) - after)

    return body[start:end].strip()


def extract_reason(phrase: str, body: str) -> str:
    """
    Derive a short justification for a phrase from its section body.

    Args:
        phrase: The quoted phrase
        body: The section body the phrase was extracted from

    Returns:
        Snippet of at most REASON_MAX_CHARS characters (plus ellipsis)
    """
    found = re.search(re.escape(phrase), body, re.IGNORECASE)
    if found is None:
        snippet = _first_sentence(body)
    else:
        snippet = _surrounding_sentence(body, found.start(), found.end() - found.start())
    return truncate_reason(snippet)
