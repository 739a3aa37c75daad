# bias_review/services/influence_map/segments.py
"""
Locate highlight phrases in the article body and slice it into segments.

Matching is literal and case-insensitive. Longer phrases claim territory
first, so a short phrase inside an already-claimed longer one never
fragments the longer highlight. Whatever survives is emitted as an ordered,
gap-free, non-overlapping run of plain and highlighted segments whose texts
concatenate back to the body.
"""

import logging
import re
from bisect import bisect_left
from typing import Sequence

from bias_review.services.influence_map.types import HighlightEntry, Match, Segment, SegmentKind

logger = logging.getLogger(__name__)


def phrase_pattern(phrase: str) -> re.Pattern:
    """Compile a phrase for literal, case-insensitive matching."""
    return re.compile(re.escape(phrase), re.IGNORECASE)


def find_matches(content: str, entries: Sequence[HighlightEntry]) -> list[Match]:
    """
    Find non-overlapping matches for all entries, sorted by position.

    Entries are tried longest phrase first (stable for equal lengths). Each
    occurrence is accepted only if it does not overlap an accepted match.
    Accepted matches are kept sorted by start, so only the neighbours on
    either side of a candidate need checking.
    """
    by_length = sorted(entries, key=lambda e: len(e.phrase), reverse=True)
    accepted: list[Match] = []
    starts: list[int] = []
    dropped = 0

    for entry in by_length:
        for found in phrase_pattern(entry.phrase).finditer(content):
            start, end = found.span()
            if start == end:
                continue
            idx = bisect_left(starts, start)
            if (idx > 0 and accepted[idx - 1].overlaps(start, end)) or (
                idx < len(accepted) and accepted[idx].overlaps(start, end)
            ):
                dropped += 1
                continue
            starts.insert(idx, start)
            accepted.insert(idx, Match(start=start, end=end, entry=entry))

    if dropped:
        logger.debug(f"[INFLUENCE_MAP] Overlap filter dropped {dropped} occurrences")

    return accepted


def build_segments(content: str, entries: Sequence[HighlightEntry]) -> list[Segment]:
    """
    Slice the body into plain and highlighted segments.

    Args:
        content: The article body
        entries: Deduplicated highlight entries

    Returns:
        Segments covering the whole body in order. Empty body -> []
    """
    if not content:
        return []

    if not entries:
        return [Segment(kind=SegmentKind.PLAIN, text=content, start=0, end=len(content))]

    segments = []
    cursor = 0
    for match in find_matches(content, entries):
        if match.start > cursor:
            segments.append(Segment(
                kind=SegmentKind.PLAIN,
                text=content[cursor:match.start],
                start=cursor,
                end=match.start,
            ))
        segments.append(Segment(
            kind=SegmentKind.HIGHLIGHT,
            text=content[match.start:match.end],
            start=match.start,
            end=match.end,
            entry=match.entry,
        ))
        cursor = match.end

    if cursor < len(content):
        segments.append(Segment(kind=SegmentKind.PLAIN, text=content[cursor:], start=cursor, end=len(content)))

    return segments
