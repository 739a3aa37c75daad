# bias_review/services/influence_map/types.py
"""
Data types for the influence-map engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SegmentKind(str, Enum):
    """Whether a segment is rendered as-is or highlighted."""
    PLAIN = "plain"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True)
class Category:
    """
    Visual classification assigned to an analysis section.

    Attributes:
        name: Canonical section name the category is keyed by
        label: Display label shown in tooltips and the legend
        background: Tint applied behind highlighted text (CSS rgba)
        underline: Underline colour for highlighted text (CSS hex)
        dot: Legend dot colour (CSS hex)
        is_fallback: True only for the neutral "FLAGGED" category
    """
    name: str
    label: str
    background: str
    underline: str
    dot: str
    is_fallback: bool = False


@dataclass(frozen=True)
class Section:
    """A labeled block of analysis text under one recognized header."""
    name: str
    body: str


@dataclass(frozen=True)
class HighlightEntry:
    """
    A distinct flagged phrase with its category and contextual reason.

    Attributes:
        phrase: The quoted phrase as written in the analysis
        section: Section name the phrase was quoted under
        reason: Short snippet from the analysis explaining the flag
        category: Category resolved from the section name
    """
    phrase: str
    section: str
    reason: str
    category: Category

    @property
    def key(self) -> str:
        """Uniqueness key used for deduplication."""
        return self.phrase.lower()


@dataclass(frozen=True)
class Match:
    """A located occurrence of an entry's phrase inside the article body."""
    start: int
    end: int
    entry: HighlightEntry

    def overlaps(self, start: int, end: int) -> bool:
        """Half-open interval overlap test."""
        return self.start < end and start < self.end


@dataclass(frozen=True)
class Segment:
    """
    A contiguous slice of the article body.

    Attributes:
        kind: Plain or highlighted
        text: Exact slice of the body (original casing)
        start: Start offset in the body
        end: End offset in the body (exclusive)
        entry: The highlight entry, for highlighted segments only
    """
    kind: SegmentKind
    text: str
    start: int
    end: int
    entry: Optional[HighlightEntry] = None

    @property
    def is_highlight(self) -> bool:
        return self.kind == SegmentKind.HIGHLIGHT


@dataclass(frozen=True)
class InfluenceMap:
    """
    Result of running the influence-map pipeline over one article.

    Attributes:
        entries: Deduplicated entries from both analysis texts
        segments: Ordered segments whose texts concatenate to the body
        legend: Categories present in the analysis, unique by label
    """
    entries: tuple[HighlightEntry, ...] = field(default_factory=tuple)
    segments: tuple[Segment, ...] = field(default_factory=tuple)
    legend: tuple[Category, ...] = field(default_factory=tuple)

    @property
    def highlight_count(self) -> int:
        """Number of highlighted segments actually placed in the body."""
        return sum(1 for s in self.segments if s.is_highlight)

    @property
    def summary(self) -> str:
        """Sub-heading shown above the highlighted article."""
        if self.entries:
            return (
                f"{len(self.entries)} influential phrases detected. "
                "Hover to see why each was flagged"
            )
        return "No influential phrases found in analysis"
