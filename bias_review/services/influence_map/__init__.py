# bias_review/services/influence_map/__init__.py
"""
Influence-map engine.

Turns the AI analysis of an article (bias explanation + behavioural analysis)
into an annotated rendering of the article body:

1. Split each analysis text into sections on recognized ALL-CAPS headers
2. Extract the phrases quoted in each section body
3. Derive a short reason for each phrase from its section
4. Resolve each section to a colour category
5. Deduplicate phrases across both texts (bias explanation wins)
6. Locate phrases in the body and slice it into plain/highlighted segments
7. Collect the legend of categories in use

The pipeline is pure and synchronous; callers memoize on the three inputs.
"""

import logging
from typing import Optional

from bias_review.logging_config import log_stage, pipeline_logger
from bias_review.services.influence_map.categories import (
    FALLBACK_CATEGORY,
    RECOGNIZED_HEADERS,
    SECTION_CATEGORIES,
    resolve_category,
)
from bias_review.services.influence_map.deduper import HighlightDeduper
from bias_review.services.influence_map.legend import build_legend
from bias_review.services.influence_map.phrases import extract_quoted_phrases
from bias_review.services.influence_map.reasons import extract_reason
from bias_review.services.influence_map.sections import split_into_sections
from bias_review.services.influence_map.segments import build_segments, find_matches
from bias_review.services.influence_map.types import (
    Category,
    HighlightEntry,
    InfluenceMap,
    Match,
    Section,
    Segment,
    SegmentKind,
)


def parse_highlights(analysis_text: Optional[str]) -> list[HighlightEntry]:
    """
    Extract highlight entries from one analysis text.

    Entries come out in order of appearance; duplicate phrases are kept here
    and collapsed by the deduper once both texts are parsed.
    """
    entries = []
    sections = split_into_sections(analysis_text)
    for section in sections:
        category = resolve_category(section.name)
        for phrase in extract_quoted_phrases(section.body):
            entries.append(HighlightEntry(
                phrase=phrase,
                section=section.name,
                reason=extract_reason(phrase, section.body),
                category=category,
            ))

    pipeline_logger.debug(
        "phrases_extracted",
        f"[INFLUENCE_MAP] {len(entries)} phrases from {len(sections)} sections",
        sections=len(sections),
        phrases=len(entries),
    )
    return entries


def build_influence_map(
    content: Optional[str],
    bias_explanation: Optional[str] = None,
    behavioural_analysis: Optional[str] = None,
) -> InfluenceMap:
    """
    Run the full pipeline for one article.

    Args:
        content: Article body. Empty/None means no work is done.
        bias_explanation: Bias explanation analysis (merged first)
        behavioural_analysis: Behavioural analysis (merged second)

    Returns:
        InfluenceMap with entries, segments and legend
    """
    if not content:
        return InfluenceMap()

    with log_stage("parse_analysis", level=logging.DEBUG):
        entries = HighlightDeduper().merge(
            parse_highlights(bias_explanation),
            parse_highlights(behavioural_analysis),
        )

    with log_stage("build_segments", level=logging.DEBUG):
        segments = build_segments(content, entries)

    result = InfluenceMap(
        entries=tuple(entries),
        segments=tuple(segments),
        legend=tuple(build_legend(entries)),
    )
    pipeline_logger.debug(
        "segments_built",
        f"[INFLUENCE_MAP] {result.highlight_count} highlights across {len(segments)} segments",
        entries=len(entries),
        segments=len(segments),
        highlights=result.highlight_count,
        content_chars=len(content),
    )
    return result


__all__ = [
    "Category",
    "FALLBACK_CATEGORY",
    "HighlightDeduper",
    "HighlightEntry",
    "InfluenceMap",
    "Match",
    "RECOGNIZED_HEADERS",
    "SECTION_CATEGORIES",
    "Section",
    "Segment",
    "SegmentKind",
    "build_influence_map",
    "build_legend",
    "build_segments",
    "extract_quoted_phrases",
    "extract_reason",
    "find_matches",
    "parse_highlights",
    "resolve_category",
    "split_into_sections",
]
