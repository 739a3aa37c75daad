# bias_review/services/influence_map/sections.py
"""
Split analysis text into sections on recognized ALL-CAPS headers.

Headers are matched literally and case-sensitively. Text before the first
header is discarded, and text without any header yields no sections.
"""

import re
from typing import Iterable, Optional

from bias_review.logging_config import pipeline_logger
from bias_review.services.influence_map.categories import RECOGNIZED_HEADERS
from bias_review.services.influence_map.types import Section


def compile_header_pattern(headers: Iterable[str]) -> re.Pattern:
    """
    Build one alternation over the escaped header literals.

    Longer headers are tried first so that a header which is a prefix of
    another never wins at the same position.
    """
    ordered = sorted(set(headers), key=len, reverse=True)
    return re.compile("|".join(re.escape(h) for h in ordered))


HEADER_PATTERN = compile_header_pattern(RECOGNIZED_HEADERS)


def split_into_sections(text: Optional[str], pattern: re.Pattern = HEADER_PATTERN) -> list[Section]:
    """
    Split analysis text into (header, body) sections.

    Args:
        text: Raw analysis text (may be empty or None)
        pattern: Compiled header alternation

    Returns:
        Sections in order of appearance, bodies trimmed
    """
    if not text:
        return []

    headers = list(pattern.finditer(text))
    sections = []
    for idx, match in enumerate(headers):
        body_end = headers[idx + 1].start() if idx + 1 < len(headers) else len(text)
        sections.append(Section(name=match.group(0).strip(), body=text[match.end():body_end].strip()))

    pipeline_logger.debug(
        "sections_parsed",
        f"[INFLUENCE_MAP] {len(sections)} sections in {len(text)} chars of analysis",
        sections=len(sections),
    )

    return sections
