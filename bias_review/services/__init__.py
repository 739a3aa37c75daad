"""
Business logic services.
"""

from bias_review.services.influence_map import HighlightDeduper, build_influence_map, parse_highlights

__all__ = [
    "HighlightDeduper",
    "build_influence_map",
    "parse_highlights",
]
