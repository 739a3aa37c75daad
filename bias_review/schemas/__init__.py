"""
Pydantic schemas for API request/response validation.
"""

from bias_review.schemas.influence_map import (
    ArticleInfluenceMapRequest,
    ArticleInfluenceMapResponse,
    CategoryResponse,
    CategoryTableResponse,
    HighlightEntryResponse,
    InfluenceMapHtmlResponse,
    InfluenceMapRequest,
    InfluenceMapResponse,
    SegmentResponse,
)

__all__ = [
    "ArticleInfluenceMapRequest",
    "ArticleInfluenceMapResponse",
    "CategoryResponse",
    "CategoryTableResponse",
    "HighlightEntryResponse",
    "InfluenceMapHtmlResponse",
    "InfluenceMapRequest",
    "InfluenceMapResponse",
    "SegmentResponse",
]
