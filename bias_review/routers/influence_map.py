"""
Influence-map endpoints.

POST /v1/influence-map - Segments + legend for an article body and its analysis
POST /v1/influence-map/html - Same, rendered as an HTML fragment
POST /v1/articles/influence-map - Same, from a dashboard Article payload
GET /v1/influence-map/categories - The section -> category colour table
"""

import logging
import threading

from cachetools import LRUCache
from fastapi import APIRouter, HTTPException, status

from bias_review.config import get_settings
from bias_review.schemas.influence_map import (
    ArticleInfluenceMapRequest,
    ArticleInfluenceMapResponse,
    CategoryResponse,
    CategoryTableResponse,
    InfluenceMapHtmlResponse,
    InfluenceMapRequest,
    InfluenceMapResponse,
    category_rows,
)
from bias_review.services.influence_map import (
    FALLBACK_CATEGORY,
    SECTION_CATEGORIES,
    InfluenceMap,
    build_influence_map,
)
from bias_review.services.influence_map.renderer import render_influence_map

logger = logging.getLogger(__name__)

router = APIRouter(tags=["influence-map"])

# Memoized results keyed by (content, bias_explanation, behavioural_analysis)
_influence_cache: LRUCache = LRUCache(maxsize=get_settings().INFLUENCE_MAP_CACHE_SIZE)
# Sync endpoints run on the threadpool; LRUCache reads reorder entries
_influence_cache_lock = threading.Lock()


def clear_influence_cache() -> None:
    """Drop all memoized influence maps."""
    with _influence_cache_lock:
        _influence_cache.clear()


def _get_influence_map(content: str, bias_explanation: str, behavioural_analysis: str) -> InfluenceMap:
    """Build (or reuse) the influence map for one input triple."""
    max_chars = get_settings().MAX_CONTENT_CHARS
    if len(content) > max_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"content exceeds {max_chars} characters",
        )

    cache_key = (content, bias_explanation, behavioural_analysis)
    with _influence_cache_lock:
        cached = _influence_cache.get(cache_key)
    if cached is not None:
        logger.debug("Influence map cache hit", extra={"cache_hit": True})
        return cached

    result = build_influence_map(content, bias_explanation, behavioural_analysis)
    with _influence_cache_lock:
        _influence_cache[cache_key] = result
    return result


@router.get("/v1/influence-map/categories", response_model=CategoryTableResponse)
def get_categories() -> CategoryTableResponse:
    """List every recognized section header with its colour and label."""
    return CategoryTableResponse(
        categories=category_rows(list(SECTION_CATEGORIES.values())),
        fallback=CategoryResponse.model_validate(FALLBACK_CATEGORY),
    )


@router.post("/v1/influence-map", response_model=InfluenceMapResponse)
def post_influence_map(payload: InfluenceMapRequest) -> InfluenceMapResponse:
    """
    Highlight the phrases the analysis flagged in an article body.

    Returns ordered segments that concatenate back to the body, the
    deduplicated entries and the legend of categories in use. An empty body
    yields no entries, segments or legend.
    """
    influence_map = _get_influence_map(payload.content, payload.bias_explanation, payload.behavioural_analysis)
    return InfluenceMapResponse.from_influence_map(influence_map)


@router.post("/v1/influence-map/html", response_model=InfluenceMapHtmlResponse)
def post_influence_map_html(payload: InfluenceMapRequest) -> InfluenceMapHtmlResponse:
    """Render the influence map as an escaped HTML fragment."""
    influence_map = _get_influence_map(payload.content, payload.bias_explanation, payload.behavioural_analysis)
    html = render_influence_map(influence_map, flip_threshold=get_settings().TOOLTIP_FLIP_THRESHOLD_PX)
    return InfluenceMapHtmlResponse(html=html, summary=influence_map.summary)


@router.post("/v1/articles/influence-map", response_model=ArticleInfluenceMapResponse)
def post_article_influence_map(article: ArticleInfluenceMapRequest) -> ArticleInfluenceMapResponse:
    """Influence map for an Article payload from the dashboard."""
    influence_map = _get_influence_map(article.content, article.bias_explanation, article.behavioural_analysis)
    return ArticleInfluenceMapResponse(
        article_id=article.id,
        headline=article.headline,
        influence_map=InfluenceMapResponse.from_influence_map(influence_map),
    )
