"""
API routers for v1 endpoints.
"""

from bias_review.routers.influence_map import router as influence_map_router

__all__ = [
    "influence_map_router",
]
