# bias_review/main.py

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from bias_review import __version__
from bias_review.config import get_settings
from bias_review.logging_config import configure_logging, pipeline_logger
from bias_review.routers import influence_map_router

settings = get_settings()
configure_logging(json_format=settings.LOG_JSON, level=settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

app = FastAPI(title="Bias Review API", version=__version__)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

app.include_router(influence_map_router)


# ---------------------------------------------------------------------------
# Trace correlation
# ---------------------------------------------------------------------------

@app.middleware("http")
async def trace_requests(request: Request, call_next):
    trace_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    pipeline_logger.set_context(trace_id, component="api")
    try:
        response = await call_next(request)
        pipeline_logger.debug(
            "request_complete",
            f"{request.method} {request.url.path} -> {response.status_code}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
        response.headers["X-Request-ID"] = trace_id
        return response
    finally:
        pipeline_logger.clear_context()


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@app.get("/health")
def health() -> dict:
    return {"status": "ok", "service": "bias-review-api", "version": __version__}


@app.get("/")
def root() -> dict:
    return {
        "service": "Bias Review API",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "categories": "/v1/influence-map/categories",
            "influence_map": "/v1/influence-map",
            "influence_map_html": "/v1/influence-map/html",
            "article_influence_map": "/v1/articles/influence-map",
        },
    }
