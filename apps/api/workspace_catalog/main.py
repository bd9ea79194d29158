"""FastAPI application for the workspace catalog."""
from __future__ import annotations

import base64

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response

from .core.config import settings
from .routers import catalog as catalog_router
from .routers import search as search_router

app = FastAPI(title="Workspace Catalog API", version="0.1.0")

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(catalog_router.router, prefix="/api/catalog", tags=["catalog"])
app.include_router(search_router.router, tags=["search"])

FAVICON_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGMAAQAABQABDQottAAAAABJRU5ErkJggg=="
)


@app.get("/api/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Simple liveness probe."""

    return {"status": "ok"}


@app.head("/api/health", tags=["meta"])
async def health_head() -> Response:
    """Allow HEAD for uptime monitors that only need the status code."""

    return Response(status_code=200)


@app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
async def robots() -> PlainTextResponse:
    """Serve a minimal robots.txt to avoid 404 noise."""

    return PlainTextResponse("User-agent: *\nDisallow:")


@app.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    """Return a tiny placeholder favicon."""

    return Response(content=FAVICON_BYTES, media_type="image/png")
