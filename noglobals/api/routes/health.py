"""
Health Check Route — GET /health
"""

from __future__ import annotations

from importlib.metadata import version

from fastapi import APIRouter

from noglobals.config import settings

VERSION = version("noglobals")

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "source_suffix": settings.source_suffix,
    }
