"""
Scan Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    """Request body for /scan."""

    path: str = Field(
        ..., min_length=1, description="Directory or file; a trailing '/...' recurses"
    )
    include_tests: bool | None = Field(
        default=None, description="Also scan _test.go files (defaults to settings)"
    )


class SourceScanRequest(BaseModel):
    """Request body for /scan/source: a single in-memory Go file."""

    path: str = Field(default="main.go", description="Path used in diagnostics")
    content: str = Field(..., description="Go source code")


class ScanResponse(BaseModel):
    """Top-level response for scan endpoints."""

    message: str = "scan_complete"
    files_scanned: int = 0
    diagnostics: list[str] = Field(default_factory=list)
    scan_duration_ms: float = 0.0
