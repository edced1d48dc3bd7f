"""
noglobals — POST /scan and POST /scan/source endpoints.

/scan walks a directory on the server's file system; /scan/source checks a
single Go file sent in the request body. Both return the rendered
diagnostics in discovery order.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from noglobals.config import settings
from noglobals.core.ast_parser import extract_declarations
from noglobals.core.parser import ParseError
from noglobals.core.rules import global_variable
from noglobals.core.walker import Scanner
from noglobals.api.dependencies import get_scanner
from noglobals.models.scan_models import ScanRequest, ScanResponse, SourceScanRequest

logger = logging.getLogger("noglobals.scan")
router = APIRouter()

# Max inline source size: 500 KB
MAX_CODE_LENGTH = 500_000


@router.post("/scan", response_model=ScanResponse)
def scan_path(req: ScanRequest, scanner: Scanner = Depends(get_scanner)):
    """Scan a directory tree for global variables."""
    include_tests = (
        settings.include_tests if req.include_tests is None else req.include_tests
    )
    try:
        result = scanner.scan(req.path, include_tests=include_tests)
    except ParseError as e:
        logger.error(f"Scan aborted: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Path not found: {req.path}")
    except OSError as e:
        logger.error(f"Scan failed reading {req.path}: {e}")
        raise HTTPException(status_code=400, detail=f"Could not read {req.path}")

    return ScanResponse(
        files_scanned=result.files_scanned,
        scan_duration_ms=result.scan_duration_ms,
        diagnostics=result.messages,
    )


@router.post("/scan/source", response_model=ScanResponse)
def scan_source(req: SourceScanRequest, scanner: Scanner = Depends(get_scanner)):
    """Check a single Go file sent inline."""
    if len(req.content) > MAX_CODE_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Code exceeds maximum length of {MAX_CODE_LENGTH} characters",
        )

    try:
        tree, source_bytes = scanner.parser.parse(req.content, req.path)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    source_file = extract_declarations(tree, source_bytes, req.path)
    diagnostics = global_variable.check(source_file)
    return ScanResponse(
        files_scanned=1,
        diagnostics=[d.message for d in diagnostics],
    )
