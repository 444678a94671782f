"""
SlopSense API — Main Application

POST /analyze        — Analyze text for signs of AI generation
POST /analyze/batch  — Analyze multiple texts concurrently
GET  /patterns       — List the active rule catalog (optionally per detector)
GET  /health         — Health check
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from slopsense import __version__
from slopsense.config import settings
from slopsense.detector import ENGINE_VERSION, AnalysisResult, analyze_async
from slopsense.errors import InputTooLarge, InvalidInput
from slopsense.factors import ensure_punkt
from slopsense.highlights import build_highlights
from slopsense.logging import setup_logging, get_logger
from slopsense.patterns import CATALOGS, DETECTORS, get_rule_catalog
from slopsense.rate_limit import check_rate_limit
from slopsense.schemas.analyze import (
    AnalyzeRequest,
    AnalyzeBatchRequest,
    AnalyzeResponse,
    AnalyzeBatchResponse,
    PatternCatalogResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    ensure_punkt()
    logger.info(f"SlopSense API starting (engine {ENGINE_VERSION})")
    yield
    logger.info("SlopSense API shutting down")


app = FastAPI(
    title="SlopSense API",
    description="Rule-based detection of AI-generated prose",
    version=f"{__version__} (engine {ENGINE_VERSION})",
    lifespan=lifespan,
)

# CORS: set SLOPSENSE_CORS_ORIGINS in production (comma-separated)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(InputTooLarge)
async def input_too_large_handler(request: Request, exc: InputTooLarge):
    logger.warning(
        "Input rejected: too large",
        extra={"path": request.url.path, "error": str(exc), "error_type": "InputTooLarge"},
    )
    return JSONResponse(
        status_code=413,
        content={"detail": str(exc), "length": exc.length, "limit": exc.limit},
    )


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    logger.warning(
        "Input rejected: invalid",
        extra={"path": request.url.path, "error": str(exc), "error_type": "InvalidInput"},
    )
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The analysis could not be completed."},
    )


# ============================================================
# HELPERS
# ============================================================

def _client_id(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def _render(result: AnalysisResult, include_highlights: bool) -> dict:
    """Engine result plus the API-layer fields (timestamp, highlights)."""
    body = result.to_dict()
    body["analyzed_at"] = datetime.now(timezone.utc).isoformat()
    if include_highlights:
        body["highlights"] = [h.to_dict() for h in build_highlights(result)]
    return body


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze_text(payload: AnalyzeRequest, request: Request):
    """Analyze one passage of text."""
    client_id = _client_id(request)
    check_rate_limit(client_id)
    start = time.time()

    result = await analyze_async(payload.text)

    logger.info(
        f"Analysis complete: score={result.score}",
        extra={
            "score": result.score,
            "verdict": result.verdict,
            "patterns_count": len(result.patterns),
            "duration_ms": int((time.time() - start) * 1000),
            "client_id": client_id,
        },
    )
    return _render(result, payload.include_highlights)


@app.post("/analyze/batch", response_model=AnalyzeBatchResponse,
          response_model_exclude_none=True)
async def analyze_batch(payload: AnalyzeBatchRequest, request: Request):
    """
    Analyze several texts concurrently.

    A failing item does not fail the batch: its slot carries an error
    message instead of a result.
    """
    if len(payload.items) > settings.MAX_BATCH_ITEMS:
        raise HTTPException(
            422, f"Batch holds {len(payload.items)} items; the limit is {settings.MAX_BATCH_ITEMS}.",
        )
    client_id = _client_id(request)
    check_rate_limit(client_id)

    results = await asyncio.gather(
        *[analyze_async(item.text) for item in payload.items],
        return_exceptions=True,
    )

    slots = []
    analyzed = 0
    for index, (item, r) in enumerate(zip(payload.items, results)):
        if isinstance(r, AnalysisResult):
            analyzed += 1
            slots.append({"index": index, "result": _render(r, item.include_highlights)})
        elif isinstance(r, (InputTooLarge, InvalidInput)):
            slots.append({"index": index, "error": str(r)})
        else:
            logger.error(
                "Batch item failed",
                extra={"error": str(r), "error_type": type(r).__name__},
                exc_info=r,
            )
            slots.append({"index": index, "error": "Analysis failed for this item."})

    logger.info(
        f"Batch complete: {analyzed}/{len(payload.items)} analyzed",
        extra={"batch_size": len(payload.items), "client_id": client_id},
    )
    return {"results": slots, "total": len(payload.items), "analyzed": analyzed}


@app.get("/patterns", response_model=PatternCatalogResponse)
async def get_patterns(
    detector: Optional[str] = Query(None, description="Restrict to one detector."),
):
    """Return the active rule catalog."""
    if detector is not None and detector not in CATALOGS:
        raise HTTPException(
            404, f"Unknown detector '{detector}'. Known: {', '.join(CATALOGS)}",
        )
    rules = get_rule_catalog(detector)
    return {"detector": detector, "total_rules": len(rules), "rules": rules}


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": ENGINE_VERSION,
        "detectors": [name for name, _ in DETECTORS],
        "rule_count": sum(len(c) for c in CATALOGS.values()),
    }


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-SlopSense-Version"] = __version__
    response.headers["X-Engine-Version"] = ENGINE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)
