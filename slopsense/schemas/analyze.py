"""
API Schemas — Request and Response Models

Pydantic models for the SlopSense API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze request body."""
    text: str = Field(..., description="The text to analyze (up to 100,000 characters).")
    include_highlights: bool = Field(
        False, description="Also return non-overlapping highlight spans.",
    )

    model_config = {"json_schema_extra": {"examples": [
        {"text": "Many believe this change represents progress for society.",
         "include_highlights": True},
    ]}}


class AnalyzeBatchRequest(BaseModel):
    """POST /analyze/batch request body."""
    # upper bound is settings.MAX_BATCH_ITEMS, checked by the route
    items: list[AnalyzeRequest] = Field(..., min_length=1)


class FactorsResponse(BaseModel):
    repetition: float
    formal_tone: float
    sentence_variety: float
    vocabulary: float
    structure: float


class PatternMatchResponse(BaseModel):
    category: str
    phrase: str
    count: int
    score: float
    description: str = ""
    detector: str = ""
    spans: list[list[int]] = []


class HighlightResponse(BaseModel):
    start: int
    end: int
    category: str
    phrase: str
    detector: str = ""


class AnalyzeResponse(BaseModel):
    """POST /analyze response body."""
    score: float
    verdict: str
    factors: FactorsResponse
    patterns: list[PatternMatchResponse]
    highlights: Optional[list[HighlightResponse]] = None
    analyzed_at: str
    engine_version: str


class AnalyzeBatchItem(BaseModel):
    """One slot of a batch response. Exactly one of result/error is set."""
    index: int
    result: Optional[AnalyzeResponse] = None
    error: Optional[str] = None


class AnalyzeBatchResponse(BaseModel):
    """POST /analyze/batch response body."""
    results: list[AnalyzeBatchItem]
    total: int
    analyzed: int


# ============================================================
# PATTERNS
# ============================================================

class PatternRuleResponse(BaseModel):
    id: str
    detector: str
    category: str
    description: str
    kind: str
    weight: float


class PatternCatalogResponse(BaseModel):
    detector: Optional[str] = None
    total_rules: int
    rules: list[PatternRuleResponse]


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
    detectors: list[str]
    rule_count: int
