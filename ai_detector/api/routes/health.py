"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ai_detector.api.dependencies import get_analyzer
from ai_detector.core.analyzer import Analyzer

router = APIRouter()


@router.get("/health")
async def health(analyzer: Analyzer = Depends(get_analyzer)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "engine": "pattern-based",
        "patterns": {
            "source": analyzer.pattern_set.source,
            "style": len(analyzer.pattern_set.style),
            "defect": len(analyzer.pattern_set.defect),
        },
    }
