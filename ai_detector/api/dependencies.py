"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from ai_detector.cache.file_cache import FileCache
from ai_detector.config import settings
from ai_detector.core.analyzer import Analyzer
from ai_detector.core.pattern_store import load_patterns


@lru_cache
def get_file_cache() -> FileCache | None:
    """Shared result cache, or None when caching is disabled."""
    return FileCache() if settings.cache_enabled else None


@lru_cache
def get_analyzer() -> Analyzer:
    """Shared analyzer confined to ``analysis_root``; patterns are loaded once per process."""
    return Analyzer(
        pattern_set=load_patterns(),
        cache=get_file_cache(),
        root=settings.analysis_root,
    )
