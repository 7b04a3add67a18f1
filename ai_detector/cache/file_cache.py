"""
File Cache — SHA-256 hash-based result caching.

Caches FileResults per file, keyed by path and content hash.
Unchanged files skip re-scanning entirely. A cache belongs to one analyzer,
so entries are only valid for that analyzer's pattern set.

Results are copied on the way in and on the way out, so callers never share
a FileResult through the cache.
"""

from __future__ import annotations

import hashlib
import threading
import time
from dataclasses import dataclass, field

from ai_detector.config import settings
from ai_detector.models.result_models import FileResult


@dataclass
class CacheEntry:
    """A cached analysis result for a single file."""

    content_hash: str
    result: FileResult
    ttl_seconds: int
    timestamp: float = field(default_factory=time.time)

    @property
    def is_expired(self) -> bool:
        return (time.time() - self.timestamp) > self.ttl_seconds


class FileCache:
    """
    In-memory file-level cache keyed by SHA-256 of file content.

    Safe to share between the worker threads of one directory analysis.
    """

    def __init__(self, ttl_seconds: int | None = None) -> None:
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self._store: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def hash_content(content: str) -> str:
        """Compute SHA-256 hash of file content."""
        return hashlib.sha256(content.encode("utf-8", errors="surrogatepass")).hexdigest()

    def get(self, file_path: str, content: str) -> FileResult | None:
        """
        Look up the cached result for a file.

        Returns a private copy, or None if not cached, expired, or content has changed.
        """
        key = f"{file_path}:{self.hash_content(content)}"
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired:
                del self._store[key]
                return None
            return entry.result.model_copy(deep=True)

    def put(self, file_path: str, content: str, result: FileResult) -> None:
        """Cache a copy of the analysis result for a file."""
        content_hash = self.hash_content(content)
        with self._lock:
            self._store[f"{file_path}:{content_hash}"] = CacheEntry(
                content_hash=content_hash,
                result=result.model_copy(deep=True),
                ttl_seconds=self.ttl_seconds,
            )

    @property
    def size(self) -> int:
        """Number of cached entries."""
        return len(self._store)
