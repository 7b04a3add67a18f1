"""
Analyzer — Single-file and directory entry points.

Pipeline:
1. Validate the path (exists, analyzable extension)
2. Read the whole file into memory
3. Collect style, comment-density and defect findings
4. Score the file
5. For directories: discover files recursively, analyze each (optionally on a
   thread pool, optionally under a deadline), then reduce into one aggregate

No exception crosses this boundary: missing paths, unsupported files, read
failures and deadline overruns are all returned as AnalysisError values.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from pathlib import Path

from ai_detector.cache.file_cache import FileCache
from ai_detector.config import settings
from ai_detector.core.checks import DEFAULT_CHECKS, CheckRegistry
from ai_detector.core.pattern_store import load_patterns
from ai_detector.core.scanner import collect_findings
from ai_detector.core.scorer import aggregate_results, score_file
from ai_detector.models.pattern_models import PatternSet
from ai_detector.models.result_models import AnalysisError, AnalysisResult, DirectoryResult, FileResult

logger = logging.getLogger("ai_detector.analyzer")


class Analyzer:
    """
    Stateless analyzer bound to one read-only pattern set.

    Every call returns a fresh result, so one instance can serve concurrent
    callers.
    """

    def __init__(
        self,
        pattern_set: PatternSet | None = None,
        checks: CheckRegistry | None = None,
        extension: str | None = None,
        opening_tag: str | None = None,
        cache: FileCache | None = None,
        max_workers: int | None = None,
        deadline_seconds: float | None = None,
        suppress_by_column: bool | None = None,
        root: str | Path | None = None,
    ) -> None:
        self.pattern_set = pattern_set or load_patterns()
        self.checks = checks or DEFAULT_CHECKS
        self.extension = extension or settings.file_extension
        self.opening_tag = opening_tag or settings.opening_tag
        self.cache = cache
        self.max_workers = max_workers or settings.max_workers
        self.deadline_seconds = (
            deadline_seconds if deadline_seconds is not None else settings.batch_deadline_seconds
        )
        self.suppress_by_column = (
            suppress_by_column if suppress_by_column is not None else settings.suppress_by_column
        )
        self.root = Path(root).resolve() if root is not None else None

    @classmethod
    def from_settings(cls) -> Analyzer:
        """Analyzer configured entirely from ``settings``."""
        return cls(cache=FileCache() if settings.cache_enabled else None)

    # ── Single file ──

    def analyze_source(self, content: str, file: str) -> FileResult:
        """Analyze in-memory source text attributed to ``file``."""
        if self.cache is not None:
            cached = self.cache.get(file, content)
            if cached is not None:
                logger.debug(f"Cache hit: {file}")
                return cached

        findings = collect_findings(
            content,
            self.pattern_set,
            self.checks,
            self.opening_tag,
            suppress_by_column=self.suppress_by_column,
        )
        result = score_file(file, findings)

        if self.cache is not None:
            self.cache.put(file, content, result)
        return result

    def analyze_file(self, path: str | Path) -> FileResult | AnalysisError:
        """Analyze one file, or explain why it cannot be analyzed."""
        file_path = Path(path)
        if not file_path.exists():
            return AnalysisError(file=str(path), error=f"File not found: {path}", code="path_not_found")

        if file_path.suffix != self.extension:
            return AnalysisError(
                file=str(path),
                error=f"Unsupported file type: only {self.extension} files are supported ({path})",
                code="unsupported_file_type",
            )

        try:
            content = read_source(file_path)
        except OSError as e:
            logger.warning(f"Failed to read {path}: {e}")
            return AnalysisError(file=str(path), error=f"Could not read {path}: {e}", code="read_failed")

        result = self.analyze_source(content, str(path))
        logger.debug(
            f"Analyzed {path}: {result.summary.total_findings} findings, "
            f"{result.ai_probability}% AI"
        )
        return result

    # ── Directories ──

    def discover_files(self, directory: str | Path) -> list[Path]:
        """All regular files with the analyzable extension, sorted by path."""
        return sorted(
            p for p in Path(directory).rglob("*") if p.suffix == self.extension and p.is_file()
        )

    def analyze_directory(
        self, path: str | Path, attribute: bool = False
    ) -> DirectoryResult | AnalysisError:
        """
        Analyze every analyzable file under ``path``.

        Files with other extensions are skipped silently and are not counted.

        Args:
            path: Directory to walk recursively.
            attribute: Keep per-file results on the aggregate.

        Returns:
            DirectoryResult, or AnalysisError if the directory does not exist.
        """
        directory = Path(path)
        if not directory.is_dir():
            return AnalysisError(file=str(path), error=f"Path not found: {path}", code="path_not_found")

        start = time.monotonic()
        files = self.discover_files(directory)
        logger.info(f"Analyzing {len(files)} {self.extension} files under {path}")

        if self.max_workers > 1 and len(files) > 1:
            results = self._analyze_parallel(files)
        else:
            results = self._analyze_sequential(files)

        aggregate = aggregate_results(results, str(path), attribute=attribute)
        elapsed = (time.monotonic() - start) * 1000
        logger.info(
            f"Analyzed {aggregate.files_analyzed} files in {elapsed:.1f}ms: "
            f"{aggregate.ai_flagged_files} flagged, {len(aggregate.errors)} excluded"
        )
        return aggregate

    def is_within_root(self, path: str | Path) -> bool:
        """True when no root is set, or ``path`` resolves (symlinks included) under it."""
        if self.root is None:
            return True
        return Path(path).resolve().is_relative_to(self.root)

    def analyze_path(self, path: str | Path, attribute: bool = False) -> AnalysisResult:
        """Dispatch to directory or single-file analysis, confined to ``root`` if set."""
        if not self.is_within_root(path):
            logger.warning(f"Rejected path outside analysis root {self.root}: {path}")
            return AnalysisError(
                file=str(path),
                error=f"Path is outside the analysis root: {path}",
                code="outside_root",
            )

        if Path(path).is_dir():
            return self.analyze_directory(path, attribute=attribute)
        return self.analyze_file(path)

    def _deadline(self) -> float | None:
        if self.deadline_seconds is None:
            return None
        return time.monotonic() + self.deadline_seconds

    def _analyze_sequential(self, files: list[Path]) -> list[FileResult | AnalysisError]:
        deadline = self._deadline()
        results: list[FileResult | AnalysisError] = []
        for file_path in files:
            if deadline is not None and time.monotonic() >= deadline:
                results.append(_skipped(file_path))
                continue
            results.append(self.analyze_file(file_path))
        return results

    def _analyze_parallel(self, files: list[Path]) -> list[FileResult | AnalysisError]:
        deadline = self._deadline()
        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(files)))
        try:
            futures: list[Future] = [executor.submit(self.analyze_file, f) for f in files]

            # Reduced in discovery order, whatever order workers finish in
            results: list[FileResult | AnalysisError] = []
            for file_path, future in zip(files, futures):
                if deadline is None:
                    results.append(future.result())
                    continue
                remaining = max(0.0, deadline - time.monotonic())
                try:
                    results.append(future.result(timeout=remaining))
                except FuturesTimeoutError:
                    future.cancel()
                    results.append(_skipped(file_path))
            return results
        finally:
            executor.shutdown(wait=True, cancel_futures=True)


def read_source(path: Path) -> str:
    """Whole-file read; line endings are preserved and undecodable bytes replaced."""
    return path.read_bytes().decode("utf-8", errors="replace")


def _skipped(file_path: Path) -> AnalysisError:
    logger.warning(f"Deadline exceeded, skipping {file_path}")
    return AnalysisError(
        file=str(file_path),
        error=f"Skipped: batch deadline exceeded before {file_path} was analyzed",
        code="skipped",
    )
