"""
Batch cascade analysis.

Independent analyses (for example one per scenario and region in a report)
share nothing, so they are fanned out across a thread pool and collected in
request order. A failed analysis is reported in place; it never aborts the
rest of the batch.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

import structlog
from pydantic import BaseModel, Field

from beacon_api.engine.analyzer import CascadeAnalyzer
from beacon_api.engine.errors import CascadeEngineError
from beacon_api.models.cascade import CascadeAnalysisRequest, CascadeAnalysisResponse

logger = structlog.get_logger()


class BatchItemResult(BaseModel):
    """Outcome of one analysis within a batch."""

    index: int = Field(ge=0, description="Position of the request in the batch")
    success: bool
    result: Optional[CascadeAnalysisResponse] = None
    error: Optional[str] = None


class BatchCascadeAnalyzer:
    """
    Runs many cascade analyses concurrently.

    Attributes:
        analyzer: Shared, stateless analyzer
        max_workers: Thread pool size

    Example:
        >>> batch = BatchCascadeAnalyzer(CascadeAnalyzer(), max_workers=4)
        >>> results = batch.analyze_many(requests)
    """

    DEFAULT_MAX_WORKERS = 4

    def __init__(self, analyzer: Optional[CascadeAnalyzer] = None, max_workers: int = DEFAULT_MAX_WORKERS):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.analyzer = analyzer or CascadeAnalyzer()
        self.max_workers = max_workers
        self.logger = structlog.get_logger()

    def analyze_many(self, requests: Sequence[CascadeAnalysisRequest]) -> list[BatchItemResult]:
        """
        Analyze every request, preserving input order.

        Args:
            requests: Validated analysis requests

        Returns:
            One BatchItemResult per request, in the same order
        """
        if not requests:
            return []

        self.logger.info(
            "cascade_batch_started",
            request_count=len(requests),
            max_workers=self.max_workers,
        )

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(requests))) as pool:
            futures = [pool.submit(self.analyzer.analyze_request, request) for request in requests]
            results = [self._collect(index, future) for index, future in enumerate(futures)]

        failures = sum(1 for r in results if not r.success)
        self.logger.info(
            "cascade_batch_completed",
            request_count=len(requests),
            failure_count=failures,
        )

        return results

    def _collect(self, index: int, future) -> BatchItemResult:
        try:
            return BatchItemResult(index=index, success=True, result=future.result())
        except CascadeEngineError as e:
            self.logger.warning("cascade_batch_item_failed", index=index, error=str(e))
            return BatchItemResult(index=index, success=False, error=str(e))
