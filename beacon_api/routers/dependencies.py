"""
Shared router dependencies.

The analyzer is built once from settings and cached; tests override these
through ``app.dependency_overrides``.
"""

from functools import lru_cache

from beacon_api.config import get_settings
from beacon_api.engine import BatchCascadeAnalyzer, CascadeAnalyzer


@lru_cache
def get_analyzer() -> CascadeAnalyzer:
    """Cached cascade analyzer configured from settings."""
    return CascadeAnalyzer.from_settings()


def get_batch_analyzer() -> BatchCascadeAnalyzer:
    """Batch analyzer sharing the cached analyzer."""
    return BatchCascadeAnalyzer(
        analyzer=get_analyzer(),
        max_workers=get_settings().batch_max_workers,
    )
