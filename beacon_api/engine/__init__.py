"""
Beacon cascade engine.

Subpackages:
    propagation: Decay, relationships, BFS engine, scoring and summaries
    topology: Region topology providers and default-origin resolution

Modules:
    analyzer: End-to-end analysis of one request
    batch: Concurrent fan-out of many requests
"""

from .analyzer import CascadeAnalyzer
from .batch import BatchCascadeAnalyzer, BatchItemResult
from .errors import CascadeEngineError, OriginNotFoundError

__all__ = [
    "BatchCascadeAnalyzer",
    "BatchItemResult",
    "CascadeAnalyzer",
    "CascadeEngineError",
    "OriginNotFoundError",
]
