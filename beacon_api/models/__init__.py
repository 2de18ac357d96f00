"""Pydantic models and enums for the Beacon cascade engine."""

from .cascade import (
    CascadeAnalysisRequest,
    CascadeAnalysisResponse,
    CascadeSummary,
    CascadeSummaryResponse,
)
from .enums import NodeType, PropagationType, RiskLevel, ScenarioType, Severity
from .network import CascadeResult, NetworkNode, PropagationStep

__all__ = [
    "CascadeAnalysisRequest",
    "CascadeAnalysisResponse",
    "CascadeResult",
    "CascadeSummary",
    "CascadeSummaryResponse",
    "NetworkNode",
    "NodeType",
    "PropagationStep",
    "PropagationType",
    "RiskLevel",
    "ScenarioType",
    "Severity",
]
