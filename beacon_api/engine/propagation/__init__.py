"""
Cascade Impact Propagation Engine.

This module computes how a disruption at one supply-chain node spreads to
connected nodes, how its magnitude decays per hop, and how much damage the
network suffers overall.

Components:
    PropagationEngine: Breadth-first traversal with decay, depth cap and cutoff
    NetworkImpactScorer: Weighted, normalized 0-100 network damage score
    compute_decay / find_connected: Pure decay and relationship tables
    summarize / find_critical_path: Reporting views over a CascadeResult

Example:
    >>> from beacon_api.engine.propagation import PropagationEngine
    >>> engine = PropagationEngine()
    >>> result = engine.propagate(topology, "supplier-asia-001", "severe")
    >>> print(f"Network impact: {result.network_impact_score}")
"""

from .critical_path import build_cascade_graph, find_critical_path
from .decay import compute_decay
from .engine import SEVERITY_MULTIPLIERS, PropagationEngine, initial_magnitude
from .network_scorer import NODE_TYPE_WEIGHTS, NetworkImpactScorer
from .relationships import connected_types, find_connected, relationship_multiplier
from .summary import summarize

__all__ = [
    "NODE_TYPE_WEIGHTS",
    "SEVERITY_MULTIPLIERS",
    "NetworkImpactScorer",
    "PropagationEngine",
    "build_cascade_graph",
    "compute_decay",
    "connected_types",
    "find_connected",
    "find_critical_path",
    "initial_magnitude",
    "relationship_multiplier",
    "summarize",
]
