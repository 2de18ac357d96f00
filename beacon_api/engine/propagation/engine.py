"""
Propagation Engine — Breadth-First Cascade Traversal.

This module spreads a disruption outward from an origin node through a
region's supply-chain topology, attenuating its magnitude at every hop.

Traversal algorithm:
1. Seed the queue with the origin at depth 0 and the severity magnitude
2. Dequeue in FIFO order; skip nodes already visited or beyond max_depth
3. Record the node as affected when its incoming magnitude clears the cutoff
4. For each unvisited neighbour, decay the magnitude; if it still clears the
   cutoff, record the edge and enqueue the neighbour one hop deeper

A node is processed only the first time it is dequeued. When two paths
reach the same node, the one that arrives first in queue order wins, even
if a later path would carry a larger magnitude. The same node may still be
the target of several recorded edges if it was enqueued more than once
before being processed.

Version: cascade_bfs_v1
"""

from collections import deque
from typing import Optional, Sequence, Union

import structlog

from beacon_api.engine.errors import OriginNotFoundError
from beacon_api.models.enums import PropagationType, Severity
from beacon_api.models.network import CascadeResult, NetworkNode, PropagationStep

from .decay import compute_decay
from .network_scorer import NetworkImpactScorer
from .relationships import find_connected

logger = structlog.get_logger()


# Fraction of full-scale impact injected at the origin
SEVERITY_MULTIPLIERS: dict[Severity, float] = {
    Severity.MINOR: 0.3,
    Severity.MODERATE: 0.6,
    Severity.SEVERE: 0.8,
    Severity.CATASTROPHIC: 1.0,
}


def initial_magnitude(severity: Union[Severity, str, None]) -> float:
    """Origin magnitude on the 0-100 scale for a severity label."""
    return 100 * SEVERITY_MULTIPLIERS[Severity.parse(severity)]


class PropagationEngine:
    """
    Computes which nodes a disruption reaches and how strongly.

    The engine holds only its configuration; every call to ``propagate``
    works on local state, so one instance can serve concurrent callers.

    Attributes:
        max_depth: Nodes deeper than this many hops are never processed
        cutoff: Magnitudes at or below this value are treated as no impact
        scorer: Reduces affected nodes to a network impact score

    Example:
        >>> engine = PropagationEngine()
        >>> result = engine.propagate(topology, "supplier-asia-001", "severe")
        >>> print(result.network_impact_score)
    """

    DEFAULT_MAX_DEPTH = 3
    DEFAULT_CUTOFF = 10.0

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        cutoff: float = DEFAULT_CUTOFF,
        scorer: Optional[NetworkImpactScorer] = None,
    ):
        """
        Initialize the propagation engine.

        Args:
            max_depth: Maximum hop depth processed (default: 3)
            cutoff: Minimum surviving magnitude, exclusive (default: 10.0)
            scorer: Optional custom network impact scorer
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if not 0.0 <= cutoff < 100.0:
            raise ValueError(f"cutoff must be in [0, 100), got {cutoff}")

        self.max_depth = max_depth
        self.cutoff = cutoff
        self.scorer = scorer or NetworkImpactScorer()
        self.logger = structlog.get_logger()

    def propagate(
        self,
        topology: Sequence[NetworkNode],
        origin_id: str,
        severity: Union[Severity, str, None] = Severity.MODERATE,
    ) -> CascadeResult:
        """
        Propagate a disruption from ``origin_id`` through ``topology``.

        Args:
            topology: Nodes of one topology snapshot, in listing order
            origin_id: Id of the node where the disruption starts
            severity: Severity label; unknown values fall back to moderate

        Returns:
            CascadeResult with affected nodes, traversed edges and score

        Raises:
            OriginNotFoundError: If ``origin_id`` is not in ``topology``
        """
        topology = list(topology)
        if not topology:
            self.logger.info("cascade_propagation_empty_topology", origin_id=origin_id)
            return CascadeResult()

        origin = next((node for node in topology if node.id == origin_id), None)
        if origin is None:
            self.logger.warning(
                "cascade_origin_not_found",
                origin_id=origin_id,
                topology_size=len(topology),
            )
            raise OriginNotFoundError(origin_id)

        magnitude = initial_magnitude(severity)
        self.logger.debug(
            "cascade_propagation_started",
            origin_id=origin_id,
            severity=Severity.parse(severity).value,
            initial_magnitude=magnitude,
            topology_size=len(topology),
        )

        affected_nodes, propagation_path = self._traverse(topology, origin, magnitude)
        score = self.scorer.score(affected_nodes, total_node_count=len(topology))

        result = CascadeResult(
            affected_nodes=affected_nodes,
            propagation_path=propagation_path,
            network_impact_score=score,
        )

        self.logger.info(
            "cascade_propagation_completed",
            origin_id=origin_id,
            affected_count=len(affected_nodes),
            step_count=len(propagation_path),
            max_depth=result.max_depth,
            network_impact_score=score,
        )

        return result

    # =========================================================================
    # Breadth-First Traversal
    # =========================================================================

    def _traverse(
        self,
        topology: list[NetworkNode],
        origin: NetworkNode,
        origin_magnitude: float,
    ) -> tuple[list[NetworkNode], list[PropagationStep]]:
        """
        Walk the topology breadth-first from ``origin``.

        Args:
            topology: Full node listing
            origin: Node where the disruption starts
            origin_magnitude: Starting magnitude on the 0-100 scale

        Returns:
            (affected nodes with adjusted scores, traversed edges)
        """
        affected_nodes: list[NetworkNode] = []
        propagation_path: list[PropagationStep] = []
        visited: set[str] = set()
        queue: deque[tuple[NetworkNode, int, float]] = deque()  # (node, depth, magnitude)
        queue.append((origin, 0, origin_magnitude))

        while queue:
            node, depth, magnitude = queue.popleft()

            if node.id in visited or depth > self.max_depth:
                continue
            visited.add(node.id)

            if magnitude > self.cutoff:
                affected_nodes.append(self._adjust(node, magnitude))

            # Edges into a depth past the cap would name a node that is never processed
            if depth + 1 > self.max_depth:
                continue

            for neighbour in find_connected(node, topology):
                if neighbour.id in visited:
                    continue

                decay = compute_decay(depth, neighbour.risk_level, node.type, neighbour.type)
                new_magnitude = magnitude * decay
                if new_magnitude <= self.cutoff:
                    continue

                propagation_path.append(
                    PropagationStep(
                        from_node=node.id,
                        to_node=neighbour.id,
                        impact_delay=depth + 1,
                        impact_magnitude=new_magnitude,
                        propagation_type=PropagationType.for_source_depth(depth),
                    )
                )
                queue.append((neighbour, depth + 1, new_magnitude))

        return affected_nodes, propagation_path

    @staticmethod
    def _adjust(node: NetworkNode, magnitude: float) -> NetworkNode:
        """Copy of ``node`` with its baseline impact scaled by ``magnitude``."""
        adjusted = min(100.0, node.impact_score * (magnitude / 100))
        return node.model_copy(update={"impact_score": adjusted})
