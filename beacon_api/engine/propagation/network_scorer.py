"""
Network Impact Scorer — Aggregate Cascade Damage.

Reduces the affected nodes of a cascade to a single 0-100 score. Each
node's adjusted impact is weighted by how important its role is to the
network, then normalized against every node in the topology being hit at
full impact with the heaviest weight.

Version: network_impact_v1
"""

import math
from typing import Iterable, Optional

import structlog

from beacon_api.models.enums import NodeType
from beacon_api.models.network import NetworkNode

logger = structlog.get_logger()


NODE_TYPE_WEIGHTS: dict[NodeType, float] = {
    NodeType.SUPPLIER: 1.0,  # source of materials
    NodeType.MANUFACTURER: 0.9,  # value creation
    NodeType.DISTRIBUTOR: 0.7,  # logistics hub
    NodeType.RETAILER: 0.5,  # end point
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


class NetworkImpactScorer:
    """
    Scores total cascade damage on a 0-100 scale.

    Attributes:
        weights: Importance weight per node role
        max_weight: Heaviest weight, used for the theoretical maximum

    Example:
        >>> scorer = NetworkImpactScorer()
        >>> scorer.score(result.affected_nodes, total_node_count=5)
        41
    """

    def __init__(self, weights: Optional[dict[NodeType, float]] = None):
        """
        Initialize the scorer.

        Args:
            weights: Optional per-role weights overriding NODE_TYPE_WEIGHTS
        """
        self.weights = dict(NODE_TYPE_WEIGHTS)
        if weights:
            self.weights.update({NodeType(k): v for k, v in weights.items()})
        if any(not 0.0 < w <= 1.0 for w in self.weights.values()):
            raise ValueError("Node type weights must be in (0, 1]")
        self.max_weight = max(self.weights.values())
        self.logger = structlog.get_logger()

    def weight_for(self, node_type: NodeType) -> float:
        """Importance weight of a node role."""
        return self.weights[NodeType(node_type)]

    def score(self, affected_nodes: Iterable[NetworkNode], total_node_count: int) -> int:
        """
        Compute the network impact score.

        Args:
            affected_nodes: Nodes carrying adjusted impact scores
            total_node_count: Size of the whole topology, not just the affected part

        Returns:
            Integer score in [0, 100]; 0 for an empty topology
        """
        if total_node_count <= 0:
            return 0

        weighted_impact = sum(
            node.impact_score * self.weight_for(node.type) for node in affected_nodes
        )
        max_possible = total_node_count * 100 * self.max_weight
        percentage = (weighted_impact / max_possible) * 100
        score = min(100, round_half_up(percentage))

        self.logger.debug(
            "network_impact_scored",
            weighted_impact=round(weighted_impact, 4),
            max_possible=max_possible,
            score=score,
        )

        return score
