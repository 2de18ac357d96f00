"""
Topology providers.

A topology provider resolves a region identifier to the nodes that exist in
that region. The engine treats providers as read-only data sources.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

import structlog

from beacon_api.models.enums import NodeType, RiskLevel
from beacon_api.models.network import NetworkNode

logger = structlog.get_logger()


def _node(
    node_id: str, name: str, node_type: NodeType, region: str, risk: RiskLevel, impact: float
) -> NetworkNode:
    return NetworkNode(
        id=node_id,
        name=name,
        type=node_type,
        region=region,
        risk_level=risk,
        impact_score=impact,
    )


BUILTIN_TOPOLOGIES: dict[str, tuple[NetworkNode, ...]] = {
    "asia": (
        _node("supplier-asia-001", "Shanghai Electronics Supplier", NodeType.SUPPLIER, "asia", RiskLevel.MEDIUM, 85),
        _node("manufacturer-asia-001", "Shenzhen Manufacturing Hub", NodeType.MANUFACTURER, "asia", RiskLevel.HIGH, 92),
        _node("distributor-asia-001", "Hong Kong Distribution Center", NodeType.DISTRIBUTOR, "asia", RiskLevel.MEDIUM, 78),
        _node("supplier-asia-002", "Taiwan Semiconductor Fab", NodeType.SUPPLIER, "asia", RiskLevel.CRITICAL, 95),
        _node("manufacturer-asia-002", "Seoul Assembly Plant", NodeType.MANUFACTURER, "asia", RiskLevel.LOW, 65),
    ),
    "europe": (
        _node("supplier-europe-001", "German Automotive Parts", NodeType.SUPPLIER, "europe", RiskLevel.LOW, 70),
        _node("manufacturer-europe-001", "Netherlands Manufacturing", NodeType.MANUFACTURER, "europe", RiskLevel.MEDIUM, 80),
        _node("distributor-europe-001", "Rotterdam Port Hub", NodeType.DISTRIBUTOR, "europe", RiskLevel.MEDIUM, 75),
    ),
    "north_america": (
        _node("supplier-na-001", "US Raw Materials", NodeType.SUPPLIER, "north_america", RiskLevel.LOW, 68),
        _node("manufacturer-na-001", "Mexico Assembly Plant", NodeType.MANUFACTURER, "north_america", RiskLevel.MEDIUM, 82),
        _node("distributor-na-001", "Chicago Distribution Hub", NodeType.DISTRIBUTOR, "north_america", RiskLevel.LOW, 72),
    ),
}


class TopologyProvider(ABC):
    """
    Abstract source of supply-chain topologies.

    Implementations must return nodes in a stable order: the propagation
    engine walks neighbours in listing order, so reordering changes results.
    """

    @abstractmethod
    def get_topology(self, region: str) -> list[NetworkNode]:
        """
        Nodes present in ``region``.

        Unknown regions may resolve to a fallback topology instead of
        failing.

        Args:
            region: Region identifier

        Returns:
            Nodes of the region, in stable listing order
        """

    @abstractmethod
    def regions(self) -> list[str]:
        """Region identifiers this provider knows about."""


class StaticTopologyProvider(TopologyProvider):
    """
    In-memory topology provider backed by a region -> nodes mapping.

    Attributes:
        default_region: Region served when an unknown region is requested

    Example:
        >>> provider = StaticTopologyProvider()
        >>> [n.id for n in provider.get_topology("europe")]
        ['supplier-europe-001', 'manufacturer-europe-001', 'distributor-europe-001']
    """

    DEFAULT_REGION = "asia"

    def __init__(
        self,
        topologies: Optional[Mapping[str, Sequence[NetworkNode]]] = None,
        default_region: str = DEFAULT_REGION,
    ):
        """
        Initialize the provider.

        Args:
            topologies: Region -> nodes mapping (default: built-in roster)
            default_region: Fallback region for unknown identifiers
        """
        source = BUILTIN_TOPOLOGIES if topologies is None else topologies
        self._topologies: dict[str, tuple[NetworkNode, ...]] = {
            region: tuple(nodes) for region, nodes in source.items()
        }
        self.default_region = default_region
        self.logger = structlog.get_logger()

    def get_topology(self, region: str) -> list[NetworkNode]:
        if region in self._topologies:
            return list(self._topologies[region])

        self.logger.warning(
            "topology_region_fallback",
            requested_region=region,
            fallback_region=self.default_region,
        )
        return list(self._topologies.get(self.default_region, ()))

    def regions(self) -> list[str]:
        return list(self._topologies)

    def has_region(self, region: str) -> bool:
        """Whether ``region`` is served without falling back."""
        return region in self._topologies
