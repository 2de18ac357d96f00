"""
Supply-chain relationship model.

Encodes which node roles exchange goods with which, and how strongly a
disruption transfers along each directed pair. Goods flow forward
supplier -> manufacturer -> distributor -> retailer (manufacturers also sell
to retailers directly); every forward edge has a weaker reverse edge.
"""

from typing import Iterable

from beacon_api.models.enums import NodeType
from beacon_api.models.network import NetworkNode

FORWARD_RELATIONSHIPS: dict[NodeType, tuple[NodeType, ...]] = {
    NodeType.SUPPLIER: (NodeType.MANUFACTURER,),
    NodeType.MANUFACTURER: (NodeType.DISTRIBUTOR, NodeType.RETAILER),
    NodeType.DISTRIBUTOR: (NodeType.RETAILER,),
    NodeType.RETAILER: (),
}

REVERSE_RELATIONSHIPS: dict[NodeType, tuple[NodeType, ...]] = {
    NodeType.SUPPLIER: (),
    NodeType.MANUFACTURER: (NodeType.SUPPLIER,),
    NodeType.DISTRIBUTOR: (NodeType.MANUFACTURER,),
    NodeType.RETAILER: (NodeType.DISTRIBUTOR, NodeType.MANUFACTURER),
}

# (source, destination) -> share of the disruption that crosses the edge
RELATIONSHIP_MULTIPLIERS: dict[tuple[NodeType, NodeType], float] = {
    (NodeType.SUPPLIER, NodeType.MANUFACTURER): 0.9,
    (NodeType.SUPPLIER, NodeType.DISTRIBUTOR): 0.3,
    (NodeType.SUPPLIER, NodeType.RETAILER): 0.1,
    (NodeType.MANUFACTURER, NodeType.SUPPLIER): 0.6,
    (NodeType.MANUFACTURER, NodeType.DISTRIBUTOR): 0.8,
    (NodeType.MANUFACTURER, NodeType.RETAILER): 0.4,
    (NodeType.DISTRIBUTOR, NodeType.SUPPLIER): 0.2,
    (NodeType.DISTRIBUTOR, NodeType.MANUFACTURER): 0.5,
    (NodeType.DISTRIBUTOR, NodeType.RETAILER): 0.9,
    (NodeType.RETAILER, NodeType.SUPPLIER): 0.1,
    (NodeType.RETAILER, NodeType.MANUFACTURER): 0.3,
    (NodeType.RETAILER, NodeType.DISTRIBUTOR): 0.7,
}

DEFAULT_RELATIONSHIP_MULTIPLIER = 0.3


def connected_types(node_type: NodeType) -> frozenset[NodeType]:
    """Roles reachable from ``node_type`` in either direction."""
    node_type = NodeType(node_type)
    return frozenset(FORWARD_RELATIONSHIPS[node_type] + REVERSE_RELATIONSHIPS[node_type])


def relationship_multiplier(source_type: NodeType, destination_type: NodeType) -> float:
    """
    Transfer strength for a directed pair of roles.

    Pairs absent from the table (same-role pairs) transfer weakly.
    """
    return RELATIONSHIP_MULTIPLIERS.get(
        (NodeType(source_type), NodeType(destination_type)),
        DEFAULT_RELATIONSHIP_MULTIPLIER,
    )


def find_connected(node: NetworkNode, topology: Iterable[NetworkNode]) -> list[NetworkNode]:
    """
    Neighbours of ``node`` within ``topology``.

    A neighbour is any other node in the same region whose role is connected
    to the node's role. Results keep the topology's listing order so that
    traversal is deterministic.

    Args:
        node: Node whose neighbours are wanted
        topology: Full node listing to search

    Returns:
        Connected nodes, in topology order, excluding ``node`` itself
    """
    reachable = connected_types(node.type)
    return [
        candidate
        for candidate in topology
        if candidate.id != node.id
        and candidate.type in reachable
        and candidate.region == node.region
    ]
