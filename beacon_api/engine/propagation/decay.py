"""
Impact decay model.

The share of a disruption that survives one hop is the product of three
attenuation factors, each in (0, 1]:

- depth:        0.7 ** depth (30% lost per hop already travelled)
- resilience:   keyed by the destination's risk level
- relationship: keyed by the directed (source role, destination role) pair
"""

from beacon_api.models.enums import NodeType, RiskLevel

from .relationships import relationship_multiplier

DEPTH_DECAY_BASE = 0.7

# Lower risk means higher resilience, so less of the impact gets through
RESILIENCE_MULTIPLIERS: dict[RiskLevel, float] = {
    RiskLevel.LOW: 0.5,
    RiskLevel.MEDIUM: 0.7,
    RiskLevel.HIGH: 0.9,
    RiskLevel.CRITICAL: 1.0,
}


def depth_factor(depth: int) -> float:
    """Attenuation for a hop leaving a node ``depth`` hops from the origin."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return DEPTH_DECAY_BASE**depth


def resilience_factor(risk_level: RiskLevel) -> float:
    """Share of incoming impact a node with ``risk_level`` lets through."""
    return RESILIENCE_MULTIPLIERS[RiskLevel(risk_level)]


def compute_decay(
    depth: int,
    destination_risk: RiskLevel,
    source_type: NodeType,
    destination_type: NodeType,
) -> float:
    """
    Multiplier applied to a magnitude crossing one edge.

    Args:
        depth: Hop depth of the source node (0 at the origin)
        destination_risk: Risk level of the node being entered
        source_type: Role of the node the impact leaves
        destination_type: Role of the node the impact enters

    Returns:
        Product of depth, resilience and relationship factors, in (0, 1]
    """
    return (
        depth_factor(depth)
        * resilience_factor(destination_risk)
        * relationship_multiplier(source_type, destination_type)
    )
