"""
Supply-chain network models for the Beacon cascade engine.

This module defines the topology node, the traversed edge, and the cascade
result structures. Field names are snake_case in Python and camelCase on
the wire; both spellings are accepted as input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import NodeType, PropagationType, RiskLevel


class NetworkNode(BaseModel):
    """
    A participant in the supply chain.

    Nodes are immutable: the engine never writes risk or impact back onto the
    canonical topology. Affected copies carrying an adjusted impact score are
    produced with ``model_copy``.

    Attributes:
        id: Stable identifier, unique within a topology snapshot
        name: Human-readable label
        type: Supply-chain role
        region: Region identifier; cascades never cross regions
        risk_level: Baseline risk, used as a resilience input to decay
        impact_score: Baseline criticality in [0, 100]
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "supplier-asia-001",
                "name": "Shanghai Electronics Supplier",
                "type": "supplier",
                "region": "asia",
                "riskLevel": "medium",
                "impactScore": 85,
            }
        },
    )

    id: str = Field(min_length=1, description="Unique node identifier")
    name: str = Field(description="Human-readable label")
    type: NodeType = Field(description="Supply-chain role")
    region: str = Field(min_length=1, description="Region identifier")
    risk_level: RiskLevel = Field(description="Baseline risk classification")
    impact_score: float = Field(
        ge=0.0, le=100.0, description="Baseline (or adjusted) criticality in [0, 100]"
    )


class PropagationStep(BaseModel):
    """
    One directed edge actually traversed during a cascade.

    Attributes:
        from_node: Source node id
        to_node: Destination node id
        impact_delay: Hop count from the origin at which the edge fired
        impact_magnitude: Surviving magnitude at the destination, in (0, 100]
        propagation_type: direct / indirect / cascading by source depth
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    from_node: str = Field(description="Source node id")
    to_node: str = Field(description="Destination node id")
    impact_delay: int = Field(ge=1, description="Hop depth at which this edge fired")
    impact_magnitude: float = Field(
        gt=0.0, le=100.0, description="Surviving impact at the destination"
    )
    propagation_type: PropagationType = Field(description="Edge classification")

    @field_validator("to_node")
    @classmethod
    def validate_not_self_loop(cls, v: str, info) -> str:
        """A cascade never fires an edge back onto its own source."""
        if info.data.get("from_node") == v:
            raise ValueError("Propagation step cannot start and end at the same node")
        return v


class CascadeResult(BaseModel):
    """
    Outcome of propagating one disruption through a topology.

    Attributes:
        affected_nodes: Origin plus every node reached above the cutoff, each
            carrying its adjusted impact score
        propagation_path: Edges traversed, in traversal order
        network_impact_score: Aggregate damage in [0, 100]
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    affected_nodes: list[NetworkNode] = Field(default_factory=list)
    propagation_path: list[PropagationStep] = Field(default_factory=list)
    network_impact_score: int = Field(default=0, ge=0, le=100)

    @property
    def affected_node_ids(self) -> list[str]:
        """Ids of affected nodes in the order they were reached."""
        return [node.id for node in self.affected_nodes]

    @property
    def max_depth(self) -> int:
        """Deepest hop reached, 0 when the cascade never left the origin."""
        return max((step.impact_delay for step in self.propagation_path), default=0)
