"""
Enumeration types for the Beacon cascade engine.

This module defines all enum types used across the system for type safety
and consistent validation. All enums inherit from str to ensure JSON
serialization compatibility.
"""

from enum import Enum
from typing import Optional


class NodeType(str, Enum):
    """
    Role a participant plays in the supply chain.

    The role decides which other roles it exchanges goods with (and so which
    neighbours a disruption can reach) and how heavily the node counts
    toward the network impact score.
    """

    SUPPLIER = "supplier"
    MANUFACTURER = "manufacturer"
    DISTRIBUTOR = "distributor"
    RETAILER = "retailer"


class RiskLevel(str, Enum):
    """
    Baseline risk classification of a node.

    Higher risk means less resilience: more of an incoming disruption passes
    through to the node.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PropagationType(str, Enum):
    """Classification of a traversed edge by the hop depth of its source node."""

    DIRECT = "direct"  # origin -> first ring
    INDIRECT = "indirect"  # first ring -> second ring
    CASCADING = "cascading"  # anything further out

    @classmethod
    def for_source_depth(cls, depth: int) -> "PropagationType":
        """Classify an edge fired from a node at the given depth."""
        if depth == 0:
            return cls.DIRECT
        if depth == 1:
            return cls.INDIRECT
        return cls.CASCADING


class Severity(str, Enum):
    """Advisory scale of the initial disruption at the origin node."""

    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    CATASTROPHIC = "catastrophic"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Severity":
        """
        Normalize a free-form severity label.

        Missing or unrecognized values degrade to MODERATE instead of failing,
        since severity only scales the disruption. Labels must match exactly:
        "SEVERE" or " severe" are unrecognized.

        Args:
            value: Raw severity label, or None

        Returns:
            Matching Severity, or Severity.MODERATE
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.MODERATE
        try:
            return cls(value)
        except ValueError:
            return cls.MODERATE


class ScenarioType(str, Enum):
    """
    Disruption scenarios with a known default origin.

    Requests may carry any scenario label; only these three map to a
    region-specific default origin node.
    """

    SUPPLIER_FAILURE = "supplier_failure"
    PORT_CLOSURE = "port_closure"
    NATURAL_DISASTER = "natural_disaster"
