"""
Pytest configuration and shared fixtures for the Beacon cascade test suite.

Provides model factories, ready-made topologies and an API client reused
across unit, property-based, integration and golden tests.
"""

import os
from typing import Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE importing app
os.environ["TESTING"] = "true"
os.environ["DEV_MODE"] = "true"

from beacon_api.engine import CascadeAnalyzer
from beacon_api.engine.propagation import PropagationEngine
from beacon_api.engine.topology import StaticTopologyProvider
from beacon_api.models.enums import NodeType, RiskLevel
from beacon_api.models.network import NetworkNode


# ---------------------------------------------------------------------------
# Pydantic model factories — reusable across all test suites
# ---------------------------------------------------------------------------

def make_node(
    node_id: Optional[str] = None,
    node_type: NodeType = NodeType.SUPPLIER,
    risk_level: RiskLevel = RiskLevel.MEDIUM,
    impact_score: float = 80.0,
    region: str = "asia",
    **overrides,
) -> NetworkNode:
    """Factory function for creating test NetworkNode objects."""
    node_id = node_id or f"{node_type.value}-{uuid4().hex[:6]}"
    defaults = dict(
        id=node_id,
        name=f"Test {node_type.value.title()} {node_id}",
        type=node_type,
        region=region,
        risk_level=risk_level,
        impact_score=impact_score,
    )
    defaults.update(overrides)
    return NetworkNode(**defaults)


def make_example_topology() -> list[NetworkNode]:
    """Three-node single-region topology: supplier, manufacturer, distributor."""
    return [
        make_node("S", NodeType.SUPPLIER, RiskLevel.MEDIUM, 85),
        make_node("M", NodeType.MANUFACTURER, RiskLevel.HIGH, 92),
        make_node("D", NodeType.DISTRIBUTOR, RiskLevel.MEDIUM, 78),
    ]


def make_chain_topology(risk_level: RiskLevel = RiskLevel.CRITICAL) -> list[NetworkNode]:
    """Linear supplier -> manufacturer -> distributor -> retailer chain."""
    return [
        make_node("chain-s", NodeType.SUPPLIER, risk_level, 100),
        make_node("chain-m", NodeType.MANUFACTURER, risk_level, 100),
        make_node("chain-d", NodeType.DISTRIBUTOR, risk_level, 100),
        make_node("chain-r", NodeType.RETAILER, risk_level, 100),
    ]


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine():
    """PropagationEngine with default depth cap and cutoff."""
    return PropagationEngine()


@pytest.fixture
def example_topology():
    """Three-node example topology."""
    return make_example_topology()


@pytest.fixture
def chain_topology():
    """Four-node all-critical chain."""
    return make_chain_topology()


@pytest.fixture
def provider():
    """Topology provider serving the built-in region roster."""
    return StaticTopologyProvider()


@pytest.fixture
def analyzer(provider):
    """CascadeAnalyzer over the built-in roster."""
    return CascadeAnalyzer(topology_provider=provider)


@pytest.fixture
def client():
    """FastAPI test client for integration tests."""
    from beacon_api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def request_headers():
    """Request headers carrying a trace id."""
    return {"X-Request-ID": str(uuid4())}
