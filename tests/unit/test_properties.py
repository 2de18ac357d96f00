"""
Property-based tests using Hypothesis for the Beacon cascade engine.

These tests verify the invariants of the propagation engine and network
impact scorer across randomly generated single- and multi-region
topologies.
"""

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from beacon_api.engine.propagation import (
    NetworkImpactScorer,
    PropagationEngine,
    compute_decay,
    initial_magnitude,
)
from beacon_api.engine.topology import BUILTIN_TOPOLOGIES
from beacon_api.models.enums import NodeType, RiskLevel, Severity
from beacon_api.models.network import NetworkNode


# =============================================================================
# Strategies
# =============================================================================


node_specs = st.tuples(
    st.sampled_from(list(NodeType)),
    st.sampled_from(list(RiskLevel)),
    st.floats(min_value=0.0, max_value=100.0, allow_nan=False, allow_infinity=False),
    st.sampled_from(["asia", "asia", "asia", "europe"]),
)


@st.composite
def topologies(draw, min_size=1, max_size=12):
    """Topologies with unique ids, mostly in one region."""
    specs = draw(st.lists(node_specs, min_size=min_size, max_size=max_size))
    return [
        NetworkNode(
            id=f"n{i}",
            name=f"Node {i}",
            type=node_type,
            region=region,
            risk_level=risk,
            impact_score=impact,
        )
        for i, (node_type, risk, impact, region) in enumerate(specs)
    ]


@st.composite
def scenarios(draw):
    """(topology, origin id, severity) triples with a valid origin."""
    topology = draw(topologies())
    origin = draw(st.sampled_from(topology))
    severity = draw(st.sampled_from(list(Severity)))
    return topology, origin.id, severity


# =============================================================================
# Propagation Engine Property Tests
# =============================================================================


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_propagation_deterministic(scenario):
    """
    Invariant 1: Repeated propagation over the same inputs is identical.
    """
    topology, origin_id, severity = scenario
    engine = PropagationEngine()

    first = engine.propagate(topology, origin_id, severity)
    second = engine.propagate(topology, origin_id, severity)

    assert first.affected_nodes == second.affected_nodes
    assert first.propagation_path == second.propagation_path
    assert first.network_impact_score == second.network_impact_score


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_origin_always_affected(scenario):
    """
    Invariant 2: The origin is always the first affected node.
    """
    topology, origin_id, severity = scenario
    result = PropagationEngine().propagate(topology, origin_id, severity)

    assert result.affected_nodes
    assert result.affected_nodes[0].id == origin_id


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_magnitude_bounds(scenario):
    """
    Invariant 3: Adjusted scores stay in [0, 100], edge magnitudes in (cutoff, 100],
    and every edge fires at depth >= 1.
    """
    topology, origin_id, severity = scenario
    engine = PropagationEngine()
    result = engine.propagate(topology, origin_id, severity)

    for node in result.affected_nodes:
        assert 0.0 <= node.impact_score <= 100.0
    for step in result.propagation_path:
        assert engine.cutoff < step.impact_magnitude <= 100.0
        assert 1 <= step.impact_delay <= engine.max_depth


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_referential_integrity(scenario):
    """
    Invariant 4: Both ends of every traversed edge are affected nodes.
    """
    topology, origin_id, severity = scenario
    result = PropagationEngine().propagate(topology, origin_id, severity)
    affected_ids = set(result.affected_node_ids)

    for step in result.propagation_path:
        assert step.from_node in affected_ids
        assert step.to_node in affected_ids


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_each_hop_attenuates(scenario):
    """
    Invariant 5: An edge never carries more than the magnitude its source was
    processed with (the first edge into it, or the origin magnitude).
    """
    topology, origin_id, severity = scenario
    result = PropagationEngine().propagate(topology, origin_id, severity)

    incoming = {origin_id: initial_magnitude(severity)}
    for step in result.propagation_path:
        assert step.impact_magnitude < incoming[step.from_node]
        incoming.setdefault(step.to_node, step.impact_magnitude)


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_nodes_affected_at_most_once(scenario):
    """
    Invariant 6: Visit-once traversal never lists a node twice.
    """
    topology, origin_id, severity = scenario
    result = PropagationEngine().propagate(topology, origin_id, severity)
    ids = result.affected_node_ids

    assert len(ids) == len(set(ids))


@given(scenario=scenarios())
@settings(max_examples=150)
def test_prop_cascade_stays_in_origin_region(scenario):
    """
    Invariant 7: Cascades never leave the origin's region.
    """
    topology, origin_id, severity = scenario
    result = PropagationEngine().propagate(topology, origin_id, severity)
    origin_region = next(n.region for n in topology if n.id == origin_id)

    assert all(node.region == origin_region for node in result.affected_nodes)


# =============================================================================
# Decay & Scorer Property Tests
# =============================================================================


@given(
    depth=st.integers(min_value=0, max_value=10),
    risk=st.sampled_from(list(RiskLevel)),
    source=st.sampled_from(list(NodeType)),
    destination=st.sampled_from(list(NodeType)),
)
@settings(max_examples=200)
def test_prop_decay_deeper_hops_attenuate_more(depth, risk, source, destination):
    """
    Invariant 8: One more hop of depth strictly lowers the decay multiplier.
    """
    shallow = compute_decay(depth, risk, source, destination)
    deep = compute_decay(depth + 1, risk, source, destination)

    assert 0.0 < deep < shallow <= 1.0


@given(
    topology=topologies(min_size=0, max_size=15),
    extra_nodes=st.integers(min_value=0, max_value=10),
)
@settings(max_examples=150)
def test_prop_network_score_range(topology, extra_nodes):
    """
    Invariant 9: Network impact score is an integer in [0, 100]; 0 for empty topologies.
    """
    scorer = NetworkImpactScorer()
    total = len(topology) + extra_nodes
    score = scorer.score(topology, total_node_count=total)

    assert isinstance(score, int)
    assert 0 <= score <= 100
    if total == 0:
        assert score == 0


# =============================================================================
# Severity Monotonicity (built-in topologies)
# =============================================================================


@pytest.mark.parametrize(
    "region,origin_id",
    [(region, node.id) for region, nodes in BUILTIN_TOPOLOGIES.items() for node in nodes],
)
def test_prop_severity_monotonic_on_builtin_topologies(region, origin_id):
    """
    Invariant 10: A harsher severity never yields a lower network impact score.
    """
    engine = PropagationEngine()
    topology = list(BUILTIN_TOPOLOGIES[region])
    ordered = [Severity.MINOR, Severity.MODERATE, Severity.SEVERE, Severity.CATASTROPHIC]

    scores = [engine.propagate(topology, origin_id, s).network_impact_score for s in ordered]

    assert scores == sorted(scores), f"Severity ordering inverted for {origin_id}: {scores}"
