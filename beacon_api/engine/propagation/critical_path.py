"""
Cascade graph view.

Builds a NetworkX DiGraph from a CascadeResult so downstream consumers can
run graph queries over the subgraph a disruption actually touched. Every
edge points from a node processed earlier to a node processed later, so the
graph is always a DAG.
"""

import networkx as nx
import structlog

from beacon_api.models.network import CascadeResult

logger = structlog.get_logger()


def build_cascade_graph(result: CascadeResult) -> nx.DiGraph:
    """
    Convert a cascade result into a directed graph.

    Node attributes: name, type, region, risk_level, impact_score (adjusted).
    Edge attributes: magnitude, delay, propagation_type. When the same edge
    was recorded twice, the first recording is kept.

    Args:
        result: Cascade to convert

    Returns:
        NetworkX DiGraph of affected nodes and traversed edges
    """
    graph = nx.DiGraph()

    for node in result.affected_nodes:
        graph.add_node(
            node.id,
            name=node.name,
            type=node.type.value,
            region=node.region,
            risk_level=node.risk_level.value,
            impact_score=node.impact_score,
        )

    for step in result.propagation_path:
        if graph.has_edge(step.from_node, step.to_node):
            continue
        graph.add_edge(
            step.from_node,
            step.to_node,
            magnitude=step.impact_magnitude,
            delay=step.impact_delay,
            propagation_type=step.propagation_type.value,
        )

    return graph


def find_critical_path(result: CascadeResult) -> list[str]:
    """
    Chain of nodes carrying the greatest cumulative impact magnitude.

    Args:
        result: Cascade to analyze

    Returns:
        Node ids from the start of the chain to its end; just the origin
        when nothing propagated, empty when nothing was affected
    """
    if not result.affected_nodes:
        return []

    graph = build_cascade_graph(result)
    if graph.number_of_edges() == 0:
        return [result.affected_nodes[0].id]

    path = nx.dag_longest_path(graph, weight="magnitude")

    logger.debug(
        "cascade_critical_path_found",
        length=len(path),
        start=path[0],
        end=path[-1],
    )

    return path
