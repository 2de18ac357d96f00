"""
Cascade summary generation.

Turns a CascadeResult into a short narrative, per-type impact counts, the
critical path and a ranked list of response recommendations.
"""

from beacon_api.models.cascade import CascadeSummary
from beacon_api.models.enums import PropagationType
from beacon_api.models.network import CascadeResult

from .critical_path import find_critical_path

MAX_RECOMMENDATIONS = 5
ESCALATION_SCORE_THRESHOLD = 50


def _count_steps(result: CascadeResult, propagation_type: PropagationType) -> int:
    return sum(1 for step in result.propagation_path if step.propagation_type == propagation_type)


def build_recommendations(result: CascadeResult) -> list[str]:
    """Suggested response actions, most urgent first, at most five."""
    recommendations: list[str] = []

    if _count_steps(result, PropagationType.DIRECT):
        recommendations.append("Activate emergency response protocols immediately")
        recommendations.append("Notify stakeholders and downstream partners")

    if result.network_impact_score >= ESCALATION_SCORE_THRESHOLD:
        recommendations.append("Engage executive leadership for strategic decisions")
        recommendations.append("Assess insurance coverage and claims process")

    if _count_steps(result, PropagationType.CASCADING):
        recommendations.append("Establish alternative supply routes")
        recommendations.append("Consider temporary supplier agreements")

    recommendations.append("Monitor downstream inventory levels closely")
    recommendations.append("Prepare customer communication strategy")

    return recommendations[:MAX_RECOMMENDATIONS]


def build_narrative(result: CascadeResult) -> str:
    """One-paragraph description of the cascade."""
    if not result.affected_nodes:
        return "No cascade impact calculated."

    origin = result.affected_nodes[0]
    direct = _count_steps(result, PropagationType.DIRECT)
    indirect = _count_steps(result, PropagationType.INDIRECT)
    cascading = _count_steps(result, PropagationType.CASCADING)
    node_count = len(result.affected_nodes)

    parts = [
        f"Disruption at {origin.name} affects {node_count} node{'s' if node_count != 1 else ''}",
        f"{direct} direct, {indirect} indirect, {cascading} cascading impacts",
        f"Network impact score: {result.network_impact_score}/100",
    ]
    if result.max_depth:
        parts.append(f"Deepest propagation: {result.max_depth} hop{'s' if result.max_depth != 1 else ''}")

    return ". ".join(parts) + "."


def summarize(result: CascadeResult) -> CascadeSummary:
    """
    Summarize a cascade for reporting.

    Args:
        result: Cascade to summarize

    Returns:
        CascadeSummary with narrative, counts, critical path and recommendations
    """
    return CascadeSummary(
        narrative=build_narrative(result),
        affected_node_count=len(result.affected_nodes),
        direct_impacts=_count_steps(result, PropagationType.DIRECT),
        indirect_impacts=_count_steps(result, PropagationType.INDIRECT),
        cascading_impacts=_count_steps(result, PropagationType.CASCADING),
        max_depth=result.max_depth,
        critical_path=find_critical_path(result),
        recommendations=build_recommendations(result),
    )
