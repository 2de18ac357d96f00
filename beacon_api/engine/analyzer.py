"""
Cascade Analyzer — Request-Level Orchestration.

Wires the collaborators together for one analysis:

1. Resolve the region's topology from the TopologyProvider
2. Resolve the origin (explicit, or inferred by the OriginResolver)
3. Propagate the disruption with the PropagationEngine
4. Stamp the result with the analysis time

The analyzer holds no per-request state and is safe to share across
threads.
"""

from datetime import datetime, timezone
from typing import Optional, Union

import structlog

from beacon_api.config import get_settings
from beacon_api.engine.errors import OriginNotFoundError
from beacon_api.engine.propagation import PropagationEngine, summarize
from beacon_api.engine.topology import (
    DefaultOriginResolver,
    OriginResolver,
    StaticTopologyProvider,
    TopologyProvider,
)
from beacon_api.models.cascade import (
    CascadeAnalysisRequest,
    CascadeAnalysisResponse,
    CascadeSummaryResponse,
)
from beacon_api.models.enums import Severity

logger = structlog.get_logger()


class CascadeAnalyzer:
    """
    Runs cascade analyses end to end.

    Attributes:
        topology_provider: Source of region topologies
        origin_resolver: Default-origin lookup for requests without an origin
        engine: Propagation engine (carries the scorer)

    Example:
        >>> analyzer = CascadeAnalyzer()
        >>> response = analyzer.analyze("supplier_failure", "europe", severity="severe")
        >>> print(response.network_impact_score)
    """

    def __init__(
        self,
        topology_provider: Optional[TopologyProvider] = None,
        origin_resolver: Optional[OriginResolver] = None,
        engine: Optional[PropagationEngine] = None,
    ):
        self.topology_provider = topology_provider or StaticTopologyProvider()
        self.origin_resolver = origin_resolver or DefaultOriginResolver()
        self.engine = engine or PropagationEngine()
        self.logger = structlog.get_logger()

    @classmethod
    def from_settings(cls) -> "CascadeAnalyzer":
        """Build an analyzer configured from application settings."""
        settings = get_settings()
        return cls(
            topology_provider=StaticTopologyProvider(default_region=settings.default_region),
            engine=PropagationEngine(
                max_depth=settings.cascade_max_depth,
                cutoff=settings.cascade_magnitude_cutoff,
            ),
        )

    def resolve_origin(self, scenario_type: str, region: str, origin_node: Optional[str]) -> str:
        """Explicit origin if given, otherwise the scenario/region default."""
        if origin_node:
            return origin_node
        return self.origin_resolver.default_origin(scenario_type, region)

    def analyze(
        self,
        scenario_type: str,
        region: str,
        origin_node: Optional[str] = None,
        severity: Union[Severity, str, None] = None,
    ) -> CascadeAnalysisResponse:
        """
        Analyze one disruption scenario.

        Args:
            scenario_type: Scenario label
            region: Region identifier; unknown regions use the fallback topology
            origin_node: Origin node id; inferred when omitted
            severity: Severity label; unknown or missing values mean moderate

        Returns:
            Timestamped cascade analysis

        Raises:
            OriginNotFoundError: If the origin is not part of the region's topology
        """
        parsed_severity = Severity.parse(severity)
        topology = self.topology_provider.get_topology(region)

        if not topology:
            self.logger.info("cascade_analysis_empty_topology", region=region)
            return CascadeAnalysisResponse(analysis_timestamp=_utc_timestamp())

        origin_id = self.resolve_origin(scenario_type, region, origin_node)

        self.logger.info(
            "cascade_analysis_started",
            scenario_type=scenario_type,
            region=region,
            origin_id=origin_id,
            origin_inferred=not origin_node,
            severity=parsed_severity.value,
        )

        try:
            result = self.engine.propagate(topology, origin_id, parsed_severity)
        except OriginNotFoundError as e:
            raise OriginNotFoundError(e.origin_id, region=region) from e

        return CascadeAnalysisResponse(
            **result.model_dump(),
            analysis_timestamp=_utc_timestamp(),
        )

    def analyze_request(self, request: CascadeAnalysisRequest) -> CascadeAnalysisResponse:
        """Analyze a validated request model."""
        return self.analyze(
            scenario_type=request.scenario_type,
            region=request.region,
            origin_node=request.origin_node,
            severity=request.severity,
        )

    def analyze_with_summary(self, request: CascadeAnalysisRequest) -> CascadeSummaryResponse:
        """Analyze a request and attach the narrative summary."""
        response = self.analyze_request(request)
        return CascadeSummaryResponse(
            **response.model_dump(),
            summary=summarize(response),
        )


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
