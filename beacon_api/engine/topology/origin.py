"""
Default origin resolution.

When a request names no origin node, the origin is inferred from the
scenario type and region using a fixed lookup table.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

import structlog

from beacon_api.models.enums import ScenarioType

logger = structlog.get_logger()


DEFAULT_ORIGINS: dict[str, dict[str, str]] = {
    ScenarioType.SUPPLIER_FAILURE.value: {
        "asia": "supplier-asia-001",
        "europe": "supplier-europe-001",
        "north_america": "supplier-na-001",
    },
    ScenarioType.PORT_CLOSURE.value: {
        "asia": "distributor-asia-001",
        "europe": "distributor-europe-001",
        "north_america": "distributor-na-001",
    },
    ScenarioType.NATURAL_DISASTER.value: {
        "asia": "manufacturer-asia-001",
        "europe": "manufacturer-europe-001",
        "north_america": "manufacturer-na-001",
    },
}

FALLBACK_ORIGIN = "supplier-asia-001"


class OriginResolver(ABC):
    """Chooses an origin node when the caller does not name one."""

    @abstractmethod
    def default_origin(self, scenario_type: str, region: str) -> str:
        """
        Origin node id for a scenario in a region.

        Args:
            scenario_type: Scenario label
            region: Region identifier

        Returns:
            Node id to start the cascade from
        """


class DefaultOriginResolver(OriginResolver):
    """
    Table-driven origin resolver.

    Unknown scenario/region combinations resolve to a single fallback node.
    """

    def __init__(
        self,
        origins: Optional[Mapping[str, Mapping[str, str]]] = None,
        fallback: str = FALLBACK_ORIGIN,
    ):
        self.origins = DEFAULT_ORIGINS if origins is None else origins
        self.fallback = fallback
        self.logger = structlog.get_logger()

    def default_origin(self, scenario_type: str, region: str) -> str:
        origin = self.origins.get(scenario_type, {}).get(region)
        if origin is None:
            self.logger.debug(
                "origin_fallback_used",
                scenario_type=scenario_type,
                region=region,
                origin=self.fallback,
            )
            return self.fallback
        return origin
