"""Domain exceptions raised by the cascade engine."""

from typing import Optional


class CascadeEngineError(Exception):
    """Base class for cascade engine failures."""


class OriginNotFoundError(CascadeEngineError):
    """The requested or resolved origin node does not exist in the topology."""

    def __init__(self, origin_id: str, region: Optional[str] = None):
        self.origin_id = origin_id
        self.region = region
        location = f" for region '{region}'" if region else ""
        super().__init__(
            f"Origin node '{origin_id}' not found in network topology{location}"
        )
