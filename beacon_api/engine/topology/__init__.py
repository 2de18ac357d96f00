"""Topology and origin collaborators consumed by the cascade analyzer."""

from .origin import DEFAULT_ORIGINS, DefaultOriginResolver, OriginResolver
from .provider import BUILTIN_TOPOLOGIES, StaticTopologyProvider, TopologyProvider

__all__ = [
    "BUILTIN_TOPOLOGIES",
    "DEFAULT_ORIGINS",
    "DefaultOriginResolver",
    "OriginResolver",
    "StaticTopologyProvider",
    "TopologyProvider",
]
