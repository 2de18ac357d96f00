"""API routers for all endpoints."""

from beacon_api.routers import cascades, system

__all__ = ["cascades", "system"]
