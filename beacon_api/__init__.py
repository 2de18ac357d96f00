"""Beacon Cascade - supply-chain disruption propagation service."""

__version__ = "0.1.0"
