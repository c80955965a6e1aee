"""Payday savings projection: simulator, chart geometry and HTTP API."""

__version__ = "0.1.0"
