"""Process-wide services: telelog-backed telemetry."""

from . import telemetry

__all__ = ["telemetry"]
