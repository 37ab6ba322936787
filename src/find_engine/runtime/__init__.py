"""Runtime services (telemetry) shared by the engine."""

from . import telemetry

__all__ = ["telemetry"]
