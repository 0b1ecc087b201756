"""Runtime services shared across the editor."""

from . import telemetry

__all__ = ["telemetry"]
