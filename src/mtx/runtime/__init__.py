"""Runtime services shared by every layer (logging, spans, events)."""

from . import telemetry

__all__ = ["telemetry"]
