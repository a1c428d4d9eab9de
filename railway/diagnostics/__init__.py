"""Railway diagnostics package."""

from railway.diagnostics.config import DiagnosticsConfig, load_diagnostics_config
from railway.diagnostics.event import DiagnosticEvent
from railway.diagnostics.hub import DiagnosticHub
from railway.diagnostics.ring_buffer import RingBuffer

__all__ = [
    "DiagnosticEvent",
    "DiagnosticHub",
    "DiagnosticsConfig",
    "RingBuffer",
    "load_diagnostics_config",
]
