"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .observer import ObserverReporter
from .terminal import TerminalReporter
from .transport import JsonLinesTransport, MemoryTransport, Transport

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "ObserverReporter",
    "TerminalReporter",
    "JsonLinesTransport",
    "MemoryTransport",
    "Transport",
]
