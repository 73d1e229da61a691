"""Ports - interfaces/protocols for external dependencies."""

from .event_source import EventSource
from .report_sink import ReportSink

__all__ = [
    "EventSource",
    "ReportSink",
]
