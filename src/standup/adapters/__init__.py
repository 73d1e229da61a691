"""Adapters - I/O implementations of ports."""

from .github_events import GitHubEventsAdapter
from .file_report import FileReportWriter

__all__ = [
    "GitHubEventsAdapter",
    "FileReportWriter",
]
