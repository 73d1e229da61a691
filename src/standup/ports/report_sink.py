"""Report sink interface."""

from typing import Protocol


class ReportSink(Protocol):
    """Interface for persisting a generated report."""

    def write(self, report: str) -> None:
        """Write the report, replacing any previous content."""
        ...
