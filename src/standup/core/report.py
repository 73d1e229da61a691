"""Pure report assembly logic - no I/O dependencies."""

from datetime import date

from .classify import ReportEntry

DEFAULT_DONE_ITEMS = [
    "Attended frail-check meeting",
    "Attended frail-check followup meeting",
]
NEXT_ITEMS = [
    "Continue with assigned task and R&D",
]


def format_header(report_date: date) -> str:
    """Format the report date header, e.g. 'Jan 02, 2024:'."""
    return f"{report_date.strftime('%b %d, %Y')}:"


def format_entry_line(entry: ReportEntry) -> str:
    """Format a single classified pull request as a bullet line."""
    return f"• {entry.status.value} | {entry.title}"


def format_report(entries: list[ReportEntry], report_date: date) -> str:
    """
    Assemble the full standup report text.

    Every line, including the last, ends with a newline.
    Pure function - no I/O.
    """
    lines = [format_header(report_date)]
    lines.extend(f"• Done | {item}" for item in DEFAULT_DONE_ITEMS)
    lines.extend(format_entry_line(e) for e in entries)
    lines.append("Next:")
    lines.extend(f"• {item}" for item in NEXT_ITEMS)
    return "".join(f"{line}\n" for line in lines)
