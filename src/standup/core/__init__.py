"""Functional core - pure business logic with no I/O."""

from .events import (
    OtherEvent,
    PullRequestEventData,
    PullRequestReviewEventData,
    filter_events_by_date,
    parse_event,
    parse_timestamp,
)
from .classify import PullRequestSummary, ReportEntry, Status, classify_events, determine_status
from .report import format_entry_line, format_report

__all__ = [
    # Events
    "OtherEvent",
    "PullRequestEventData",
    "PullRequestReviewEventData",
    "filter_events_by_date",
    "parse_event",
    "parse_timestamp",
    # Classification
    "PullRequestSummary",
    "ReportEntry",
    "Status",
    "classify_events",
    "determine_status",
    # Report
    "format_entry_line",
    "format_report",
]
