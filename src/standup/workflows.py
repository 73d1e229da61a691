"""Shared workflow layer between the CLI commands.

Wires the functional core to the adapters: fetch, filter, classify, format.
"""

import logging
from datetime import date

from .adapters.file_report import FileReportWriter
from .adapters.github_events import GitHubEventsAdapter
from .config import Config
from .core.classify import classify_events
from .core.events import filter_events_by_date
from .core.report import format_report
from .errors import ConfigError
from .ports import EventSource, ReportSink

logger = logging.getLogger(__name__)


def require(config: Config, *names: str) -> None:
    """Raise ConfigError if any of the named settings is unset."""
    missing = config.missing(*names)
    if missing:
        raise ConfigError(f"Missing configuration: {', '.join(missing)}. Set them in the environment or .env")


def get_event_source(config: Config) -> GitHubEventsAdapter:
    """Build the GitHub events client from config."""
    require(config, "GITHUB_TOKEN", "GITHUB_USERNAME")
    return GitHubEventsAdapter(token=config.github_token, api_base=config.api_base)


def get_report_sink(config: Config, output: str | None = None) -> ReportSink:
    """Resolve the report file from an explicit path or REPORT_FILE."""
    path = output or config.report_file
    if not path:
        raise ConfigError("No report file configured. Set REPORT_FILE or pass --output")
    return FileReportWriter(path)


def fetch_daily_events(source: EventSource, username: str, target_date: date) -> list[dict]:
    """Fetch the user's events and keep those created on target_date."""
    events = source.fetch_events(username)
    daily = filter_events_by_date(events, target_date)
    logger.info(f"{len(daily)} of {len(events)} events fall on {target_date.isoformat()}")
    return daily


def build_report(source: EventSource, username: str, target_date: date) -> str:
    """Fetch, filter, classify and format. Returns the report text."""
    daily = fetch_daily_events(source, username, target_date)
    entries = classify_events(daily, username)
    logger.info(f"Classified {len(entries)} pull requests")
    return format_report(entries, target_date)


def generate_report(config: Config, target_date: date | None = None) -> str:
    """Build the report for target_date (default today) using the configured GitHub account."""
    target_date = target_date or date.today()
    with get_event_source(config) as source:
        return build_report(source, config.github_username, target_date)
