"""standup CLI - daily standup report from GitHub activity."""

import json
import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.events import filter_events_by_date
from .errors import StandupError
from .workflows import generate_report, get_event_source, get_report_sink

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _target_date(value) -> date:
    return value.date() if value else date.today()


@click.group()
@click.version_option(package_name="standup")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """standup - daily standup report from GitHub pull request activity."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


@main.command()
@click.option("--date", "report_date", type=DATE_TYPE, help="Report date (YYYY-MM-DD), defaults to today")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Report file (overrides REPORT_FILE)")
@click.option("--no-save", is_flag=True, help="Print the report without writing it to a file")
def report(report_date, output: str | None, no_save: bool):
    """Generate today's standup report."""
    config = load_config()
    try:
        sink = None if no_save else get_report_sink(config, output)
        text = generate_report(config, _target_date(report_date))
        click.echo(text)
        if sink is not None:
            sink.write(text)
    except StandupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--date", "report_date", type=DATE_TYPE, help="Date to filter on (YYYY-MM-DD), defaults to today")
@click.option("--all", "show_all", is_flag=True, help="Dump every fetched event, not just the day's")
def events(report_date, show_all: bool):
    """Dump raw GitHub events for debugging."""
    config = load_config()
    try:
        with get_event_source(config) as source:
            raw = source.fetch_events(config.github_username)
    except StandupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not show_all:
        raw = filter_events_by_date(raw, _target_date(report_date))

    click.echo(json.dumps(raw, indent=2, default=str))
