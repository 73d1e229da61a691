"""Tests for the shared workflow layer."""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from standup.adapters.file_report import FileReportWriter
from standup.config import Config
from standup.errors import ConfigError, FetchError
from standup.workflows import (
    build_report,
    fetch_daily_events,
    generate_report,
    get_event_source,
    get_report_sink,
)


@pytest.fixture
def today():
    return date(2024, 1, 2)


@pytest.fixture
def config():
    return Config(github_token="secret", github_username="octocat", report_file="/tmp/standup.txt")


@pytest.fixture
def sample_events():
    return [
        {
            "type": "PullRequestEvent",
            "created_at": "2024-01-02T15:00:00Z",
            "payload": {
                "action": "opened",
                "pull_request": {"title": "Add feature X", "merged": False, "user": {"login": "octocat"}},
            },
        },
        {
            "type": "PushEvent",
            "created_at": "2024-01-02T14:00:00Z",
            "payload": {},
        },
        {
            "type": "PullRequestReviewEvent",
            "created_at": "2024-01-02T12:00:00Z",
            "payload": {
                "action": "closed",
                "review": {"user": {"login": "hubot"}},
                "pull_request": {"title": "Fix bug Y", "merged": True, "user": {"login": "hubot"}},
            },
        },
        {
            "type": "PullRequestEvent",
            "created_at": "2024-01-01T18:00:00Z",
            "payload": {
                "action": "closed",
                "pull_request": {"title": "Yesterday's work", "merged": True, "user": {"login": "octocat"}},
            },
        },
    ]


@pytest.fixture
def source(sample_events):
    mock = MagicMock()
    mock.fetch_events.return_value = sample_events
    return mock


class TestGetEventSource:
    def test_builds_adapter(self, config):
        adapter = get_event_source(config)
        assert adapter.token == "secret"
        assert adapter.api_base == "https://api.github.com"
        adapter.close()

    def test_missing_credentials(self):
        with pytest.raises(ConfigError, match="GITHUB_TOKEN, GITHUB_USERNAME"):
            get_event_source(Config())


class TestGetReportSink:
    def test_uses_configured_file(self, config):
        sink = get_report_sink(config)
        assert isinstance(sink, FileReportWriter)
        assert sink.path == Path("/tmp/standup.txt")

    def test_output_overrides_config(self, config, tmp_path):
        sink = get_report_sink(config, str(tmp_path / "other.txt"))
        assert sink.path == tmp_path / "other.txt"

    def test_no_file(self):
        with pytest.raises(ConfigError, match="REPORT_FILE"):
            get_report_sink(Config())


class TestFetchDailyEvents:
    def test_filters_to_day(self, source, today):
        daily = fetch_daily_events(source, "octocat", today)

        source.fetch_events.assert_called_once_with("octocat")
        assert len(daily) == 3
        assert all(e["created_at"].startswith("2024-01-02") for e in daily)


class TestBuildReport:
    def test_full_pipeline(self, source, today):
        report = build_report(source, "octocat", today)

        assert report == (
            "Jan 02, 2024:\n"
            "• Done | Attended frail-check meeting\n"
            "• Done | Attended frail-check followup meeting\n"
            "• In Review | Add feature X\n"
            "• Reviewed and merged | Fix bug Y\n"
            "Next:\n"
            "• Continue with assigned task and R&D\n"
        )

    def test_yesterday_not_reported(self, source, today):
        assert "Yesterday's work" not in build_report(source, "octocat", today)

    def test_no_events(self, today):
        source = MagicMock()
        source.fetch_events.return_value = []

        lines = build_report(source, "octocat", today).splitlines()

        assert lines == [
            "Jan 02, 2024:",
            "• Done | Attended frail-check meeting",
            "• Done | Attended frail-check followup meeting",
            "Next:",
            "• Continue with assigned task and R&D",
        ]

    def test_fetch_error_propagates(self, today):
        source = MagicMock()
        source.fetch_events.side_effect = FetchError("boom")

        with pytest.raises(FetchError):
            build_report(source, "octocat", today)


class TestGenerateReport:
    @patch("standup.workflows.GitHubEventsAdapter")
    def test_uses_configured_account(self, mock_cls, config, sample_events, today):
        adapter = MagicMock()
        adapter.__enter__.return_value = adapter
        adapter.fetch_events.return_value = sample_events
        mock_cls.return_value = adapter

        report = generate_report(config, today)

        mock_cls.assert_called_once_with(token="secret", api_base="https://api.github.com")
        adapter.fetch_events.assert_called_once_with("octocat")
        adapter.__exit__.assert_called_once()
        assert "• In Review | Add feature X" in report
