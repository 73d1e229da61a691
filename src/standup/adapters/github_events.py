"""GitHub events adapter - HTTP client for a user's activity feed."""

import logging

import requests

from standup.errors import DecodeError, FetchError

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"


class GitHubEventsAdapter:
    """
    GitHub REST API adapter.

    Implements EventSource protocol. Issues a single authenticated request
    for the first page of a user's events. No business logic - just I/O.
    """

    def __init__(self, token: str, api_base: str = API_BASE, session: requests.Session | None = None):
        self.token = token
        self.api_base = api_base.rstrip("/")
        self._session = session or requests.Session()

    def __enter__(self) -> "GitHubEventsAdapter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def events_url(self, username: str) -> str:
        return f"{self.api_base}/users/{username}/events"

    def fetch_events(self, username: str) -> list[dict]:
        """Fetch the user's events. Raises FetchError or DecodeError."""
        url = self.events_url(username)
        logger.info(f"Fetching events from {url}")

        try:
            resp = self._session.get(
                url,
                headers={
                    "Authorization": f"token {self.token}",
                    "Accept": "application/vnd.github+json",
                },
            )
        except requests.RequestException as e:
            logger.error(f"Events request failed: {e}")
            raise FetchError(f"Request to {url} failed: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"Events request returned {resp.status_code}: {resp.text}")
            raise FetchError(f"GitHub returned {resp.status_code} for {url}: {resp.text}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"Events response is not valid JSON: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise DecodeError(f"Expected a JSON array of events, got {type(data).__name__}")

        logger.info(f"Fetched {len(data)} events for {username}")
        return data
