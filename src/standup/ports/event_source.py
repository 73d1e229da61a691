"""Event source interface."""

from typing import Protocol


class EventSource(Protocol):
    """Interface for fetching a user's raw activity events."""

    def fetch_events(self, username: str) -> list[dict]:
        """Fetch the user's recent events, newest first."""
        ...
