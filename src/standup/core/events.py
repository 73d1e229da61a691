"""Pure event domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass
class PullRequestEventData:
    """A PullRequestEvent: a pull request was opened, closed, edited, etc."""

    action: str
    merged: bool
    title: str
    author: str


@dataclass
class PullRequestReviewEventData:
    """A PullRequestReviewEvent: someone reviewed a pull request."""

    action: str
    merged: bool
    title: str
    reviewer: str


@dataclass
class OtherEvent:
    """Any event kind the report does not care about."""

    type: str


ParsedEvent = PullRequestEventData | PullRequestReviewEventData | OtherEvent


def _dig(data, *keys):
    """Walk nested dicts, returning None as soon as a level is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _string(value) -> str:
    return value if isinstance(value, str) else ""


def parse_event(raw: dict) -> ParsedEvent:
    """
    Turn a raw API event into one of the typed event variants.

    Missing or mistyped fields default to "" (strings) or False (merged).
    Pure function - no I/O.
    """
    event_type = raw.get("type")
    payload = raw.get("payload")

    match event_type:
        case "PullRequestEvent":
            return PullRequestEventData(
                action=_string(_dig(payload, "action")),
                merged=_dig(payload, "pull_request", "merged") is True,
                title=_string(_dig(payload, "pull_request", "title")),
                author=_string(_dig(payload, "pull_request", "user", "login")),
            )
        case "PullRequestReviewEvent":
            return PullRequestReviewEventData(
                action=_string(_dig(payload, "action")),
                merged=_dig(payload, "pull_request", "merged") is True,
                title=_string(_dig(payload, "pull_request", "title")),
                reviewer=_string(_dig(payload, "review", "user", "login")),
            )
        case _:
            return OtherEvent(type=_string(event_type))


def parse_timestamp(value) -> datetime | None:
    """
    Parse an RFC 3339 timestamp ("2024-01-02T10:00:00Z") into an aware datetime.

    Returns None for non-strings, malformed values, and timestamps
    without a UTC offset.
    """
    if not isinstance(value, str) or not value:
        return None
    # fromisoformat only learned about "Z" in 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


def event_date(raw: dict) -> date | None:
    """UTC calendar day an event was created on, or None if unknown."""
    created_at = parse_timestamp(raw.get("created_at"))
    if created_at is None:
        return None
    return created_at.astimezone(timezone.utc).date()


def filter_events_by_date(events: list[dict], target_date: date) -> list[dict]:
    """
    Filter raw events to those created on target_date (UTC).

    Events with a missing or unparseable created_at are dropped silently.
    Order is preserved. Pure function - no I/O.
    """
    return [e for e in events if event_date(e) == target_date]
