"""Pure pull request classification logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

from .events import (
    OtherEvent,
    PullRequestEventData,
    PullRequestReviewEventData,
    parse_event,
)


class Status(Enum):
    """Status label shown in front of a pull request title."""

    DONE = "Done"
    IN_REVIEW = "In Review"
    REVIEWED_AND_MERGED = "Reviewed and merged"
    REVIEWED = "Reviewed"


@dataclass
class PullRequestSummary:
    """The fields of a pull request event that classification looks at."""

    title: str
    author: str
    action: str
    merged: bool

    def is_own(self, self_username: str) -> bool:
        return self.author == self_username


@dataclass
class ReportEntry:
    """A single classified pull request line."""

    status: Status
    title: str


def summarize_event(raw: dict) -> PullRequestSummary | None:
    """
    Extract a PullRequestSummary from a raw event.

    Returns None for event kinds other than pull request and review events.
    For review events the author is the reviewer, not the PR owner.
    """
    match parse_event(raw):
        case PullRequestEventData(action=action, merged=merged, title=title, author=author):
            return PullRequestSummary(title=title, author=author, action=action, merged=merged)
        case PullRequestReviewEventData(action=action, merged=merged, title=title, reviewer=reviewer):
            return PullRequestSummary(title=title, author=reviewer, action=action, merged=merged)
        case OtherEvent():
            return None


def determine_status(summary: PullRequestSummary, self_username: str) -> Status | None:
    """
    Pick a status for a pull request. First matching rule wins.

    Own PRs:    opened+merged, opened, closed+merged, merged
    Others' PRs: closed+merged, closed
    """
    own = summary.is_own(self_username)
    action = summary.action
    merged = summary.merged

    if own and action == "opened" and merged:
        return Status.DONE
    elif own and action == "opened":
        return Status.IN_REVIEW
    elif own and action == "closed" and merged:
        return Status.DONE
    elif own and merged:
        return Status.DONE
    elif not own and action == "closed" and merged:
        return Status.REVIEWED_AND_MERGED
    elif not own and action == "closed":
        return Status.REVIEWED
    return None


def classify_events(events: list[dict], self_username: str) -> list[ReportEntry]:
    """
    Classify daily events into report entries, one per distinct PR title.

    The first event seen for a title decides its entry. If that event yields
    no status, the title is still consumed and later events for it are ignored.
    Pure function - no I/O.
    """
    seen_titles: set[str] = set()
    entries = []

    for raw in events:
        summary = summarize_event(raw)
        if summary is None:
            continue

        if summary.title in seen_titles:
            continue
        seen_titles.add(summary.title)

        status = determine_status(summary, self_username)
        if status is not None and summary.title:
            entries.append(ReportEntry(status=status, title=summary.title))

    return entries
