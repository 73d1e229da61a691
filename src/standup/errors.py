"""Errors that abort a report run."""


class StandupError(Exception):
    """Base class for fatal report errors."""

    pass


class FetchError(StandupError):
    """Raised when the events request fails or returns a non-success status."""

    pass


class DecodeError(StandupError):
    """Raised when the events response body is not a JSON list of events."""

    pass


class WriteError(StandupError):
    """Raised when the report cannot be written."""

    pass


class ConfigError(StandupError):
    """Raised when a required setting is missing."""

    pass
