"""Exception hierarchy for commit-clock."""

from __future__ import annotations


class CommitClockError(Exception):
    """Base class for every error raised by commit-clock."""


class ConfigError(CommitClockError):
    pass


class ApiError(CommitClockError):
    """A request to the GitHub API failed."""


class TimestampError(CommitClockError, ValueError):
    """A commit timestamp could not be parsed."""


class StageError(CommitClockError):
    """A pipeline stage failed; ``message`` names the stage."""

    message = "Pipeline stage failed"

    def __init__(self, cause: object = None) -> None:
        self.cause = cause
        detail = f"{self.message}: {cause}" if cause is not None else self.message
        super().__init__(detail)


class AuthError(StageError):
    message = "Unable to get username and id"


class DiscoveryError(StageError):
    message = "Unable to get the contributed repo"


class HistoryFetchError(StageError):
    message = "Unable to get the commit info"


class PublishReadError(StageError):
    message = "Unable to read gist"


class PublishWriteError(StageError):
    message = "Unable to update gist"


class EmptyReportError(CommitClockError):
    """No commits in active hours; nothing to publish."""
