"""Error taxonomy shared by the core and the CLI.

Every fatal condition derives from ReviewPromptError so the CLI can turn it
into a single ClickException. ParseWarning is the one non-fatal type: it is
raised for a single unparsable listing line and never escapes the parser.
"""

from __future__ import annotations


class ReviewPromptError(Exception):
    """Base class for errors that abort the run."""


class MalformedRemoteError(ReviewPromptError):
    """The git remote URL could not be read or has too few path segments."""


class UnsupportedPlatformError(ReviewPromptError):
    """No known platform host marker was found in the remote URL."""


class _ProcessError(ReviewPromptError):
    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}\nStderr: {self.stderr.strip()}"
        return message


class SourceUnavailableError(_ProcessError):
    """Listing open reviews failed (API error or non-zero CLI exit)."""


class DiffUnavailableError(_ProcessError):
    """Fetching the diff for a review failed."""


class ParseWarning(UserWarning):
    """A single listing line could not be parsed and was skipped."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line
