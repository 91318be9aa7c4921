# pwnedcheck/core/exceptions.py
"""
Error types raised by the breach lookup engine.

Guard errors (InvalidInputError, TooShortError) are raised before any network
traffic. TransportError and MalformedResponseError are kept separate so callers
can tell "service unreachable" apart from "service returned garbage".
"""

from typing import Optional


class PwnedCheckError(Exception):
    """Base class for every error raised by pwnedcheck."""


class InvalidInputError(PwnedCheckError, ValueError):
    """A required string argument was missing or unusable."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"{argument} is required")


class TooShortError(PwnedCheckError, ValueError):
    """A string argument is shorter than the minimum needed to derive a prefix."""

    def __init__(self, argument: str, min_length: int, actual_length: int):
        self.argument = argument
        self.min_length = min_length
        self.actual_length = actual_length
        super().__init__(
            f"{argument} needs minimum length of {min_length} (got {actual_length})"
        )


class TransportError(PwnedCheckError):
    """The range request could not be completed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(PwnedCheckError):
    """The range response body could not be parsed into suffix/count pairs."""

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message)
