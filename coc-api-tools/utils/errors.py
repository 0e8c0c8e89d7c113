"""Exceptions raised by the Clash of Clans tools."""

from typing import Union


class ClashToolError(Exception):
    """Base class for errors turned into error results at the tool boundary."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ClashToolError):
    """A tool argument failed a precondition (e.g. round outside 1-7)."""


class UpstreamError(ClashToolError):
    """
    The Clash of Clans API could not be reached or returned a non-2xx status.

    Attributes:
        status: HTTP status code, or "unknown" if no response was received
        message: Description of the underlying failure
    """

    def __init__(self, status: Union[int, str], message: str):
        super().__init__(message)
        self.status = status

    def __str__(self) -> str:
        return f"API error: {self.status} - {self.message}"
