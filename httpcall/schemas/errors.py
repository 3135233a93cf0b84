"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for httpcall.
Every failure the client can report maps to one exception class here;
the CLI entry point is the only place these become exit codes.
"""

from typing import Any


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    INVALID_URL = "INVALID_URL"
    MALFORMED_PAIR = "MALFORMED_PAIR"

    # Network Errors
    TRANSPORT_ERROR = "TRANSPORT_ERROR"

    # Output Errors
    RENDER_ERROR = "RENDER_ERROR"


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HttpcallException(Exception):
    """
    Base exception for all httpcall errors.

    Carries a stable code plus structured details so callers can report
    the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "HTTPCALL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ParseError(HttpcallException, ValueError):
    """Raised when a command-line input cannot be parsed."""


class InvalidUrl(ParseError):
    """Exception raised when a string is not an absolute URL."""

    def __init__(self, raw: str, reason: str | None = None) -> None:
        message = f"{raw!r} is not a valid absolute URL"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_URL,
            details={"input": raw},
        )


class MalformedPair(ParseError):
    """Exception raised when a body token is not of the form key=value."""

    def __init__(self, token: str) -> None:
        super().__init__(
            message=f"Failed to parse {token!r}, expected key=value",
            code=ErrorCodes.MALFORMED_PAIR,
            details={"token": token},
        )


class TransportError(HttpcallException):
    """Exception raised when the request could not be completed."""

    def __init__(self, message: str, url: str | None = None) -> None:
        details = {}
        if url:
            details["url"] = url
        super().__init__(
            message=message,
            code=ErrorCodes.TRANSPORT_ERROR,
            details=details,
        )


class RenderError(HttpcallException):
    """Exception raised when a response body cannot be formatted."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.RENDER_ERROR,
            details=details,
        )
