"""Exceptions raised by the WNS push client."""
from __future__ import annotations

from typing import Optional


class WNSError(Exception):
    """Base class for every failure raised by this package."""


class InvalidArgument(WNSError, ValueError):
    """Raised when a value has the wrong primitive type or shape."""


class InvalidOption(InvalidArgument):
    """Raised when a value is not a member of the expected option set."""

    def __init__(self, field: str, expected: type, value: object = None) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        allowed = ", ".join(repr(member.value) for member in expected)
        super().__init__(
            f"{field} must be a {expected.__name__} value ({allowed}); got {value!r}"
        )


class MissingAuthorization(WNSError):
    """Raised when the Authorization header is needed but no token is set."""


class AuthParseFailure(WNSError):
    """Raised when the token endpoint answers with something other than a JSON object."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportFailure(WNSError):
    """Raised when the HTTP client fails before a response is received."""


__all__ = [
    "WNSError",
    "InvalidArgument",
    "InvalidOption",
    "MissingAuthorization",
    "AuthParseFailure",
    "TransportFailure",
]
