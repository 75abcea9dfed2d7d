"""
Error Taxonomy.

Every failure the stores, the auth gate and the HTTP clients raise belongs to
one of a small, closed set of kinds so callers can decide between surfacing the
message and retrying:

- validation : bad input, detected before any network call
- not_found  : the addressed row does not exist for this owner
- conflict   : a uniqueness rule was violated (duplicate bookmark, handle taken)
- auth       : no signed-in owner, or the backend rejected the credentials
- remote     : the backend or a third-party API failed (transient)
"""

from __future__ import annotations


class DayboardError(Exception):
    """Base class of all application errors."""

    kind: str = "error"
    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DayboardError):
    kind = "validation"


class NotFoundError(DayboardError):
    kind = "not_found"


class ConflictError(DayboardError):
    kind = "conflict"


class AuthError(DayboardError):
    kind = "auth"


class RemoteError(DayboardError):
    """Backend or network failure.

    Attributes:
        status: HTTP status code of the failed response, if there was one
    """

    kind = "remote"
    retryable = True

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class WeatherLookupError(RemoteError):
    """Weather or place-search API failure, rendered inline by the widget."""

    kind = "weather"
