"""HTTP-like status codes carried by responses and errors."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """Standard HTTP status numbers used across the library."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE = 422
    INTERNAL_ERROR = 500
