# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ApiErrorKind(str, Enum):
    UNKNOWN = "UNKNOWN"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    REQUEST_FAILED = "REQUEST_FAILED"
    FAILED_DESERIALIZATION = "FAILED_DESERIALIZATION"
    INVALID_REQUEST = "INVALID_REQUEST"


class ApiError(Exception):
    """
    Base class for every failure surfaced by a Networker.

    The set of subclasses is closed; callers can dispatch on ``kind`` or on
    the concrete class. Errors compare equal when kind and fields match.
    """

    kind: ApiErrorKind = ApiErrorKind.UNKNOWN

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self.kind))

    def __repr__(self) -> str:
        fields = ", ".join(repr(value) for value in self._fields())
        return f"{type(self).__name__}({fields})"


class UnknownError(ApiError):
    """Transport-level failure, or no body where one was required."""

    kind = ApiErrorKind.UNKNOWN

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def _fields(self) -> tuple[Any, ...]:
        return (self.description,)


class InvalidResponseError(ApiError):
    """Response metadata could not be interpreted as an HTTP response."""

    kind = ApiErrorKind.INVALID_RESPONSE

    def __init__(self, response: Any = None):
        super().__init__(f"Invalid response: {response!r}")
        self.response = response

    def _fields(self) -> tuple[Any, ...]:
        return (self.response,)


class RequestFailedError(ApiError):
    """Status code outside the accepted 200..300 range."""

    kind = ApiErrorKind.REQUEST_FAILED

    def __init__(self, status_code: int):
        super().__init__(f"Request failed with status code {status_code}")
        self.status_code = status_code

    def _fields(self) -> tuple[Any, ...]:
        return (self.status_code,)


class FailedDeserializationError(ApiError):
    kind = ApiErrorKind.FAILED_DESERIALIZATION

    def __init__(self, type_name: str):
        super().__init__(f"Failed to deserialize {type_name}")
        self.type_name = type_name

    def _fields(self) -> tuple[Any, ...]:
        return (self.type_name,)


class InvalidRequestError(ApiError):
    """The request description could not be rendered into a transport request."""

    kind = ApiErrorKind.INVALID_REQUEST

    def __init__(self) -> None:
        super().__init__("Invalid request")


def describe_exception(exc: BaseException) -> str:
    """Text for an UnknownError wrapping ``exc``."""
    message = str(exc)
    return message if message else type(exc).__name__


def error_to_message(error: ApiError | None) -> str:
    """User-facing message for an ApiError."""
    if error is None:
        return ""
    if isinstance(error, UnknownError):
        return f"Network error: {error.description}"
    if isinstance(error, InvalidResponseError):
        return "The server returned a malformed response"
    if isinstance(error, RequestFailedError):
        return f"The request failed with status code {error.status_code}"
    if isinstance(error, FailedDeserializationError):
        return f"Could not read the response as {error.type_name}"
    if isinstance(error, InvalidRequestError):
        return "The request could not be built"
    return "Request failed"


__all__ = [
    "ApiError",
    "ApiErrorKind",
    "FailedDeserializationError",
    "InvalidRequestError",
    "InvalidResponseError",
    "RequestFailedError",
    "UnknownError",
    "describe_exception",
    "error_to_message",
]
