# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Mapping of raw transport outcomes onto Success or a classified ApiError."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import (
    FailedDeserializationError,
    InvalidResponseError,
    RequestFailedError,
    UnknownError,
    describe_exception,
)
from .models import Failure, Result, Success

T = TypeVar("T")

NO_DATA_RECEIVED = "No data received"
MIN_ACCEPTED_STATUS = 200
MAX_ACCEPTED_STATUS = 300  # inclusive


def status_code_of(response: Any) -> int | None:
    """Return the integer status code of ``response`` or None if it has none."""
    status = getattr(response, "status_code", None)
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


def transport_failure(error: BaseException) -> UnknownError:
    return UnknownError(describe_exception(error))


def classify(
    body: bytes | None,
    response: Any,
    error: BaseException | None,
    *,
    require_body: bool = True,
) -> Result[bytes | None]:
    """
    Classify one transport outcome.

    Checks run in a fixed order: transport error, response shape, status
    range, body presence. ``require_body=False`` is used for POST, where an
    absent body still counts as success.
    """
    if error is not None:
        return Failure(transport_failure(error))

    status = status_code_of(response)
    if status is None:
        return Failure(InvalidResponseError(response))

    if not MIN_ACCEPTED_STATUS <= status <= MAX_ACCEPTED_STATUS:
        return Failure(RequestFailedError(status))

    if body is None:
        if require_body:
            return Failure(UnknownError(NO_DATA_RECEIVED))
        return Success(None)

    return Success(bytes(body))


def discard_payload(result: Result[Any]) -> Result[None]:
    """POST results carry no payload on success."""
    if isinstance(result, Success):
        return Success(None)
    return result


def type_name(model_type: Any) -> str:
    if isinstance(model_type, type):
        return model_type.__name__
    return repr(model_type).replace("typing.", "")


class ModelDecoder(Generic[T]):
    """
    Second classification stage: JSON bytes into ``model_type``.

    Building the decoder validates that pydantic can produce a schema for the
    type, so unsupported types fail at the call site rather than on a
    transport thread.
    """

    def __init__(self, model_type: type[T] | Any):
        self.model_type = model_type
        self.type_name = type_name(model_type)
        self._adapter: TypeAdapter[T] = TypeAdapter(model_type)

    def decode_bytes(self, body: bytes) -> T:
        return self._adapter.validate_json(body, strict=True)

    def decode(self, result: Result[bytes | None]) -> Result[T]:
        if not isinstance(result, Success):
            return result
        if result.value is None:
            return Failure(UnknownError(NO_DATA_RECEIVED))
        try:
            return Success(self.decode_bytes(result.value))
        except ValidationError:
            return Failure(FailedDeserializationError(self.type_name))
