# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across mxnetworking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from ..errors import ApiError

T = TypeVar("T")

Headers = dict[str, str]


class HttpMethod(str, Enum):
    """HTTP methods supported by the Networker."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class RenderedRequest:
    """Transport-ready request produced by ``Request.render``."""

    url: str
    method: str = HttpMethod.GET.value
    headers: Headers = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Response metadata handed back by transports alongside the body bytes."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    url: str | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: ApiError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success[T], Failure]
