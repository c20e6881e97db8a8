# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable request descriptions and their rendering into transport requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Protocol, Union

import httpx
from pydantic_core import PydanticSerializationError, to_json

from .models import HttpMethod, RenderedRequest

logger = logging.getLogger(__name__)


class Endpoint(Protocol):
    """Anything that knows the URL it points at."""

    def url(self) -> str | httpx.URL: ...


Target = Union[str, httpx.URL, Endpoint]


class RequestRenderError(ValueError):
    """Raised when a Request cannot be turned into a RenderedRequest."""


def encode_body(body: Any) -> bytes | None:
    """Serialize ``body`` as JSON; returns None when it cannot be serialized."""
    if body is None:
        return None
    try:
        return to_json(body)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        logger.debug("Dropping unserializable request body of type %s: %s", type(body).__name__, exc)
        return None


@dataclass(frozen=True)
class Request:
    """
    Description of a single HTTP request.

    ``target`` is either a URL string or an Endpoint. Query ``parameters``
    replace any query already present on the target URL. ``body`` is sent as
    JSON; headers are sent verbatim and nothing is added to them.
    """

    target: Target
    method: HttpMethod = HttpMethod.GET
    parameters: Mapping[str, str] | None = None
    body: Any = None
    headers: Mapping[str, str] | None = None

    @classmethod
    def from_endpoint(
        cls,
        endpoint: Endpoint,
        method: HttpMethod = HttpMethod.GET,
        *,
        parameters: Mapping[str, str] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        return cls(endpoint, method=method, parameters=parameters, body=body, headers=headers)

    def with_header(self, name: str, value: str) -> Request:
        """Return a copy with ``name`` set to ``value`` (last write wins)."""
        headers = dict(self.headers or {})
        headers[name] = value
        return replace(self, headers=headers)

    def resolve_url(self) -> httpx.URL:
        target = self.target
        if target is not None and not isinstance(target, (str, httpx.URL)):
            target = target.url()
        raw = str(target) if target is not None else ""
        if not raw.strip():
            raise RequestRenderError("Request URL is empty")
        try:
            url = httpx.URL(raw)
            if self.parameters:
                url = url.copy_with(params={str(k): str(v) for k, v in self.parameters.items()})
        except (httpx.InvalidURL, TypeError) as exc:
            raise RequestRenderError(f"Invalid request URL {raw!r}: {exc}") from exc
        if not str(url) or (url.scheme and not url.host):
            raise RequestRenderError(f"Invalid request URL {raw!r}: missing host")
        return url

    def render(self, *, strict_body: bool = False) -> RenderedRequest:
        """
        Produce the transport-ready form of this request.

        Raises RequestRenderError before anything is sent if the URL cannot
        be built, or, with ``strict_body``, if the body cannot be serialized.
        """
        url = self.resolve_url()
        body = encode_body(self.body)
        if body is None and self.body is not None and strict_body:
            raise RequestRenderError(f"Request body of type {type(self.body).__name__} is not JSON serializable")

        headers: dict[str, str] = {}
        for name, value in (self.headers or {}).items():
            headers[name] = value

        method = self.method.value if isinstance(self.method, HttpMethod) else str(self.method).upper()
        return RenderedRequest(url=str(url), method=method, headers=headers, body=body)
