# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from .models import HttpResponse, RenderedRequest
from .transport import ResponseHandler, Transport

logger = logging.getLogger(__name__)


def to_http_response(resp: httpx.Response) -> HttpResponse:
    return HttpResponse(
        status_code=resp.status_code,
        headers=dict(resp.headers),
        url=str(resp.url),
    )


class HttpxTransport(Transport):
    """
    Transport over httpx.

    Callback sends run on a daemon thread with a shared ``httpx.Client``.
    Async sends use the injected ``httpx.AsyncClient`` or a short-lived one
    per call, so the transport is not tied to a single event loop.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._owns_client = client is None
        self._client = client or httpx.Client(**self._client_options())
        self._async_client = async_client

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "follow_redirects": self.settings.allow_redirects,
            "timeout": self.settings.timeout,
            "verify": self.settings.verify_ssl,
        }
        if self.settings.user_agent:
            options["headers"] = {"User-Agent": self.settings.user_agent}
        return options

    def send(self, request: RenderedRequest, handler: ResponseHandler) -> None:
        thread = threading.Thread(
            target=self._send_blocking,
            args=(request, handler),
            name="mxnetworking-transport",
            daemon=True,
        )
        thread.start()

    def _send_blocking(self, request: RenderedRequest, handler: ResponseHandler) -> None:
        logger.debug("Sending %s %s", request.method, request.url)
        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except Exception as exc:  # noqa: BLE001
            handler(None, None, exc)
            return
        handler(resp.content, to_http_response(resp), None)

    async def send_async(self, request: RenderedRequest) -> tuple[bytes | None, Any]:
        logger.debug("Sending %s %s", request.method, request.url)
        if self._async_client is not None:
            resp = await self._async_client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        else:
            async with httpx.AsyncClient(**self._client_options()) as client:
                resp = await client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.body,
                )
        return resp.content, to_http_response(resp)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
