# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from collections.abc import Callable
from typing import Any, Protocol

from ..config import HttpSettings, load_http_settings
from .models import RenderedRequest

ResponseHandler = Callable[[bytes | None, Any, BaseException | None], None]


class Transport(Protocol):
    """Minimal protocol for sending rendered requests."""

    def send(self, request: RenderedRequest, handler: ResponseHandler) -> None:
        """Start the request and return; ``handler(body, response, error)`` runs exactly once later."""
        ...

    async def send_async(self, request: RenderedRequest) -> tuple[bytes | None, Any]:
        """Return ``(body, response)`` or raise a transport-level error."""
        ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: HttpSettings | None = None) -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport(settings or load_http_settings())
