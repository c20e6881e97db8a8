# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level Networker client over an injectable Transport."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import suppress
from typing import Any, TypeVar

from .config import HttpSettings, load_http_settings
from .errors import InvalidRequestError
from .http.classifier import ModelDecoder, classify, discard_payload, transport_failure
from .http.dispatch import Dispatcher, SerialDispatcher
from .http.models import Failure, HttpMethod, RenderedRequest, Result
from .http.request import Request, RequestRenderError, Target
from .http.transport import Transport, create_default_transport

T = TypeVar("T")

Completion = Callable[[Result[Any]], None]

logger = logging.getLogger(__name__)


class Networker:
    """
    HTTP client that normalizes every outcome into a Result or an ApiError.

    Each operation has a callback form, which returns immediately and later
    calls ``completion`` with a ``Success``/``Failure`` on the dispatcher's
    context, and an ``async`` form, which returns the value or raises an
    ``ApiError``.

    ``data``/``model`` take a full ``Request``; ``fetch``/``post`` are
    shortcuts that build one from a URL string or an Endpoint.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        settings: HttpSettings | None = None,
        dispatcher: Dispatcher | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._owns_transport = transport is None
        self.transport = transport or create_default_transport(self.settings)
        self._owns_dispatcher = dispatcher is None
        self.dispatcher = dispatcher or SerialDispatcher()

    # Request-first surface

    def data(self, request: Request, completion: Completion) -> None:
        """Send ``request`` and complete with the raw body bytes."""
        self._start(request, completion, require_body=True)

    async def data_async(self, request: Request) -> bytes:
        """Send ``request`` and return the raw body bytes."""
        result = await self._execute(request, require_body=True)
        return result.unwrap()

    def model(self, request: Request, model_type: type[T] | Any, completion: Completion) -> None:
        """Send ``request`` and complete with the body decoded into ``model_type``."""
        self._start(request, completion, require_body=True, decoder=ModelDecoder(model_type))

    async def model_async(self, request: Request, model_type: type[T] | Any) -> T:
        """Send ``request`` and return the body decoded into ``model_type``."""
        decoder = ModelDecoder(model_type)
        result = await self._execute(request, require_body=True)
        return decoder.decode(result).unwrap()

    # Endpoint/URL shortcuts

    def fetch(self, target: Target, decoding_type: type[T] | Any, completion: Completion) -> None:
        """GET ``target`` and complete with the decoded body."""
        self.model(Request(target), decoding_type, completion)

    async def fetch_async(self, target: Target, decoding_type: type[T] | Any) -> T:
        """GET ``target`` and return the decoded body."""
        return await self.model_async(Request(target), decoding_type)

    def post(
        self,
        target: Target,
        body: Any,
        completion: Completion,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """POST ``body`` as JSON; completes with ``Success(None)`` whether or not a body comes back."""
        request = Request(target, method=HttpMethod.POST, body=body, headers=headers)

        def on_result(result: Result[Any]) -> None:
            completion(discard_payload(result))

        self._start(request, on_result, require_body=False)

    async def post_async(
        self,
        target: Target,
        body: Any,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """POST ``body`` as JSON; raises an ApiError on failure."""
        request = Request(target, method=HttpMethod.POST, body=body, headers=headers)
        result = await self._execute(request, require_body=False)
        discard_payload(result).unwrap()

    # Core primitives

    def _render(self, request: Request) -> RenderedRequest:
        try:
            return request.render(strict_body=self.settings.strict_body_encoding)
        except RequestRenderError as exc:
            raise InvalidRequestError() from exc

    def _start(
        self,
        request: Request,
        completion: Completion,
        *,
        require_body: bool,
        decoder: ModelDecoder[Any] | None = None,
    ) -> None:
        try:
            rendered = self._render(request)
        except InvalidRequestError as exc:
            self.dispatcher.dispatch(completion, Failure(exc))
            return

        def on_response(body: bytes | None, response: Any, error: BaseException | None) -> None:
            result = classify(body, response, error, require_body=require_body)
            if decoder is not None:
                result = decoder.decode(result)
            self.dispatcher.dispatch(completion, result)

        logger.debug("Dispatching %s %s", rendered.method, rendered.url)
        self.transport.send(rendered, on_response)

    async def _execute(self, request: Request, *, require_body: bool) -> Result[bytes | None]:
        rendered = self._render(request)
        logger.debug("Awaiting %s %s", rendered.method, rendered.url)
        try:
            body, response = await self.transport.send_async(rendered)
        except Exception as exc:  # noqa: BLE001
            raise transport_failure(exc) from exc
        return classify(body, response, None, require_body=require_body)

    def close(self) -> None:
        """Release owned resources. Callback requests still in flight are abandoned."""
        if self._owns_dispatcher:
            with suppress(Exception):
                self.dispatcher.close()
        if self._owns_transport:
            with suppress(Exception):
                self.transport.close()

    def __enter__(self) -> Networker:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
