# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport, request and classification exports."""

from .adapters import StubOutcome, StubTransport
from .classifier import NO_DATA_RECEIVED, ModelDecoder, classify
from .dispatch import Dispatcher, ImmediateDispatcher, LoopDispatcher, SerialDispatcher
from .httpx_transport import HttpxTransport
from .models import Failure, Headers, HttpMethod, HttpResponse, RenderedRequest, Result, Success
from .request import Endpoint, Request, RequestRenderError
from .transport import ResponseHandler, Transport, create_default_transport

__all__ = [
    "NO_DATA_RECEIVED",
    "Dispatcher",
    "Endpoint",
    "Failure",
    "Headers",
    "HttpMethod",
    "HttpResponse",
    "HttpxTransport",
    "ImmediateDispatcher",
    "LoopDispatcher",
    "ModelDecoder",
    "RenderedRequest",
    "Request",
    "RequestRenderError",
    "ResponseHandler",
    "Result",
    "SerialDispatcher",
    "StubOutcome",
    "StubTransport",
    "Success",
    "Transport",
    "classify",
    "create_default_transport",
]
