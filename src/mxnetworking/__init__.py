# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
mxnetworking package entrypoint.

A small HTTP client that issues GET/POST requests through an injectable
transport, decodes JSON responses into typed models, and reports every
failure through one closed ApiError taxonomy. Each operation is offered as a
callback variant and as an async variant.
"""

from .config import HttpSettings, load_http_settings
from .errors import (
    ApiError,
    ApiErrorKind,
    FailedDeserializationError,
    InvalidRequestError,
    InvalidResponseError,
    RequestFailedError,
    UnknownError,
    error_to_message,
)
from .http import (
    Endpoint,
    Failure,
    HttpMethod,
    HttpResponse,
    HttpxTransport,
    RenderedRequest,
    Request,
    Result,
    Success,
    Transport,
    create_default_transport,
)
from .log import setup_logging
from .networker import Networker
from .version import __version__

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "Endpoint",
    "FailedDeserializationError",
    "Failure",
    "HttpMethod",
    "HttpResponse",
    "HttpSettings",
    "HttpxTransport",
    "InvalidRequestError",
    "InvalidResponseError",
    "Networker",
    "RenderedRequest",
    "Request",
    "RequestFailedError",
    "Result",
    "Success",
    "Transport",
    "UnknownError",
    "create_default_transport",
    "error_to_message",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
