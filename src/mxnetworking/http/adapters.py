# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable Transport implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import RenderedRequest
from .transport import ResponseHandler, Transport


@dataclass
class StubOutcome:
    """Canned ``(body, response, error)`` triple returned by StubTransport."""

    body: bytes | None = None
    response: Any = None
    error: BaseException | None = None


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests."""

    def __init__(self, outcomes: dict[str, StubOutcome] | None = None, default: StubOutcome | None = None):
        self._outcomes = outcomes or {}
        self._default = default
        self.requests: list[RenderedRequest] = []
        self.calls: list[str] = []

    def add(self, url: str, outcome: StubOutcome) -> None:
        self._outcomes[url] = outcome

    def _outcome_for(self, request: RenderedRequest) -> StubOutcome:
        self.requests.append(request)
        if request.url in self._outcomes:
            return self._outcomes[request.url]
        if self._default is not None:
            return self._default
        return StubOutcome(error=RuntimeError("No stubbed response configured"))

    def send(self, request: RenderedRequest, handler: ResponseHandler) -> None:
        self.calls.append("send")
        outcome = self._outcome_for(request)
        handler(outcome.body, outcome.response, outcome.error)

    async def send_async(self, request: RenderedRequest) -> tuple[bytes | None, Any]:
        self.calls.append("send_async")
        outcome = self._outcome_for(request)
        if outcome.error is not None:
            raise outcome.error
        return outcome.body, outcome.response

    def close(self) -> None:
        return None
