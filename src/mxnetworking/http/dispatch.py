# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Completion contexts for callback-style operations.

Every callback a Networker delivers goes through its Dispatcher, so all
completions are observed on one well-known context regardless of which
thread the transport finished on.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Dispatcher(Protocol):
    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None: ...

    def close(self) -> None:  # pragma: no cover - optional for dispatchers
        ...


class ImmediateDispatcher(Dispatcher):
    """Runs completions inline on the calling thread."""

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        fn(*args)

    def close(self) -> None:
        return None


def _log_handler_failure(future: Future) -> None:
    exc = future.exception()
    if exc is not None:
        logger.error("Completion handler raised", exc_info=exc)


class SerialDispatcher(Dispatcher):
    """Single worker thread acting as the client's main context; completions run in submission order."""

    def __init__(self, thread_name_prefix: str = "mxnetworking-main"):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=thread_name_prefix)

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        try:
            future = self._executor.submit(fn, *args)
        except RuntimeError:
            # Executor already shut down; requests still in flight at close are abandoned.
            logger.warning("Dropping completion for %r: dispatcher is closed", fn)
            return
        future.add_done_callback(_log_handler_failure)

    def close(self, wait: bool = True) -> None:
        """Stop accepting completions; later dispatches are logged and dropped."""
        self._executor.shutdown(wait=wait)


class LoopDispatcher(Dispatcher):
    """Hands completions to an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop

    def dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        self._loop.call_soon_threadsafe(fn, *args)

    def close(self) -> None:
        return None
