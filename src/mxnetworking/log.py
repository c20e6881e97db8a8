# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for mxnetworking."""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "mxnetworking"
DEFAULT_LOG_LEVEL = os.getenv("MXNETWORKING_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure logging for CLI/library use.

    The level applies to the ``mxnetworking`` logger tree only; the root
    logger keeps its own level so host applications are not made noisier.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(format="%(levelname)s %(name)s [%(threadName)s]: %(message)s")
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, effective_level, logging.WARNING))
    return package_logger


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
