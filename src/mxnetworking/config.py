# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for mxnetworking."""

import os
from dataclasses import dataclass


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_str_env(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or None


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    allow_redirects: bool = True
    verify_ssl: bool = True
    user_agent: str | None = None
    # Unserializable POST bodies are dropped unless this is set.
    strict_body_encoding: bool = False

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("MXNETWORKING_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            allow_redirects=_bool_env("MXNETWORKING_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("MXNETWORKING_HTTP_VERIFY_SSL", cls.verify_ssl),
            user_agent=_optional_str_env("MXNETWORKING_USER_AGENT", cls.user_agent),
            strict_body_encoding=_bool_env("MXNETWORKING_STRICT_BODY", cls.strict_body_encoding),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
