# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import logging

from mxnetworking import config
from mxnetworking.log import PACKAGE_LOGGER, setup_logging
from mxnetworking.errors import (
    ApiErrorKind,
    FailedDeserializationError,
    InvalidRequestError,
    InvalidResponseError,
    RequestFailedError,
    UnknownError,
    describe_exception,
    error_to_message,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("MXNETWORKING_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("MXNETWORKING_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("MXNETWORKING_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("MXNETWORKING_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("MXNETWORKING_STRICT_BODY", "yes")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.strict_body_encoding is True


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("MXNETWORKING_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("MXNETWORKING_USER_AGENT", "   ")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.user_agent is None


def test_http_settings_non_positive_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("MXNETWORKING_HTTP_TIMEOUT", "0")
    settings = config.load_http_settings()
    assert settings.timeout == config.HttpSettings.timeout


def test_http_settings_defaults(monkeypatch):
    for name in (
        "MXNETWORKING_HTTP_TIMEOUT",
        "MXNETWORKING_HTTP_REDIRECTS",
        "MXNETWORKING_HTTP_VERIFY_SSL",
        "MXNETWORKING_USER_AGENT",
        "MXNETWORKING_STRICT_BODY",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_http_settings()
    assert settings.allow_redirects is True
    assert settings.verify_ssl is True
    assert settings.user_agent is None
    assert settings.strict_body_encoding is False


def test_api_errors_compare_by_kind_and_fields():
    assert UnknownError("boom") == UnknownError("boom")
    assert UnknownError("boom") != UnknownError("other")
    assert RequestFailedError(404) == RequestFailedError(404)
    assert RequestFailedError(404) != RequestFailedError(500)
    assert InvalidRequestError() == InvalidRequestError()
    assert InvalidResponseError(None) == InvalidResponseError(None)
    assert FailedDeserializationError("Product") != UnknownError("Product")
    assert len({RequestFailedError(404), RequestFailedError(404)}) == 1


def test_api_error_kinds():
    assert UnknownError("x").kind is ApiErrorKind.UNKNOWN
    assert InvalidResponseError().kind is ApiErrorKind.INVALID_RESPONSE
    assert RequestFailedError(500).kind is ApiErrorKind.REQUEST_FAILED
    assert FailedDeserializationError("T").kind is ApiErrorKind.FAILED_DESERIALIZATION
    assert InvalidRequestError().kind is ApiErrorKind.INVALID_REQUEST


def test_api_error_repr_lists_fields():
    assert repr(RequestFailedError(418)) == "RequestFailedError(418)"
    assert repr(InvalidRequestError()) == "InvalidRequestError()"


def test_describe_exception_falls_back_to_type_name():
    assert describe_exception(RuntimeError("boom")) == "boom"
    assert describe_exception(TimeoutError()) == "TimeoutError"


def test_error_to_message_covers_every_kind():
    assert "boom" in error_to_message(UnknownError("boom"))
    assert "malformed" in error_to_message(InvalidResponseError())
    assert "404" in error_to_message(RequestFailedError(404))
    assert "Product" in error_to_message(FailedDeserializationError("Product"))
    assert error_to_message(InvalidRequestError()) == "The request could not be built"
    assert error_to_message(None) == ""


def test_setup_logging_sets_package_logger_level_only():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    root_level = logging.getLogger().level
    previous = package_logger.level
    try:
        assert setup_logging("debug") is package_logger
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger().level == root_level

        setup_logging("not-a-level")
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(previous)
