# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from dataclasses import dataclass

import pytest
from pydantic import BaseModel
from pydantic_core import to_json

from mxnetworking.errors import (
    FailedDeserializationError,
    InvalidResponseError,
    RequestFailedError,
    UnknownError,
)
from mxnetworking.http.classifier import (
    NO_DATA_RECEIVED,
    ModelDecoder,
    classify,
    discard_payload,
    status_code_of,
    type_name,
)
from mxnetworking.http.models import Failure, HttpResponse, Success


@dataclass
class Product:
    id: int | None
    title: str
    price: float
    category: str


class Pokemon(BaseModel):
    name: str
    url: str


class PokemonList(BaseModel):
    count: int
    results: list[Pokemon]


class UrlResponse:
    """Response metadata without an HTTP status code."""

    def __init__(self, url: str):
        self.url = url


def http(code: int) -> HttpResponse:
    return HttpResponse(status_code=code, url="https://example.com")


@pytest.mark.parametrize("code", [200, 201, 204, 299, 300])
def test_classify_accepts_200_through_300_inclusive(code):
    assert classify(b"{}", http(code), None) == Success(b"{}")


@pytest.mark.parametrize("code", [100, 199, 301, 304, 400, 404, 500])
def test_classify_rejects_codes_outside_range(code):
    assert classify(b"{}", http(code), None) == Failure(RequestFailedError(code))


def test_classify_transport_error_wins_over_everything():
    result = classify(b"{}", http(200), ConnectionError("connection reset"))
    assert result == Failure(UnknownError("connection reset"))


def test_classify_non_http_response_is_invalid_response():
    meta = UrlResponse("https://example.com")
    result = classify(b"{}", meta, None)
    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidResponseError)
    assert result.error.response is meta


def test_classify_missing_response_is_invalid_response():
    assert classify(b"{}", None, None) == Failure(InvalidResponseError(None))


def test_classify_bool_status_is_not_a_status_code():
    class Weird:
        status_code = True

    assert status_code_of(Weird()) is None
    assert status_code_of(http(201)) == 201


def test_classify_status_checked_before_body():
    assert classify(None, http(500), None) == Failure(RequestFailedError(500))


def test_classify_missing_body_for_get():
    assert classify(None, http(200), None) == Failure(UnknownError(NO_DATA_RECEIVED))
    assert NO_DATA_RECEIVED == "No data received"


def test_classify_missing_body_for_post_is_success():
    assert classify(None, http(200), None, require_body=False) == Success(None)


def test_classify_is_idempotent():
    error = TimeoutError("timed out")
    meta = http(302)
    for args in ((b"x", http(200), None), (None, meta, None), (None, None, error)):
        first = classify(*args)
        assert all(classify(*args) == first for _ in range(5))


def test_discard_payload_keeps_failures():
    failure = Failure(RequestFailedError(404))
    assert discard_payload(failure) is failure
    assert discard_payload(Success(b"payload")) == Success(None)


def test_model_decoder_round_trips_dataclass():
    product = Product(id=1, title="Backpack", price=109.95, category="men's clothing")
    decoder = ModelDecoder(Product)
    assert decoder.decode(Success(to_json(product))) == Success(product)


def test_model_decoder_round_trips_pydantic_model():
    listing = PokemonList(count=1, results=[Pokemon(name="bulbasaur", url="https://pokeapi.co/api/v2/pokemon/1/")])
    decoder = ModelDecoder(PokemonList)
    assert decoder.decode(Success(listing.model_dump_json().encode())).unwrap() == listing


def test_model_decoder_shape_mismatch_is_failed_deserialization():
    decoder = ModelDecoder(Product)
    result = decoder.decode(Success(b'{"name": "bulbasaur"}'))
    assert result == Failure(FailedDeserializationError("Product"))


def test_model_decoder_invalid_json_is_failed_deserialization():
    decoder = ModelDecoder(PokemonList)
    assert decoder.decode(Success(b"<html>")) == Failure(FailedDeserializationError("PokemonList"))


def test_model_decoder_passes_failures_through():
    failure = Failure(RequestFailedError(503))
    assert ModelDecoder(Product).decode(failure) is failure


def test_model_decoder_missing_body():
    assert ModelDecoder(Product).decode(Success(None)) == Failure(UnknownError(NO_DATA_RECEIVED))


def test_type_name_for_classes_and_generics():
    assert type_name(Product) == "Product"
    assert "Product" in type_name(list[Product])


def test_failure_unwrap_raises_error():
    with pytest.raises(RequestFailedError):
        Failure(RequestFailedError(404)).unwrap()
    assert Success(3).unwrap() == 3
    assert Success(3).is_success is True
    assert Failure(UnknownError("x")).is_success is False


@dataclass
class Listing:
    id: int
    title: str
    active: bool
    price: float


@pytest.mark.parametrize(
    "body",
    [
        b'{"id": "1", "title": "x", "active": true, "price": 1.0}',
        b'{"id": 1, "title": "x", "active": "yes", "price": 1.0}',
        b'{"id": 1, "title": 5, "active": true, "price": 1.0}',
        b'{"id": 1, "title": "x", "active": true, "price": "1.5"}',
    ],
)
def test_model_decoder_rejects_mistyped_values_instead_of_coercing(body):
    assert ModelDecoder(Listing).decode(Success(body)) == Failure(FailedDeserializationError("Listing"))


def test_model_decoder_accepts_integer_for_float_field():
    result = ModelDecoder(Listing).decode(Success(b'{"id": 1, "title": "x", "active": false, "price": 2}'))
    assert result == Success(Listing(id=1, title="x", active=False, price=2.0))
