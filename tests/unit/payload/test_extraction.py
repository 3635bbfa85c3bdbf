"""Unit tests for payload extraction functions."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from forge_errors.errors import (
    BadRequestError,
    ForgeError,
    InternalServerError,
    NotFoundError,
    ServiceUnavailableError,
)
from forge_errors.payload import (
    CLIENT_DEFAULTS,
    SERVER_DEFAULTS,
    extract_base_payload,
    extract_client_payload,
    extract_client_payload_or_default,
    extract_generic_payload_or_default,
    extract_server_payload,
    extract_server_payload_or_default,
)

OR_DEFAULT_FUNCTIONS = (
    extract_client_payload_or_default,
    extract_server_payload_or_default,
    extract_generic_payload_or_default,
)

arbitrary_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=True),
    st.text(),
    st.binary(),
    st.lists(st.integers()),
    st.dictionaries(st.text(), st.one_of(st.integers(), st.text(), st.none())),
)


class _Exploding:
    """Every attribute access fails."""

    def __getattr__(self, name: str) -> Any:
        raise RuntimeError(f"no {name} for you")


class _Lookalike:
    def __init__(self, **fields: Any) -> None:
        self.__dict__.update(fields)


class TestNonDefaultingFamily:
    def test_base_payload_for_forge_error(self) -> None:
        err = NotFoundError("m")
        assert extract_base_payload(err) == err.build_error_payload()

    def test_base_payload_for_generic_forge_error(self) -> None:
        assert extract_base_payload(ForgeError("x", 418, "TEA")) == {
            "message": "x",
            "status_code": 418,
            "error_code": "TEA",
        }

    @pytest.mark.parametrize("value", [None, 42, "oops", ValueError("x"), {"message": "m"}])
    def test_base_payload_none_for_foreign_values(self, value: Any) -> None:
        assert extract_base_payload(value) is None

    def test_client_payload(self) -> None:
        assert extract_client_payload(NotFoundError())["status_code"] == 404  # type: ignore[index]
        assert extract_client_payload(InternalServerError()) is None
        assert extract_client_payload(ForgeError("x", 404, "NOT_FOUND")) is None

    def test_server_payload(self) -> None:
        assert extract_server_payload(InternalServerError())["status_code"] == 500  # type: ignore[index]
        assert extract_server_payload(NotFoundError()) is None
        assert extract_server_payload("oops") is None


class TestClientPayloadOrDefault:
    @pytest.mark.parametrize("value", [42, "oops", None, object(), [], ValueError("secret")])
    def test_defaults_for_values_without_fields(self, value: Any) -> None:
        assert extract_client_payload_or_default(value) == {
            "message": "Bad Request",
            "status_code": 400,
            "error_code": "BAD_REQUEST",
        }

    def test_client_error_delegates(self) -> None:
        err = NotFoundError("gone", data={"id": 3})
        assert extract_client_payload_or_default(err) == err.build_error_payload()

    def test_server_error_takes_field_reading_branch(self) -> None:
        # not a client error, but its attributes match the field names
        payload = extract_client_payload_or_default(ServiceUnavailableError("later"))
        assert payload == {
            "message": "later",
            "status_code": 503,
            "error_code": "SERVICE_UNAVAILABLE",
        }

    def test_partial_fields_are_merged_with_defaults(self) -> None:
        payload = extract_client_payload_or_default(_Lookalike(status_code=422))
        assert payload == {"message": "Bad Request", "status_code": 422, "error_code": "BAD_REQUEST"}

    def test_mapping_source(self) -> None:
        payload = extract_client_payload_or_default(
            {"statusCode": 409, "message": "dup", "errorCode": "DUPLICATE", "data": {"k": "v"}}
        )
        assert payload == {
            "message": "dup",
            "status_code": 409,
            "error_code": "DUPLICATE",
            "data": {"k": "v"},
        }

    def test_ill_typed_fields_use_defaults(self) -> None:
        payload = extract_client_payload_or_default(
            _Lookalike(status_code="418", message=7, error_code=None, data="not-a-map")
        )
        assert payload == CLIENT_DEFAULTS

    def test_bool_status_code_is_ignored(self) -> None:
        assert extract_client_payload_or_default(_Lookalike(status_code=True))["status_code"] == 400

    def test_empty_data_omitted(self) -> None:
        assert "data" not in extract_client_payload_or_default(_Lookalike(data={}))

    def test_exploding_attributes_do_not_raise(self) -> None:
        assert extract_client_payload_or_default(_Exploding()) == CLIENT_DEFAULTS


class TestServerPayloadOrDefault:
    def test_defaults(self) -> None:
        assert extract_server_payload_or_default(ValueError("boom")) == {
            "message": "Something Went Wrong",
            "status_code": 500,
            "error_code": "INTERNAL_SERVER_ERROR",
        }

    def test_server_error_delegates(self) -> None:
        err = InternalServerError(data={"trace": "abc"})
        assert extract_server_payload_or_default(err) == err.build_error_payload()

    def test_client_error_reads_its_fields(self) -> None:
        payload = extract_server_payload_or_default(BadRequestError("bad"))
        assert payload["status_code"] == 400
        assert payload["message"] == "bad"


class TestGenericPayloadOrDefault:
    def test_generic_forge_error(self) -> None:
        payload = extract_generic_payload_or_default(ForgeError("x", 418, "TEA"))
        assert payload == {"message": "x", "status_code": 418, "error_code": "TEA"}
        assert "data" not in payload

    def test_client_error_keeps_its_payload(self) -> None:
        assert extract_generic_payload_or_default(NotFoundError())["status_code"] == 404

    def test_unknown_value_gets_server_defaults(self) -> None:
        assert extract_generic_payload_or_default(KeyError("k")) == SERVER_DEFAULTS

    def test_defaults_are_not_shared_state(self) -> None:
        payload = extract_generic_payload_or_default(None)
        payload["message"] = "mutated"
        assert extract_generic_payload_or_default(None)["message"] == "Something Went Wrong"


class TestTotality:
    @pytest.mark.parametrize("fn", OR_DEFAULT_FUNCTIONS, ids=lambda f: f.__name__)
    @given(value=arbitrary_values)
    def test_or_default_never_raises(self, fn: Any, value: Any) -> None:
        payload = fn(value)
        assert isinstance(payload["status_code"], int)
        assert isinstance(payload["message"], str)
        assert isinstance(payload["error_code"], str)
        if "data" in payload:
            assert payload["data"]

    @given(value=arbitrary_values)
    def test_non_defaulting_return_none_for_foreign_values(self, value: Any) -> None:
        assert extract_base_payload(value) is None
        assert extract_client_payload(value) is None
        assert extract_server_payload(value) is None
