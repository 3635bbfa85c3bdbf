"""Unit tests for error type predicates and wire-format helpers."""

from __future__ import annotations

from typing import Any

import pytest

from forge_errors.config import ConfigError
from forge_errors.errors import (
    ALL_CLIENT_ERRORS,
    ALL_SERVER_ERRORS,
    BaseClientError,
    BaseServerError,
    ForgeError,
    NotFoundError,
)
from forge_errors.payload import is_base_error, is_client_error, is_server_error, to_wire_payload


class TestPredicates:
    @pytest.mark.parametrize("value", [None, 0, "", "oops", ValueError("x"), {"status_code": 404}])
    def test_foreign_values_are_rejected(self, value: Any) -> None:
        assert not is_base_error(value)
        assert not is_client_error(value)
        assert not is_server_error(value)

    def test_client_leaves(self) -> None:
        for cls in ALL_CLIENT_ERRORS:
            err = cls()
            assert is_base_error(err)
            assert is_client_error(err)
            assert not is_server_error(err)

    def test_server_leaves(self) -> None:
        for cls in ALL_SERVER_ERRORS:
            err = cls()
            assert is_base_error(err)
            assert is_server_error(err)
            assert not is_client_error(err)

    def test_base_abstractions_constructed_directly(self) -> None:
        assert is_client_error(BaseClientError())
        assert is_server_error(BaseServerError())

    def test_generic_forge_error_is_base_only(self) -> None:
        err = ForgeError("x", 404, "NOT_FOUND")
        assert is_base_error(err)
        assert not is_client_error(err)
        assert not is_server_error(err)

    def test_config_errors_are_server_errors(self) -> None:
        assert is_server_error(ConfigError("bad config"))

    def test_error_classes_are_not_instances(self) -> None:
        assert not is_client_error(NotFoundError)

    def test_narrowing_allows_field_access(self) -> None:
        caught: object = NotFoundError("m")
        if is_client_error(caught):
            assert caught.status_code == 404
        else:
            pytest.fail("expected a client error")


class TestToWirePayload:
    def test_snake_is_a_plain_copy(self) -> None:
        payload = NotFoundError(data={"id": 1}).build_error_payload()
        wire = to_wire_payload(payload)
        assert wire == dict(payload)
        assert wire is not payload

    def test_camel_renames_codes(self) -> None:
        wire = to_wire_payload(NotFoundError("m").build_error_payload(), "camel")
        assert wire == {"message": "m", "statusCode": 404, "errorCode": "NOT_FOUND"}

    def test_camel_keeps_data(self) -> None:
        wire = to_wire_payload(NotFoundError(data={"id": 1}).build_error_payload(), "camel")
        assert wire["data"] == {"id": 1}

    def test_unknown_format_raises(self) -> None:
        with pytest.raises(ValueError, match="xml"):
            to_wire_payload(NotFoundError().build_error_payload(), "xml")  # type: ignore[arg-type]
