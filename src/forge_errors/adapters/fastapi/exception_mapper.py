"""FastAPI adapter – FastAPIErrorMapper."""
from __future__ import annotations

from typing import Any

from forge_errors.config import ErrorHandlerSettings
from forge_errors.errors.base import BaseForgeError
from forge_errors.observability.logging import SensitiveFieldsFilter, get_logger
from forge_errors.payload import (
    SERVER_DEFAULTS,
    extract_generic_payload_or_default,
    to_wire_payload,
)
from forge_errors.types import ErrorPayload


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'forge-errors[fastapi]' to use the FastAPI adapter"
        ) from exc


def _response_status(payload: ErrorPayload) -> int:
    # custom status codes outside the error range still answer as a 500
    status = payload["status_code"]
    return status if 400 <= status <= 599 else 500


class FastAPIErrorMapper:
    """Turn raised errors into JSON error responses on a FastAPI app.

    Error body schema (``wire_format="snake"``)::

        {"message": "...", "error_code": "NOT_FOUND", "status_code": 404, "data": {...}}

    Handlers
    --------
    ``BaseForgeError``  → the error's own payload and status code
    ``Exception``       → ``500 INTERNAL_SERVER_ERROR`` default payload; attributes
                          of the exception (``status_code``, ``message``, ``data``)
                          are ignored
    """

    def __init__(self, settings: ErrorHandlerSettings | None = None) -> None:
        _require_fastapi()
        self._settings = settings or ErrorHandlerSettings()
        self._redactor = SensitiveFieldsFilter.with_extra(self._settings.redact_fields)
        self._log = get_logger(__name__)

    def register(self, app: Any) -> None:
        """Register the error handlers on a ``FastAPI`` or ``Starlette`` app."""
        app.add_exception_handler(BaseForgeError, self.handle_forge_error)
        app.add_exception_handler(Exception, self.handle_unexpected_error)

    def render(self, payload: ErrorPayload) -> Any:
        from fastapi.responses import JSONResponse

        return JSONResponse(
            status_code=_response_status(payload),
            content=to_wire_payload(payload, self._settings.wire_format),  # type: ignore[arg-type]
        )

    async def handle_forge_error(self, request: Any, exc: BaseForgeError) -> Any:
        payload = extract_generic_payload_or_default(exc)
        self._log_payload(request, payload)
        return self.render(payload)

    async def handle_unexpected_error(self, request: Any, exc: Exception) -> Any:
        # foreign exceptions never contribute fields to the response body
        payload: ErrorPayload = {**SERVER_DEFAULTS}
        if self._settings.log_server_errors:
            self._log.error(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
                exc_type=type(exc).__name__,
                exc_info=exc,
            )
        return self.render(payload)

    def _log_payload(self, request: Any, payload: ErrorPayload) -> None:
        is_server = payload["status_code"] >= 500
        if is_server and not self._settings.log_server_errors:
            return
        if not is_server and not self._settings.log_client_errors:
            return
        log = self._log.error if is_server else self._log.info
        log(
            "forge_error",
            method=request.method,
            path=request.url.path,
            status_code=payload["status_code"],
            error_code=payload["error_code"],
            data=self._redactor.redact_deep(payload.get("data") or {}),
        )


__all__ = ["FastAPIErrorMapper"]
