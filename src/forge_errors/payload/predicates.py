"""Type predicates for branching on error kind.

Each predicate is a :data:`~typing.TypeGuard`, so a checker narrows the
argument inside the ``True`` branch::

    try:
        ...
    except Exception as exc:
        if is_client_error(exc):
            exc.status_code  # BaseClientError here
"""
from __future__ import annotations

from typing import Any, TypeGuard

from forge_errors.errors.base import BaseClientError, BaseForgeError, BaseServerError


def is_base_error(error: Any) -> TypeGuard[BaseForgeError]:
    """``True`` when *error* is any forge error (generic, client or server)."""
    return error is not None and isinstance(error, BaseForgeError)


def is_client_error(error: Any) -> TypeGuard[BaseClientError]:
    """``True`` when *error* belongs to the 4xx branch."""
    return error is not None and isinstance(error, BaseClientError)


def is_server_error(error: Any) -> TypeGuard[BaseServerError]:
    """``True`` when *error* belongs to the 5xx branch."""
    return error is not None and isinstance(error, BaseServerError)


__all__ = ["is_base_error", "is_client_error", "is_server_error"]
