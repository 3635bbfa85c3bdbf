"""Lookup from :class:`ErrorKind` / catalog name to the bound leaf class."""
from __future__ import annotations

from forge_errors.catalog import ErrorKind
from forge_errors.errors.base import CatalogBoundError
from forge_errors.errors.client import ALL_CLIENT_ERRORS
from forge_errors.errors.server import ALL_SERVER_ERRORS

_BY_KIND: dict[ErrorKind, type[CatalogBoundError]] = {
    cls.kind: cls for cls in (*ALL_CLIENT_ERRORS, *ALL_SERVER_ERRORS)
}


def error_class_for(key: ErrorKind | str) -> type[CatalogBoundError]:
    """Return the leaf error class bound to *key*.

    *key* is an :class:`ErrorKind` or a catalog name such as
    ``"NotFoundError"``.  Raises :class:`KeyError` when unknown.
    """
    try:
        kind = key if isinstance(key, ErrorKind) else ErrorKind(key)
    except ValueError:
        raise KeyError(f"Unknown error catalog entry: {key!r}") from None
    return _BY_KIND[kind]


__all__ = ["error_class_for"]
