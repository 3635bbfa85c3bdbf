"""Error catalog – status code, error code and default message per leaf error."""
from forge_errors.catalog.entries import ERRORS_CATALOG, ErrorCatalogEntry
from forge_errors.catalog.kinds import ErrorKind, get_catalog_entry

__all__ = ["ERRORS_CATALOG", "ErrorCatalogEntry", "ErrorKind", "get_catalog_entry"]
