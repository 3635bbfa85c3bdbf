"""
forge_errors – HTTP error taxonomy with uniform payloads.

Import path convention::

    from forge_errors.errors import NotFoundError, InternalServerError, ForgeError
    from forge_errors.payload import extract_generic_payload_or_default, is_client_error
    from forge_errors.catalog import ERRORS_CATALOG, ErrorKind
    from forge_errors.adapters.fastapi import FastAPIErrorMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
