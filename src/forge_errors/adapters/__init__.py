"""Adapters – framework glue around the error hierarchy.

Framework-specific adapters live in subpackages and need their extra
installed (``forge-errors[fastapi]``).
"""
from forge_errors.adapters.async_handler import ErrorChannel, handle_async_request

__all__ = ["ErrorChannel", "handle_async_request"]
