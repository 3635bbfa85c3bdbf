"""Observability – logging for the framework adapters."""
