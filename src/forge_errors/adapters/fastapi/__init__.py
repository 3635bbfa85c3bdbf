"""FastAPI adapter – exception mapper."""
from forge_errors.adapters.fastapi.exception_mapper import FastAPIErrorMapper

__all__ = ["FastAPIErrorMapper"]
