"""Shared utilities for openapi_reflect."""
from .logging_setup import configure_logging

__all__ = ["configure_logging"]
