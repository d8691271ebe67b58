"""Validation error types shared across packages."""

from .exceptions import (
    ValidationError,
    ConfigValidationError,
    EntryLoadError
)

__all__ = [
    "ValidationError",
    "ConfigValidationError",
    "EntryLoadError"
]
