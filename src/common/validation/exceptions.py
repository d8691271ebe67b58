"""Custom exceptions for configuration and input validation."""

from typing import Any, Dict, List, Optional


class ValidationError(Exception):
    """
    Base exception for validation errors.

    Provides structured error information for debugging and reporting.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        """
        Initialize ValidationError with detailed error information.

        Args:
            message: Human-readable error message
            errors: List of detailed error dictionaries (e.g., from Pydantic)
            field: Specific field that failed validation
            value: The value that failed validation
        """
        super().__init__(message)
        self.errors = errors or []
        self.field = field
        self.value = value

    def __str__(self) -> str:
        """Return detailed error message."""
        parts = [str(self.args[0]) if self.args else "Validation error"]

        if self.field:
            parts.append(f"Field: {self.field}")

        if self.value is not None:
            parts.append(f"Value: {self.value}")

        if self.errors:
            parts.append(f"Errors: {self.errors}")

        return " | ".join(parts)


class ConfigValidationError(ValidationError):
    """Raised when the normalizer configuration is malformed or inconsistent."""

    def __init__(
        self,
        message: str,
        json_path: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize configuration validation error.

        Args:
            message: Error message
            json_path: JSON path to the element that failed validation
            **kwargs: Additional arguments passed to ValidationError
        """
        super().__init__(message, **kwargs)
        self.json_path = json_path

    def __str__(self) -> str:
        base_msg = super().__str__()

        if self.json_path:
            return f"{base_msg} | JSON Path: {self.json_path}"
        return base_msg


class EntryLoadError(ValidationError):
    """Raised when an entry file cannot be read or lacks required columns."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        row_number: Optional[int] = None,
        missing_fields: Optional[List[str]] = None,
        **kwargs
    ):
        """
        Initialize entry load error.

        Args:
            message: Error message
            file_path: Path to the file that failed to load
            row_number: Row number where error occurred
            missing_fields: Required columns absent from the file
            **kwargs: Additional arguments passed to ValidationError
        """
        super().__init__(message, **kwargs)
        self.file_path = file_path
        self.row_number = row_number
        self.missing_fields = missing_fields or []

    def __str__(self) -> str:
        base_msg = super().__str__()

        parts = [base_msg]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.row_number is not None:
            parts.append(f"Row: {self.row_number}")
        if self.missing_fields:
            parts.append(f"Missing fields: {', '.join(self.missing_fields)}")

        return " | ".join(parts)
