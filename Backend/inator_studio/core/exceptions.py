# inator_studio/core/exceptions.py
"""
Custom exceptions for the application.
"""
from typing import Optional, Dict, Any


class InatorError(Exception):
    """Base exception for all Inator Studio errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(InatorError):
    """Missing or blank required input."""
    def __init__(self, field_name: str, message: str = "Required"):
        super().__init__(message, {"field": field_name})
        self.field_name = field_name


class InvalidInput(InatorError):
    """Input is present but unusable (e.g. not a string)."""
    def __init__(self, field_name: str, message: str):
        super().__init__(message, {"field": field_name})
        self.field_name = field_name


class ServiceUnavailable(InatorError):
    """Generation capability is not configured."""
    def __init__(self, provider: str):
        super().__init__(
            f"{provider} is not configured",
            {"provider": provider}
        )
        self.provider = provider


class GenerationFailed(InatorError):
    """External generation call errored or returned something unusable."""
    def __init__(self, provider: str, message: str, status: Optional[int] = None):
        details: Dict[str, Any] = {"provider": provider}
        if status is not None:
            details["status"] = status
        super().__init__(f"Generation error ({provider}): {message}", details)
        self.provider = provider
        self.status = status


class StorageError(InatorError):
    """Record store filesystem error."""
    def __init__(self, path: str, message: str):
        super().__init__(message, {"path": path})
        self.path = path


class StorageWriteFailed(StorageError):
    """A record could not be written."""
    def __init__(self, path: str, message: str):
        super().__init__(path, f"Cannot write to {path}: {message}")


class StorageReadFailed(StorageError):
    """Stored records could not be read."""
    def __init__(self, path: str, message: str):
        super().__init__(path, f"Cannot read {path}: {message}")
