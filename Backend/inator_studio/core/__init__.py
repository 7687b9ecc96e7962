# inator_studio/core/__init__.py
"""
Core module - configuration, logging and shared exceptions.
"""
from .config import Settings, LLMSettings, StorageSettings, PathSettings, load_settings
from .exceptions import (
    InatorError,
    ValidationError,
    InvalidInput,
    ServiceUnavailable,
    GenerationFailed,
    StorageError,
    StorageWriteFailed,
    StorageReadFailed,
)

__all__ = [
    "Settings",
    "LLMSettings",
    "StorageSettings",
    "PathSettings",
    "load_settings",
    "InatorError",
    "ValidationError",
    "InvalidInput",
    "ServiceUnavailable",
    "GenerationFailed",
    "StorageError",
    "StorageWriteFailed",
    "StorageReadFailed",
]
