# inator_studio/api/__init__.py
"""
API module - All route handlers.
"""
from . import health, generate, history, frontend

__all__ = [
    "health",
    "generate",
    "history",
    "frontend",
]
