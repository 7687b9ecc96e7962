# inator_studio/models/__init__.py
from .record import Record, GenerateRequest

__all__ = ["Record", "GenerateRequest"]
