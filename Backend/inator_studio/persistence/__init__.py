# inator_studio/persistence/__init__.py
"""
Persistence module - flat-file record store.
"""
from .records import RecordStore, record_path

__all__ = ["RecordStore", "record_path"]
