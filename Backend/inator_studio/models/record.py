# inator_studio/models/record.py
from typing import Any, Optional
from pydantic import BaseModel


class Record(BaseModel):
    """A persisted generation result. Written once, never mutated."""
    id: str
    title: str
    description: str
    result: str
    createdAt: str


class GenerateRequest(BaseModel):
    # Loosely typed so the route, not pydantic, decides how bad input is reported
    title: Optional[Any] = None
    description: Optional[Any] = None
