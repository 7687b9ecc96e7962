# inator_studio/api/deps.py
"""
Request-scoped accessors for the components wired onto app.state.
"""
from fastapi import Request

from inator_studio.core.config import Settings
from inator_studio.lib.monitoring import Metrics
from inator_studio.llm.generation import GenerationService
from inator_studio.persistence.records import RecordStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_generator(request: Request) -> GenerationService:
    return request.app.state.generator


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_metrics(request: Request) -> Metrics:
    return request.app.state.metrics
