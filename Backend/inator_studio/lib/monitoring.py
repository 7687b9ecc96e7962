# inator_studio/lib/monitoring.py
from fastapi import FastAPI
from prometheus_client.registry import CollectorRegistry as Registry
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator
from inator_studio.core.logging import log


class Metrics:
    """Per-app Prometheus registry with the custom generation counters."""

    def __init__(self):
        self.registry = Registry()
        self.records_generated = Counter(
            'inator_records_generated',
            'Number of records generated and persisted',
            registry=self.registry
        )
        self.generation_failures = Counter(
            'inator_generation_failures',
            'Number of failed generate requests, by error type',
            ['error'],
            registry=self.registry
        )


def register_monitoring(app: FastAPI) -> Metrics:
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.
    """
    metrics = Metrics()
    instrumentator = Instrumentator(
        excluded_handlers=["/metrics"],
        registry=metrics.registry
    ).instrument(app)

    instrumentator.expose(app, include_in_schema=False, should_gzip=True)

    log("MONITORING", "Prometheus instrumentation registered at /metrics.")
    return metrics
