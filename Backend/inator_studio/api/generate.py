# inator_studio/api/generate.py
"""
Generate route - validate, call the generation service, persist the record.
"""
from fastapi import APIRouter, Depends

from inator_studio.api.deps import get_generator, get_metrics, get_store
from inator_studio.core.exceptions import InatorError, InvalidInput, ValidationError
from inator_studio.core.logging import log
from inator_studio.lib.monitoring import Metrics
from inator_studio.llm.generation import GenerationService
from inator_studio.models.record import GenerateRequest, Record
from inator_studio.persistence.records import RecordStore

router = APIRouter(prefix="/api", tags=["Generate"])


def _require(value, field_name: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(field_name)
    if not isinstance(value, str):
        raise InvalidInput(field_name, f"{field_name} must be a string, got {type(value).__name__}")
    return value


@router.post("/generate", response_model=Record)
async def generate(
    data: GenerateRequest,
    generator: GenerationService = Depends(get_generator),
    store: RecordStore = Depends(get_store),
    metrics: Metrics = Depends(get_metrics),
):
    """Create a new -inator name and store it.

    A failed generation never reaches the store, so no partial record is left behind.
    """
    title = _require(data.title, "title")
    description = _require(data.description, "description")

    try:
        result = await generator.generate(title, description)
        record = await store.save(title, description, result)
    except InatorError as e:
        metrics.generation_failures.labels(error=type(e).__name__).inc()
        raise
    except Exception as e:
        metrics.generation_failures.labels(error="Unexpected").inc()
        log("GENERATE", f"❌ Unexpected error: {e!r}")
        raise InatorError(str(e)) from e

    metrics.records_generated.inc()
    log("GENERATE", f"Instance saved: {record.id}")
    return record
