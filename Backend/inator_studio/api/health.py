# inator_studio/api/health.py
"""
Health check endpoint.
"""
from fastapi import APIRouter, Depends

from inator_studio.api.deps import get_generator, get_store
from inator_studio.llm.generation import GenerationService
from inator_studio.persistence.records import RecordStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(
    generator: GenerationService = Depends(get_generator),
    store: RecordStore = Depends(get_store),
):
    """Informational only - reports whether generation is configured and where records live."""
    return {
        "status": "ok",
        "generationAvailable": generator.available,
        "storageLocation": store.location,
    }
