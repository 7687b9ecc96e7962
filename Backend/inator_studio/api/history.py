# inator_studio/api/history.py
"""
History route - list every stored record, newest first.
"""
from fastapi import APIRouter, Depends

from inator_studio.api.deps import get_store
from inator_studio.core.exceptions import InatorError
from inator_studio.core.logging import log
from inator_studio.persistence.records import RecordStore

router = APIRouter(prefix="/api", tags=["History"])


@router.get("/history")
async def history(store: RecordStore = Depends(get_store)):
    # Unreadable storage is already [] here; anything raised is unexpected
    try:
        records = await store.list_all()
    except Exception as e:
        log("HISTORY", f"❌ History listing failed: {e!r}")
        raise InatorError(str(e)) from e
    return [r.model_dump() for r in records]
