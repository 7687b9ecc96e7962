# inator_studio/api/frontend.py
"""
Serves the static single-page UI.
"""
from fastapi import APIRouter, Depends
from starlette.responses import FileResponse, JSONResponse

from inator_studio.api.deps import get_settings
from inator_studio.core.config import Settings
from inator_studio.core.logging import log

router = APIRouter(tags=["Frontend"])


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)):
    index_path = settings.paths.frontend_index
    if not index_path.is_file():
        log("FRONTEND", f"⚠️ Frontend not found at {index_path}")
        return JSONResponse({"error": "Not found"}, status_code=404)
    return FileResponse(index_path, media_type="text/html")
