# inator_studio/main.py
"""
Inator Studio Backend - application factory and entry point.
"""
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from inator_studio import __version__
from inator_studio.core.config import Settings, load_settings
from inator_studio.core.exceptions import (
    InatorError,
    ServiceUnavailable,
    ValidationError,
)
from inator_studio.core.logging import log, log_section
from inator_studio.lib.monitoring import register_monitoring
from inator_studio.llm.generation import GenerationService
from inator_studio.persistence.records import RecordStore


def _log_environment(settings: Settings) -> None:
    key = settings.llm.gemini_api_key or ""
    log("STARTUP", "Environment check:")
    log("STARTUP", f"  GEMINI_API_KEY exists: {bool(key)}")
    log("STARTUP", f"  GEMINI_API_KEY length: {len(key)}")
    log("STARTUP", f"  Model: {settings.llm.default_model}")
    log("STARTUP", f"  Storage directory: {settings.storage.storage_dir}")
    if not settings.llm.configured:
        log("STARTUP", "⚠️ Generation disabled - /api/generate will answer 503")


# ---------------------------------------------------------------------------
# EXCEPTION HANDLERS
# ---------------------------------------------------------------------------

async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse({"error": "Required"}, status_code=400)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Undecodable bodies are a request failure, not a missing field
    details = "; ".join(str(err.get("msg", "")) for err in exc.errors()) or "Invalid request body"
    log("API", f"❌ {request.method} {request.url.path}: {details}")
    return JSONResponse({"error": "Failed", "details": details}, status_code=500)


async def _service_unavailable(request: Request, exc: ServiceUnavailable) -> JSONResponse:
    log("GENERATE", f"⚠️ {exc.message}")
    return JSONResponse({"error": "Unavailable", "details": exc.message}, status_code=503)


async def _inator_error(request: Request, exc: InatorError) -> JSONResponse:
    log("API", f"❌ {request.method} {request.url.path}: {exc.message}", exc.details)
    return JSONResponse({"error": "Failed", "details": exc.message}, status_code=500)


# ---------------------------------------------------------------------------
# APP FACTORY
# ---------------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app. Components are constructed once here and shared via app.state."""
    settings = settings or load_settings()
    _log_environment(settings)

    app = FastAPI(title="Inator Studio", version=__version__)
    app.state.settings = settings
    app.state.generator = GenerationService(settings.llm)
    app.state.store = RecordStore(settings.storage.storage_dir)
    app.state.metrics = register_monitoring(app)

    cors_origins = settings.cors_origins
    if cors_origins == ["*"] and not settings.debug:
        log("STARTUP", "⚠️ [CORS] Using allow_origins=['*'] - consider setting CORS_ORIGINS in production")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(ServiceUnavailable, _service_unavailable)
    app.add_exception_handler(InatorError, _inator_error)

    from inator_studio.api import health, generate, history, frontend

    app.include_router(health.router)
    app.include_router(generate.router)
    app.include_router(history.router)
    app.include_router(frontend.router)

    return app


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

# Importing this module builds nothing; servers load the app through the factory:
#   uvicorn --factory inator_studio.main:create_app

if __name__ == "__main__":
    settings = load_settings()
    log_section("STARTUP", f"🎭 http://localhost:{settings.port}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
