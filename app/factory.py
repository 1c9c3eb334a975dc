from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.errors import DuplicateIdError, RecordNotFoundError
from .core.settings import APP_TITLE, APP_VERSION, Settings, get_settings
from .routers import api as api_router
from .services.records import RecordService


async def _duplicate_id_handler(request: Request, exc: DuplicateIdError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=APP_TITLE, version=APP_VERSION)
    app.state.settings = settings
    app.state.records = RecordService.from_settings(settings)
    app.add_exception_handler(DuplicateIdError, _duplicate_id_handler)
    app.add_exception_handler(RecordNotFoundError, _not_found_handler)
    app.include_router(api_router.router)

    @app.get("/health")
    def health():
        service: RecordService = app.state.records
        return {
            "status": "healthy",
            "records": len(service.store),
            "cache_enabled": service.cache_enabled,
        }

    return app
