# file: ircview/main.py
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ircview.api.v1.router import api_router
from ircview.core.config import Settings, settings as default_settings
from ircview.db.archive import initialize_archive
from ircview.services.archive_service import ArchiveService
from ircview.services.search_service import SearchService

logging.basicConfig(level=default_settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
log = logging.getLogger("api")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """On startup, make sure the archive schema exists and wire up the services."""
        log.info("Application startup...")
        initialize_archive(settings)

        app.state.settings = settings
        app.state.archive_service = ArchiveService(settings)
        app.state.search_service = SearchService(settings)

        yield

        log.info("Application shutdown...")

    app = FastAPI(
        title="IRC Log Viewer",
        description="Browse archived IRC channel logs and search them with n-gram full-text search.",
        version="1.0.0",
        root_path=settings.SERVER_ROOT,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Access log for every request, plus a logged 500 for anything a handler let escape."""
        started = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as e:
            log.error(f"{request.method} {request.url.path} failed: {e}", exc_info=True)
            response = PlainTextResponse("Internal Server Error", status_code=500)
        elapsed_ms = (time.monotonic() - started) * 1000
        log.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    def health_check():
        return {"status": "ok"}

    return app

app = create_app()
