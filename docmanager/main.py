import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docmanager.shared.config import Settings, settings as default_settings
from docmanager.shared.db import Database
from docmanager.shared.frontdoor import FrontDoorMiddleware
from docmanager.shared.http import install_error_handlers
from docmanager.shared.logging import setup_logging

# Routers Import
from docmanager.auth.api import router as auth_router
from docmanager.folders.api import router as folders_router
from docmanager.documents.api import router as documents_router

logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Auth", "description": "Register and confirm credentials (no token issued)"},
    {"name": "Folders", "description": "Create, list and delete folders"},
    {"name": "Documents", "description": "Upload, list and download documents stored in the database"},
    {"name": "Health", "description": "Service health"},
]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Document Manager",
        version="1.0.0",
        description="Folders, documents stored inline in the database, and basic user registration.",
        openapi_tags=TAGS_METADATA,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.db = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    if app.state.db.init_schema():
        logger.info("database ready (%s)", app.state.db.url.get_backend_name())

    install_error_handlers(app)

    # last added runs first: the front door sees every request before CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
    )
    app.add_middleware(FrontDoorMiddleware, mount_path=settings.MOUNT_PATH)

    @app.on_event("shutdown")
    def _close_db():
        app.state.db.dispose()

    @app.get("/healthz", tags=["Health"])
    def healthz():
        return {"ok": True}

    # literal routes are registered before parametric ones within each router
    app.include_router(auth_router)
    app.include_router(folders_router)
    app.include_router(documents_router)
    return app


app = create_app()
