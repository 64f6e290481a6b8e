# src/fo_app/api/main.py
from fastapi import FastAPI

from fo_app.core.config import get_settings
from fo_app.core.logging import configure_logging
from fo_app.core.registry import load_module_routers
from fo_app.version import get_version


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Folder Organizer", version=get_version())
    configure_logging(settings.LOG_LEVEL)

    for r in load_module_routers():
        app.include_router(r, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
