"""
Application d'aperçu FastAPI.
Démarrer : uvicorn content_renderer.app:create_app --factory --reload --port 8001
"""
import logging

from fastapi import FastAPI

from . import __version__
from .core.settings import configure_logging, get_settings
from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title="Content Renderer : aperçu", version=__version__, docs_url="/docs")
    app.include_router(router)
    log.info("Content Renderer prêt (env=%s, diagnostics=%s)", settings.env, settings.diagnostics)
    return app
