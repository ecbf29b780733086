"""
Configuration : lue dans l'environnement à chaque appel (aucun cache global).

CONTENT_RENDERER_ENV        development | production (fallback : NODE_ENV)
CONTENT_RENDERER_LOG_LEVEL  niveau du logging (défaut WARNING)
"""
import logging
import os
from typing import Optional

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


class Settings(BaseModel):
    env: str = "development"
    log_level: str = "WARNING"

    @property
    def is_production(self) -> bool:
        return self.env.strip().lower() == "production"

    @property
    def diagnostics(self) -> bool:
        """Diagnostics (blocs inconnus/invalides) hors production uniquement."""
        return not self.is_production


def get_settings() -> Settings:
    env = os.getenv("CONTENT_RENDERER_ENV") or os.getenv("NODE_ENV") or "development"
    return Settings(env=env, log_level=os.getenv("CONTENT_RENDERER_LOG_LEVEL", "WARNING"))


def configure_logging(settings: Optional[Settings] = None) -> None:
    """logging.basicConfig au format de l'application hôte."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
