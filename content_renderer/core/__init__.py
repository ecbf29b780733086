"""Core module pour content_renderer."""
from .schemas import (
    Element,
    TextFormat,
    NodeKind,
    LinkFields,
    DocumentNode,
    DocumentRoot,
)
from .settings import Settings, get_settings, configure_logging

__all__ = [
    "Element",
    "TextFormat",
    "NodeKind",
    "LinkFields",
    "DocumentNode",
    "DocumentRoot",
    "Settings",
    "get_settings",
    "configure_logging",
]
