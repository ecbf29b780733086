"""
Protocol Renderer : interface pluggable pour les sérialiseurs (HTML, JSON…).
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    def render_document(self, root: Any) -> str: ...
    def render_blocks(self, blocks: Any) -> str: ...
