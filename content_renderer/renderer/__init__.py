"""Renderers : texte, texte riche, blocs, séquence, HTML."""
from .base import Renderer
from .text import format_text
from .rich_text import render_document, render_node, render_children
from .blocks import render_block, render_content_block, render_media_block, render_call_to_action_block
from .layout import render_sequence
from .html import HtmlRenderer, to_html

__all__ = [
    "Renderer",
    "format_text",
    "render_document", "render_node", "render_children",
    "render_block", "render_content_block", "render_media_block", "render_call_to_action_block",
    "render_sequence",
    "HtmlRenderer", "to_html",
]
