"""
Content Renderer : rendu des champs texte riche (Lexical) et des blocs de page.

Usage :
    >>> from content_renderer import render_sequence, render_document, to_html
    >>> html = to_html(render_sequence(page["layout"]))

Usage (texte riche seul) :
    >>> tree = render_document({"root": {"children": [...]}})
    >>> tree.text()
"""

from .core.schemas import (
    Element,
    TextFormat,
    NodeKind,
    DocumentNode,
    DocumentRoot,
)
from .core.settings import Settings, get_settings, configure_logging
from .errors import RenderContractError

from .blocks import (
    BaseBlock,
    ContentBlock,
    MediaBlock, MediaReference, ResolvedMedia, UnresolvedMedia,
    CallToActionBlock, CTAButton,
    BlockUnion, BlockSequence,
    BLOCK_REGISTRY, block_key, parse_block,
)

from .renderer import (
    Renderer,
    HtmlRenderer,
    format_text,
    render_document,
    render_node,
    render_block,
    render_sequence,
    to_html,
)

__version__ = "0.1.0"

__all__ = [
    # core
    "Element", "TextFormat", "NodeKind", "DocumentNode", "DocumentRoot",
    "Settings", "get_settings", "configure_logging",
    "RenderContractError",
    # blocs
    "BaseBlock", "ContentBlock",
    "MediaBlock", "MediaReference", "ResolvedMedia", "UnresolvedMedia",
    "CallToActionBlock", "CTAButton",
    "BlockUnion", "BlockSequence",
    "BLOCK_REGISTRY", "block_key", "parse_block",
    # renderers
    "Renderer", "HtmlRenderer",
    "format_text", "render_document", "render_node", "render_block", "render_sequence", "to_html",
]
