"""
Renderer HTML : sérialise l'arbre d'Element en chaîne HTML.
Texte et attributs échappés ; ordre des attributs = ordre d'insertion (sortie stable).
"""
from html import escape
from typing import Any, Union

from ..core.schemas import Element
from .layout import render_sequence
from .rich_text import render_document

VOID_TAGS = frozenset({"br", "img", "hr"})


def to_html(node: Union[Element, str, None]) -> str:
    """Element/texte/None → HTML. None → ""."""
    if node is None:
        return ""
    if isinstance(node, str):
        return escape(node, quote=False)

    inner = "".join(to_html(child) for child in node.children)
    if node.tag is None:
        return inner

    attrs = _render_attrs(node.props)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _render_attrs(props: dict) -> str:
    parts = []
    for name, value in props.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


class HtmlRenderer:
    """Implémentation HTML du protocole Renderer."""

    def render_document(self, root: Any) -> str:
        return to_html(render_document(root))

    def render_blocks(self, blocks: Any) -> str:
        return to_html(render_sequence(blocks))
