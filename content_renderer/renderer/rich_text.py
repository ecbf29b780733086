"""
Renderer texte riche : DocumentRoot Lexical → arbre d'Element.

Dispatch sur NodeKind ; un type inconnu avec enfants est transparent
(les enfants sont rendus à sa place), sans enfants il ne rend rien.
Clé de chaque nœud : "{kind}-{index}" (index parmi ses frères).
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from ..core.design_system import (
    DEFAULT_HEADING_TAG, FALLBACK_HREF, HEADING_CLASSES, LINK_CLASS, LIST_CLASSES,
    NEW_TAB_REL, NEW_TAB_TARGET, ORDERED_LIST_KINDS, PARAGRAPH_CLASS, QUOTE_CLASS,
    RICH_TEXT_CLASS,
)
from ..core.schemas import DocumentNode, DocumentRoot, Element, NodeKind
from .text import format_text

Child = Union[Element, str]


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_document(root: Any, class_name: str = "") -> Optional[Element]:
    """
    Rend un champ texte riche.

    Args:
        root: DocumentRoot, dict JSON ({"root": …} ou {"children": …}) ou None
        class_name: classes additionnelles du wrapper

    Returns:
        Element wrapper, ou None si racine absente/vide ou si aucun enfant ne se rend
    """
    doc = DocumentRoot.coerce(root)
    if doc is None or doc.is_empty:
        return None

    children = render_children(doc.children)
    if not children:
        return None

    classes = f"{RICH_TEXT_CLASS} {class_name}".strip()
    return Element(tag="div", key="rich-text", props={"class": classes}, children=children)


def render_children(children: Optional[Sequence[Optional[DocumentNode]]]) -> List[Child]:
    """Rend les enfants dans l'ordre ; un enfant vide/invalide n'affecte pas ses frères."""
    rendered: List[Child] = []
    for index, child in enumerate(children or []):
        if child is None:
            continue
        node = render_node(child, index)
        if node is not None:
            rendered.append(node)
    return rendered


def render_node(node: Any, index: int) -> Optional[Element]:
    """Rend un nœud (DocumentNode ou dict brut) à la position `index`."""
    node = DocumentNode.coerce(node)
    if node is None:
        return None

    key = f"{node.kind}-{index}"
    kind = NodeKind.parse(node.kind)
    if kind is None:
        return _render_passthrough(node, key)
    return _NODE_RENDERERS[kind](node, key)


# ── Règles par type de nœud ─────────────────────────────────────────────────

def _render_passthrough(node: DocumentNode, key: str) -> Optional[Element]:
    if not node.children:
        return None
    return Element(key=key, children=render_children(node.children))


def _render_text(node: DocumentNode, key: str) -> Optional[Element]:
    if node.text is None:
        return _render_passthrough(node, key)
    return Element(key=key, children=[format_text(node.text, node.text_format)])


def _render_paragraph(node: DocumentNode, key: str) -> Element:
    return Element(tag="p", key=key, props={"class": PARAGRAPH_CLASS}, children=render_children(node.children))


def _render_heading(node: DocumentNode, key: str) -> Element:
    tag = node.tag if node.tag in HEADING_CLASSES else DEFAULT_HEADING_TAG
    return Element(tag=tag, key=key, props={"class": HEADING_CLASSES[tag]}, children=render_children(node.children))


def _render_list(node: DocumentNode, key: str) -> Element:
    tag = "ol" if node.list_kind in ORDERED_LIST_KINDS else "ul"
    return Element(tag=tag, key=key, props={"class": LIST_CLASSES[tag]}, children=render_children(node.children))


def _render_list_item(node: DocumentNode, key: str) -> Element:
    return Element(tag="li", key=key, children=render_children(node.children))


def _render_quote(node: DocumentNode, key: str) -> Element:
    return Element(tag="blockquote", key=key, props={"class": QUOTE_CLASS}, children=render_children(node.children))


def _render_link(node: DocumentNode, key: str) -> Element:
    props = {"href": node.href or FALLBACK_HREF, "class": LINK_CLASS}
    if node.new_tab:
        props["target"] = NEW_TAB_TARGET
        props["rel"] = NEW_TAB_REL
    return Element(tag="a", key=key, props=props, children=render_children(node.children))


def _render_line_break(node: DocumentNode, key: str) -> Element:
    return Element(tag="br", key=key)


_NODE_RENDERERS: Dict[NodeKind, Callable[[DocumentNode, str], Optional[Element]]] = {
    NodeKind.TEXT:       _render_text,
    NodeKind.PARAGRAPH:  _render_paragraph,
    NodeKind.HEADING:    _render_heading,
    NodeKind.LIST:       _render_list,
    NodeKind.LIST_ITEM:  _render_list_item,
    NodeKind.QUOTE:      _render_quote,
    NodeKind.LINK:       _render_link,
    NodeKind.LINE_BREAK: _render_line_break,
}
