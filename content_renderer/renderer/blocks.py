"""
Renderer blocs : dispatch block_type → renderer.
Type inconnu ou payload invalide : diagnostic (hors production) puis None,
sans interrompre les blocs suivants.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from ..blocks import (
    BaseBlock, CallToActionBlock, CTAButton, ContentBlock, MediaBlock,
    block_key, block_type_of, parse_block,
)
from ..core.design_system import (
    ALIGNMENT_CLASSES, BACKGROUND_CLASSES, BUTTON_CLASSES, CAPTION_ALIGN_CLASSES, COLUMN_CLASS,
    COLUMN_SLOTS, CONTAINER_CLASS, DEFAULT_BACKGROUND, DEFAULT_BUTTON_VARIANT, DEFAULT_POSITION,
    GRID_CLASSES, MEDIA_SIZES, pick,
)
from ..core.schemas import Element
from ..core.settings import Settings, get_settings
from ..errors import RenderContractError
from .rich_text import render_document

log = logging.getLogger(__name__)


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_block(block: Any, index: int, settings: Optional[Settings] = None) -> Optional[Element]:
    """
    Rend un bloc (modèle ou dict JSON) à la position `index`.

    Returns:
        Element <section>, ou None (type inconnu, bloc invalide, média non résolu)
    """
    settings = settings or get_settings()
    block_type = block_type_of(block)
    renderer = _BLOCK_RENDERERS.get(block_type) if block_type else None

    if renderer is None:
        if settings.diagnostics:
            log.warning("Type de bloc inconnu : %r (position %d), ignoré", block_type, index)
        return None

    try:
        model = parse_block(block, strict=True)
    except RenderContractError as e:
        if settings.diagnostics:
            log.warning("Position %d : %s", index, e)
        return None

    return renderer(model, block_key(model, index))


# ── Renderers par type ──────────────────────────────────────────────────────

def _section(key: str, section_class: str, inner: List[Element]) -> Element:
    container = Element(tag="div", key="container", props={"class": CONTAINER_CLASS}, children=inner)
    return Element(tag="section", key=key, props={"class": section_class}, children=[container])


def render_content_block(b: ContentBlock, key: str) -> Element:
    # une colonne vide garde son emplacement : la grille dépend de `columns` seul
    cols = []
    for slot, root in zip(COLUMN_SLOTS, b.visible_columns()):
        rich = render_document(root)
        cols.append(Element(
            tag="div", key=slot, props={"class": COLUMN_CLASS},
            children=[rich] if rich is not None else [],
        ))

    grid = Element(tag="div", key="grid", props={"class": GRID_CLASSES[b.columns]}, children=cols)
    return _section(key, "py-12", [grid])


def render_media_block(b: MediaBlock, key: str) -> Optional[Element]:
    media = b.resolved
    if media is None:
        return None

    width, height = media.dimensions
    img = Element(tag="img", key="image", props={
        "src":    media.url,
        "alt":    media.alt_text,
        "width":  width,
        "height": height,
        "class":  "h-auto w-full object-cover",
        "sizes":  MEDIA_SIZES,
    })
    frame = Element(tag="div", key="frame", props={"class": "relative overflow-hidden rounded-lg"}, children=[img])

    figure_children: List[Element] = [frame]
    if b.caption:
        align = pick(CAPTION_ALIGN_CLASSES, b.position, DEFAULT_POSITION)
        figure_children.append(Element(
            tag="figcaption", key="caption",
            props={"class": f"mt-3 text-sm text-muted-foreground {align}"},
            children=[b.caption],
        ))

    align = pick(ALIGNMENT_CLASSES, b.position, DEFAULT_POSITION)
    figure = Element(tag="figure", key="figure", props={"class": f"max-w-4xl {align}"}, children=figure_children)
    return _section(key, "py-12", [figure])


def _render_button(button: CTAButton, index: int) -> Element:
    return Element(
        tag="a",
        key=button.id or f"button-{index}",
        props={
            "href": button.link,
            "class": pick(BUTTON_CLASSES, button.variant, DEFAULT_BUTTON_VARIANT),
            "data-variant": button.variant,
        },
        children=[button.label],
    )


def render_call_to_action_block(b: CallToActionBlock, key: str) -> Element:
    inner: List[Element] = [Element(
        tag="h2", key="heading",
        props={"class": "mb-4 text-3xl font-bold tracking-tight sm:text-4xl lg:text-5xl"},
        children=[b.heading],
    )]

    if b.subheading:
        inner.append(Element(
            tag="p", key="subheading",
            props={"class": "mb-6 text-lg text-muted-foreground sm:text-xl"},
            children=[b.subheading],
        ))

    rich = render_document(b.rich_text)
    if rich is not None:
        inner.append(Element(tag="div", key="rich-text", props={"class": "mb-8"}, children=[rich]))

    buttons = [_render_button(btn, i) for i, btn in enumerate(b.buttons) if btn is not None]
    if buttons:
        inner.append(Element(
            tag="div", key="actions",
            props={"class": "flex flex-col items-center justify-center gap-4 sm:flex-row"},
            children=buttons,
        ))

    body = Element(tag="div", key="body", props={"class": "mx-auto max-w-3xl text-center"}, children=inner)
    bg = pick(BACKGROUND_CLASSES, b.background_color, DEFAULT_BACKGROUND)
    return _section(key, f"py-16 {bg}", [body])


_BLOCK_RENDERERS: Dict[str, Callable[[BaseBlock, str], Optional[Element]]] = {
    "content":      render_content_block,
    "mediaBlock":   render_media_block,
    "callToAction": render_call_to_action_block,
}

