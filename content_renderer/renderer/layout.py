"""
Compositeur : séquence ordonnée de blocs → conteneur unique.
Aucun bloc n'est réordonné ni dédoublonné ; seuls les blocs rendus None sont omis.
"""
import logging
from typing import Any, Optional

from ..core.schemas import Element
from ..core.settings import Settings, get_settings
from .blocks import render_block

log = logging.getLogger(__name__)


def render_sequence(blocks: Any, settings: Optional[Settings] = None) -> Optional[Element]:
    """
    Rend la liste de blocs d'une page.

    Returns:
        <div class="render-blocks"> avec les blocs dans l'ordre d'entrée,
        ou None si la séquence est absente/vide
    """
    if not blocks:
        return None

    settings = settings or get_settings()
    if not isinstance(blocks, (list, tuple)):
        if settings.diagnostics:
            log.warning("Séquence de blocs attendue, reçu %s, ignorée", type(blocks).__name__)
        return None

    rendered = []
    for index, block in enumerate(blocks):
        node = render_block(block, index, settings=settings)
        if node is not None:
            rendered.append(node)

    return Element(tag="div", key="render-blocks", props={"class": "render-blocks"}, children=rendered)
