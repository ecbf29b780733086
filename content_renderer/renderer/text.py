"""
Formatage du texte : masque Lexical → wrappers imbriqués.
Ordre fixe, de l'extérieur vers l'intérieur : strong > em > s > u > code.
"""
from typing import Optional, Union

from ..core.design_system import CODE_CLASS
from ..core.schemas import Element, TextFormat

# (drapeau, balise) de l'extérieur vers l'intérieur
_WRAPPERS = (
    ("bold",          "strong"),
    ("italic",        "em"),
    ("strikethrough", "s"),
    ("underline",     "u"),
    ("code",          "code"),
)


def format_text(text: str, mask: Union[int, TextFormat, None] = None) -> Union[str, Element]:
    """
    Applique le format au texte.

    Args:
        text: texte brut
        mask: masque entier (bits 0–4) ou TextFormat déjà décodé

    Returns:
        Le texte inchangé si aucun style, sinon l'Element le plus externe
    """
    fmt = mask if isinstance(mask, TextFormat) else TextFormat.from_mask(mask)
    if fmt.is_plain:
        return text

    result: Union[str, Element] = text
    for flag, tag in reversed(_WRAPPERS):
        if getattr(fmt, flag):
            props = {"class": CODE_CLASS} if tag == "code" else {}
            result = Element(tag=tag, key=tag, props=props, children=[result])
    return result
