"""
Registry des blocs : block_type → modèle Pydantic.
Lecture seule : aucun rendu ne le modifie.
"""
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type

from pydantic import ValidationError

from ..errors import RenderContractError
from .base import BaseBlock
from .content import ContentBlock
from .media import MediaBlock
from .call_to_action import CallToActionBlock

BLOCK_REGISTRY: Mapping[str, Type[BaseBlock]] = MappingProxyType({
    "content":      ContentBlock,
    "mediaBlock":   MediaBlock,
    "callToAction": CallToActionBlock,
})

_TYPE_KEYS = ("blockType", "blockKind", "block_type")


def block_type_of(block: Any) -> Optional[str]:
    """Discriminant d'un bloc (modèle ou dict brut), None si introuvable."""
    if isinstance(block, BaseBlock):
        return block.block_type
    if isinstance(block, dict):
        for k in _TYPE_KEYS:
            if isinstance(block.get(k), str):
                return block[k]
    return None


def block_key(block: Any, index: int) -> str:
    """Clé stable : id du bloc, sinon "block-{index}"."""
    block_id = block.id if isinstance(block, BaseBlock) else (
        block.get("id") if isinstance(block, dict) else None
    )
    if isinstance(block_id, int) and not isinstance(block_id, bool):
        block_id = str(block_id)
    return block_id if isinstance(block_id, str) and block_id else f"block-{index}"


def parse_block(block: Any, strict: bool = False) -> Optional[BaseBlock]:
    """
    Instancie un bloc depuis son JSON via le registry.

    Args:
        block: dict brut ou bloc déjà instancié
        strict: lève RenderContractError au lieu de retourner None

    Returns:
        Bloc validé, ou None (type inconnu / payload invalide)
    """
    block_type = block_type_of(block)
    block_cls = BLOCK_REGISTRY.get(block_type) if block_type else None

    if block_cls is None:
        if strict:
            raise RenderContractError(
                f"Bloc inconnu : {block_type!r}. Registry : {list(BLOCK_REGISTRY)}",
                block_type=block_type,
            )
        return None

    if isinstance(block, block_cls):
        return block

    try:
        return block_cls.model_validate(block)
    except ValidationError as e:
        if strict:
            raise RenderContractError(f"Bloc {block_type!r} invalide : {e}", block_type=block_type) from e
        return None
