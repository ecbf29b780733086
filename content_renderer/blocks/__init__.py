"""
Blocs : exports publics + registry + BlockUnion.
"""
from typing import Any, Dict, List, Union

from .base import BaseBlock
from .content import ContentBlock, ColumnCount
from .media import MediaBlock, MediaPosition, MediaReference, ResolvedMedia, UnresolvedMedia
from .call_to_action import CallToActionBlock, CTAButton, ButtonVariant, BackgroundStyle
from .registry import BLOCK_REGISTRY, block_key, block_type_of, parse_block

# Union des blocs connus ; une séquence brute peut aussi contenir des dicts de type inconnu
BlockUnion = Union[ContentBlock, MediaBlock, CallToActionBlock]
BlockSequence = List[Union[BlockUnion, Dict[str, Any]]]

__all__ = [
    # Base
    "BaseBlock",
    # Content
    "ContentBlock", "ColumnCount",
    # Media
    "MediaBlock", "MediaPosition", "MediaReference", "ResolvedMedia", "UnresolvedMedia",
    # CallToAction
    "CallToActionBlock", "CTAButton", "ButtonVariant", "BackgroundStyle",
    # Registry
    "BLOCK_REGISTRY", "block_key", "block_type_of", "parse_block",
    # Union
    "BlockUnion", "BlockSequence",
]
