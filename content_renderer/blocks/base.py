"""
Bloc de base pour content_renderer.
Discriminant : block_type (JSON : blockType, ou blockKind).
"""
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

BLOCK_TYPE_ALIASES = AliasChoices("blockType", "blockKind", "block_type")


class BaseBlock(BaseModel):
    """Bloc de base (classe parente de tous les blocs de contenu)."""
    block_type: str = Field(validation_alias=BLOCK_TYPE_ALIASES)
    id: Optional[str] = None
    block_name: Optional[str] = Field(None, validation_alias=AliasChoices("blockName", "block_name"))

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return str(v)
        return v if isinstance(v, str) and v else None

    @field_validator("block_name", mode="before")
    @classmethod
    def _name(cls, v):
        return v if isinstance(v, str) else None
