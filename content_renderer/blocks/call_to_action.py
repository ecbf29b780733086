"""Bloc CallToAction : titre, sous-titre, texte riche, boutons, fond."""
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from ..core.design_system import DEFAULT_BACKGROUND, DEFAULT_BUTTON_VARIANT, FALLBACK_HREF
from ..core.schemas import DocumentRoot
from .base import BaseBlock, BLOCK_TYPE_ALIASES

ButtonVariant = Literal["default", "secondary", "outline", "ghost"]
BackgroundStyle = Literal["default", "muted", "primary", "secondary", "accent"]


class CTAButton(BaseModel):
    id: Optional[str] = None
    label: str
    link: str = Field(FALLBACK_HREF, validation_alias=AliasChoices("link", "target"))
    variant: ButtonVariant = Field(DEFAULT_BUTTON_VARIANT, validation_alias=AliasChoices("variant", "visualVariant"))

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v if isinstance(v, str) and v else None

    @field_validator("link", mode="before")
    @classmethod
    def _link(cls, v):
        return v if isinstance(v, str) and v else FALLBACK_HREF

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, v):
        return v if v in ("default", "secondary", "outline", "ghost") else DEFAULT_BUTTON_VARIANT


def _coerce_button(value) -> Optional[CTAButton]:
    if isinstance(value, CTAButton):
        return value
    if not isinstance(value, dict):
        return None
    try:
        return CTAButton.model_validate(value)
    except ValidationError:
        return None


class CallToActionBlock(BaseBlock):
    block_type: Literal["callToAction"] = Field("callToAction", validation_alias=BLOCK_TYPE_ALIASES)
    heading: str
    subheading: Optional[str] = None
    rich_text: Optional[DocumentRoot] = Field(None, validation_alias=AliasChoices("richText", "rich_text"))
    buttons: List[Optional[CTAButton]] = Field(
        default_factory=list, validation_alias=AliasChoices("buttons", "actions")
    )
    background_color: BackgroundStyle = Field(
        DEFAULT_BACKGROUND,
        validation_alias=AliasChoices("backgroundColor", "backgroundStyle", "background_color"),
    )

    @field_validator("subheading", mode="before")
    @classmethod
    def _subheading(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("rich_text", mode="before")
    @classmethod
    def _rich_text(cls, v):
        return DocumentRoot.coerce(v)

    @field_validator("buttons", mode="before")
    @classmethod
    def _buttons(cls, v):
        # bouton invalide → emplacement vide, les autres gardent leur index
        if not isinstance(v, (list, tuple)):
            return []
        return [_coerce_button(b) for b in v]

    @field_validator("background_color", mode="before")
    @classmethod
    def _background(cls, v):
        return v if v in ("default", "muted", "primary", "secondary", "accent") else DEFAULT_BACKGROUND
