"""
Bloc Media : image avec légende optionnelle et position left/center/right.

`media` est une relation : soit hydratée (ResolvedMedia), soit encore un simple
identifiant (UnresolvedMedia). L'hydratation se fait en amont, jamais ici.
"""
from typing import Literal, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from ..core.design_system import DEFAULT_MEDIA_HEIGHT, DEFAULT_MEDIA_WIDTH, DEFAULT_POSITION, FALLBACK_ALT
from .base import BaseBlock, BLOCK_TYPE_ALIASES

MediaPosition = Literal["left", "center", "right"]


class UnresolvedMedia(BaseModel):
    """Relation non hydratée : identifiant brut."""
    state: Literal["unresolved"] = "unresolved"
    id: str


class ResolvedMedia(BaseModel):
    """Descripteur média hydraté (collection media du CMS)."""
    state: Literal["resolved"] = "resolved"
    id: Optional[str] = None
    url: Optional[str] = None
    alt: Optional[str] = None
    filename: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v if isinstance(v, str) else None

    @field_validator("url", "alt", "filename", mode="before")
    @classmethod
    def _strings(cls, v):
        return v if isinstance(v, str) and v else None

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v <= 0:
            return None
        return int(v)

    @property
    def alt_text(self) -> str:
        """alt explicite → nom de fichier → "Image"."""
        return self.alt or self.filename or FALLBACK_ALT

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width or DEFAULT_MEDIA_WIDTH, self.height or DEFAULT_MEDIA_HEIGHT


MediaReference = Union[ResolvedMedia, UnresolvedMedia]


def coerce_media_reference(value) -> Optional[MediaReference]:
    """str/int → UnresolvedMedia, dict → ResolvedMedia, reste → None."""
    if isinstance(value, (ResolvedMedia, UnresolvedMedia)):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return UnresolvedMedia(id=str(value))
    if isinstance(value, dict):
        try:
            return ResolvedMedia.model_validate(value)
        except ValidationError:
            return None
    return None


class MediaBlock(BaseBlock):
    block_type: Literal["mediaBlock"] = Field("mediaBlock", validation_alias=BLOCK_TYPE_ALIASES)
    media: Optional[MediaReference] = Field(None, validation_alias=AliasChoices("media", "mediaReference"))
    caption: Optional[str] = None
    position: MediaPosition = DEFAULT_POSITION

    @field_validator("media", mode="before")
    @classmethod
    def _media(cls, v):
        return coerce_media_reference(v)

    @field_validator("caption", mode="before")
    @classmethod
    def _caption(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("position", mode="before")
    @classmethod
    def _position(cls, v):
        return v if v in ("left", "center", "right") else DEFAULT_POSITION

    @property
    def resolved(self) -> Optional[ResolvedMedia]:
        """Descripteur affichable (hydraté et avec URL), sinon None."""
        if isinstance(self.media, ResolvedMedia) and self.media.url:
            return self.media
        return None
