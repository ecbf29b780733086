"""
Schémas Pydantic du moteur de rendu.
Entrée  : DocumentRoot → DocumentNode → DocumentNode … (JSON Lexical, lecture seule)
Sortie  : arbre d'Element (tag, key, props, children) : None = « rien à rendre »

Les modèles d'entrée sont tolérants : un champ mal typé devient None,
un enfant invalide devient un emplacement vide (None) sans toucher ses frères.
"""
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import (
    AliasChoices, BaseModel, Field, ValidationError, ValidationInfo, field_validator, model_validator,
)


# ── Arbre de présentation ───────────────────────────────────────────────────

class Element(BaseModel):
    """Nœud de présentation. tag=None → fragment (enfants insérés tels quels)."""
    tag: Optional[str] = None
    key: str
    props: Dict[str, Any] = Field(default_factory=dict)
    children: List[Union["Element", str]] = Field(default_factory=list)

    def text(self) -> str:
        """Texte visible concaténé (profondeur d'abord)."""
        return "".join(c if isinstance(c, str) else c.text() for c in self.children)

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, tag: str) -> List["Element"]:
        return [e for e in self.iter() if e.tag == tag]

    def find(self, tag: str) -> Optional["Element"]:
        found = self.find_all(tag)
        return found[0] if found else None


Element.model_rebuild()


# ── Formatage du texte (bitflags Lexical) ───────────────────────────────────

IS_BOLD = 1
IS_ITALIC = 2
IS_STRIKETHROUGH = 4
IS_UNDERLINE = 8
IS_CODE = 16


class TextFormat(BaseModel):
    """Masque de format décodé une seule fois en booléens nommés."""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False

    @classmethod
    def from_mask(cls, mask: Optional[int]) -> "TextFormat":
        # bits au-delà de 4 ignorés, masque absent/négatif/mal typé → aucun style
        if not isinstance(mask, int) or isinstance(mask, bool) or mask <= 0:
            return cls()
        return cls(
            bold=bool(mask & IS_BOLD),
            italic=bool(mask & IS_ITALIC),
            strikethrough=bool(mask & IS_STRIKETHROUGH),
            underline=bool(mask & IS_UNDERLINE),
            code=bool(mask & IS_CODE),
        )

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.strikethrough or self.underline or self.code)


# ── Document riche (entrée) ─────────────────────────────────────────────────

class NodeKind(str, Enum):
    """Types de nœuds reconnus. Les données peuvent en contenir d'autres."""
    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "listitem"
    QUOTE = "quote"
    LINK = "link"
    LINE_BREAK = "linebreak"

    @classmethod
    def parse(cls, value: str) -> Optional["NodeKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _bool_or_none(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _int_or_none(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


# Profondeur maximale d'un arbre : au-delà, les enfants deviennent des emplacements vides
MAX_DEPTH = 64


def _depth(info: ValidationInfo) -> int:
    context = info.context or {}
    return context.get("depth", 0)


def _coerce_children(value: Any, depth: int = 0) -> Optional[list]:
    """Liste d'enfants : chaque entrée invalide devient None, à sa position."""
    if not isinstance(value, (list, tuple)):
        return None
    if depth >= MAX_DEPTH:
        return [None] * len(value)
    return [DocumentNode.coerce(child, depth + 1) for child in value]


class LinkFields(BaseModel):
    """Sous-objet `fields` des liens Lexical (prioritaire sur url/newTab à plat)."""
    url: Optional[str] = None
    new_tab: Optional[bool] = Field(None, validation_alias=AliasChoices("newTab", "new_tab"))
    link_type: Optional[str] = Field(None, validation_alias=AliasChoices("linkType", "link_type"))

    @field_validator("url", "link_type", mode="before")
    @classmethod
    def _strings(cls, v):
        return _str_or_none(v)

    @field_validator("new_tab", mode="before")
    @classmethod
    def _flag(cls, v):
        return _bool_or_none(v)


class DocumentNode(BaseModel):
    """Nœud d'un arbre Lexical sérialisé."""
    kind: str = Field("", validation_alias=AliasChoices("type", "kind"))
    version: Optional[int] = None
    children: Optional[List[Optional["DocumentNode"]]] = None
    text: Optional[str] = None
    format: Optional[int] = None
    tag: Optional[str] = None
    list_kind: Optional[str] = Field(None, validation_alias=AliasChoices("listType", "listKind", "list_kind"))
    link_target: Optional[str] = Field(None, validation_alias=AliasChoices("url", "linkTarget", "link_target"))
    opens_new_window: Optional[bool] = Field(
        None, validation_alias=AliasChoices("newTab", "opensNewWindow", "opens_new_window")
    )
    link_fields: Optional[LinkFields] = Field(None, validation_alias=AliasChoices("fields", "link_fields"))

    @field_validator("kind", mode="before")
    @classmethod
    def _kind(cls, v):
        return v if isinstance(v, str) else ""

    @field_validator("text", "tag", "list_kind", "link_target", mode="before")
    @classmethod
    def _strings(cls, v):
        return _str_or_none(v)

    @field_validator("version", mode="before")
    @classmethod
    def _version(cls, v):
        return _int_or_none(v)

    @field_validator("format", mode="before")
    @classmethod
    def _mask(cls, v):
        # sur les paragraphes Lexical, `format` est une chaîne d'alignement
        v = _int_or_none(v)
        return v if v is not None and v >= 0 else None

    @field_validator("opens_new_window", mode="before")
    @classmethod
    def _flag(cls, v):
        return _bool_or_none(v)

    @field_validator("link_fields", mode="before")
    @classmethod
    def _fields(cls, v):
        return v if isinstance(v, (dict, LinkFields)) else None

    @field_validator("children", mode="before")
    @classmethod
    def _children(cls, v, info: ValidationInfo):
        return _coerce_children(v, _depth(info))

    @classmethod
    def coerce(cls, value: Any, depth: int = 0) -> Optional["DocumentNode"]:
        """dict/DocumentNode → DocumentNode ; tout le reste → None. `depth` : niveau du nœud."""
        if isinstance(value, DocumentNode):
            return value
        if not isinstance(value, dict):
            return None
        try:
            return cls.model_validate(value, context={"depth": depth})
        except ValidationError:
            return None

    @property
    def text_format(self) -> TextFormat:
        return TextFormat.from_mask(self.format)

    @property
    def href(self) -> Optional[str]:
        if self.link_fields is not None and self.link_fields.url:
            return self.link_fields.url
        return self.link_target or None

    @property
    def new_tab(self) -> bool:
        nested = self.link_fields.new_tab if self.link_fields is not None else None
        return bool(nested or self.opens_new_window)


class DocumentRoot(BaseModel):
    """
    Racine d'un champ texte riche.
    Accepte la forme CMS {"root": {"children": [...]}} ou directement {"children": [...]}.
    """
    children: Optional[List[Optional[DocumentNode]]] = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data):
        if isinstance(data, dict) and "children" not in data and "root" in data:
            root = data["root"]
            return root if isinstance(root, dict) else {}
        return data

    @field_validator("children", mode="before")
    @classmethod
    def _children(cls, v, info: ValidationInfo):
        return _coerce_children(v, _depth(info))

    @classmethod
    def coerce(cls, value: Any) -> Optional["DocumentRoot"]:
        """Champ non renseigné ou mal formé → None (jamais d'exception)."""
        if isinstance(value, DocumentRoot):
            return value
        if not isinstance(value, dict):
            return None
        try:
            return cls.model_validate(value)
        except (ValidationError, RecursionError):
            return None

    @property
    def is_empty(self) -> bool:
        return not self.children


DocumentNode.model_rebuild()
DocumentRoot.model_rebuild()
