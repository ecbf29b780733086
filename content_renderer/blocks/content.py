"""Bloc Content : 1, 2 ou 3 colonnes de texte riche."""
from typing import List, Literal, Optional

from pydantic import AliasChoices, Field, field_validator

from ..core.schemas import DocumentRoot
from .base import BaseBlock, BLOCK_TYPE_ALIASES

ColumnCount = Literal["1", "2", "3"]


class ContentBlock(BaseBlock):
    block_type: Literal["content"] = Field("content", validation_alias=BLOCK_TYPE_ALIASES)
    columns: ColumnCount = Field("1", validation_alias=AliasChoices("columns", "columnCount", "column_count"))
    column_one: Optional[DocumentRoot] = Field(None, validation_alias=AliasChoices("columnOne", "column_one"))
    column_two: Optional[DocumentRoot] = Field(None, validation_alias=AliasChoices("columnTwo", "column_two"))
    column_three: Optional[DocumentRoot] = Field(None, validation_alias=AliasChoices("columnThree", "column_three"))

    @field_validator("columns", mode="before")
    @classmethod
    def _column_count(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        return v if v in ("1", "2", "3") else "1"

    @field_validator("column_one", "column_two", "column_three", mode="before")
    @classmethod
    def _rich_text(cls, v):
        return DocumentRoot.coerce(v)

    @property
    def column_count(self) -> int:
        return int(self.columns)

    def visible_columns(self) -> List[Optional[DocumentRoot]]:
        """Colonnes lues selon `columns` seul ; les données en trop sont ignorées."""
        return [self.column_one, self.column_two, self.column_three][: self.column_count]
