"""Search term and column catalog schema (Pydantic models).

`QueryTerm` is the contract between the search parser and whatever builds the final predicate.
`ColumnCatalog` describes a single model: its columns with declared types, its primary key and the
columns that must never be searched.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

GENERIC_TYPE = "generic"
RELATION_SEPARATOR = "."


class QueryTerm(BaseModel):
    """A fully validated search term."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    column: str = Field(min_length=1)
    operator: str = Field(min_length=1)
    values: tuple[str, ...] = Field(min_length=1)
    type: str = GENERIC_TYPE
    is_relation: bool = False

    @model_validator(mode="after")
    def validate_relation(self) -> QueryTerm:
        """A relation term must address a nested path (`relation.column`)."""

        if self.is_relation and RELATION_SEPARATOR not in self.column:
            raise ValueError("is_relation requires a dotted column path")
        return self

    @property
    def relation_name(self) -> str | None:
        """Relation path before the last separator (`author.company` for `author.company.name`)."""

        if not self.is_relation:
            return None
        return self.column.rsplit(RELATION_SEPARATOR, 1)[0]

    @property
    def relation_column(self) -> str:
        if not self.is_relation:
            return self.column
        return self.column.rsplit(RELATION_SEPARATOR, 1)[1]


class ColumnCatalog(BaseModel):
    """Searchable columns of one model.

    `primary_key_alias` is the name callers use in requests (usually `id`); it is rewritten to the
    canonical `primary_key` column before anything else happens to the term.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    columns: dict[str, str] = Field(default_factory=dict)
    primary_key: str = "id"
    primary_key_alias: str = "id"
    forbidden_columns: tuple[str, ...] = ()

    def is_primary_key(self, column: str) -> bool:
        return column == self.primary_key_alias

    def primary_column_name(self) -> str:
        return self.primary_key

    def columns_with_types(self) -> dict[str, str]:
        return dict(self.columns)

    def forbidden(self, global_forbidden: Iterable[str] = ()) -> frozenset[str]:
        """Effective forbidden set: the global list plus this catalog's own overrides.

        A bare string is one column name, not a sequence of characters.
        """

        if isinstance(global_forbidden, str):
            global_forbidden = (global_forbidden,)
        return frozenset(global_forbidden) | frozenset(self.forbidden_columns)


def load_catalog(path: str | Path) -> ColumnCatalog:
    """Read a `ColumnCatalog` from a JSON file."""

    return ColumnCatalog.model_validate_json(Path(path).read_text(encoding="utf-8"))
