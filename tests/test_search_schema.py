"""Tests for the QueryTerm / ColumnCatalog Pydantic models."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from src.search.schema import ColumnCatalog, QueryTerm, load_catalog


def test_query_term_requires_values() -> None:
    with pytest.raises(ValidationError):
        QueryTerm(column="name", operator="=", values=())


def test_query_term_requires_operator() -> None:
    with pytest.raises(ValidationError):
        QueryTerm(column="name", operator="", values=("a",))


def test_query_term_relation_requires_dotted_column() -> None:
    with pytest.raises(ValidationError):
        QueryTerm(column="name", operator="=", values=("a",), is_relation=True)


def test_query_term_is_immutable() -> None:
    term = QueryTerm(column="name", operator="=", values=("a",))

    with pytest.raises(ValidationError):
        term.column = "other"  # type: ignore[misc]
    assert term.type == "generic"


def test_catalog_forbidden_is_union_of_global_and_overrides() -> None:
    catalog = ColumnCatalog(forbidden_columns=("api_token",))

    assert catalog.forbidden(["password"]) == frozenset({"password", "api_token"})
    assert catalog.forbidden() == frozenset({"api_token"})


def test_catalog_primary_key_lookup() -> None:
    catalog = ColumnCatalog(columns={"uuid": "string"}, primary_key="uuid", primary_key_alias="id")

    assert catalog.is_primary_key("id")
    assert not catalog.is_primary_key("uuid")
    assert catalog.primary_column_name() == "uuid"
    assert catalog.columns_with_types() == {"uuid": "string"}


def test_catalog_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        ColumnCatalog.model_validate({"columns": {}, "primary": "id"})


def test_load_catalog_from_json(tmp_path: Path) -> None:
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps(
            {
                "columns": {"uuid": "string", "age": "integer"},
                "primary_key": "uuid",
                "forbidden_columns": ["api_token"],
            }
        ),
        encoding="utf-8",
    )

    catalog = load_catalog(path)

    assert catalog.columns == {"uuid": "string", "age": "integer"}
    assert catalog.primary_key_alias == "id"
    assert catalog.forbidden_columns == ("api_token",)


def test_catalog_forbidden_accepts_single_column_string() -> None:
    catalog = ColumnCatalog(forbidden_columns=("api_token",))

    assert catalog.forbidden("password") == frozenset({"password", "api_token"})
