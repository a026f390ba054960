"""Pytest configuration and shared search fixtures.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.search.operators import OperatorCatalog  # noqa: E402
from src.search.schema import ColumnCatalog  # noqa: E402


@pytest.fixture
def users_catalog() -> ColumnCatalog:
    """A `users` model whose `id` alias maps to a `uuid` primary column."""

    return ColumnCatalog(
        columns={
            "uuid": "string",
            "name": "string",
            "age": "integer",
            "created_at": "datetime",
            "password": "string",
        },
        primary_key="uuid",
        primary_key_alias="id",
        forbidden_columns=("api_token",),
    )


@pytest.fixture
def operators() -> OperatorCatalog:
    return OperatorCatalog(tokens=("<>", "=", ">", "<"))
