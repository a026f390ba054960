"""Application composition root.

This module wires settings into the collaborators the search parser needs: the operator catalog
and the global forbidden-column list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.config.settings import Settings
from src.search.operators import OperatorCatalog
from src.search.parser import parse_search_term, parse_search_terms
from src.search.schema import ColumnCatalog, QueryTerm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class App:
    """Shared, read-only search dependencies."""

    settings: Settings
    operators: OperatorCatalog
    global_forbidden: tuple[str, ...]

    def parse(self, catalog: ColumnCatalog, column: str, argument: str) -> QueryTerm:
        return parse_search_term(
            catalog,
            self.operators,
            column,
            argument,
            global_forbidden=self.global_forbidden,
        )

    def parse_all(self, catalog: ColumnCatalog, params: Iterable[tuple[str, str]]) -> list[QueryTerm]:
        return parse_search_terms(
            catalog,
            self.operators,
            params,
            global_forbidden=self.global_forbidden,
        )


def create_app(settings: Settings) -> App:
    """Create the application container.

    Shadowed operators are reported but accepted: matching keeps first-match semantics.
    """

    operators = OperatorCatalog(tokens=tuple(settings.operators))
    for item in operators.shadowed_tokens():
        logger.warning("operator %r is shadowed by earlier operator %r", item.shadowed, item.by)

    return App(
        settings=settings,
        operators=operators,
        global_forbidden=tuple(settings.global_forbidden_columns),
    )
