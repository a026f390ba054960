"""Search term parser.

Turns one raw query parameter (`column`, `argument`) into a validated `QueryTerm`:

    ("id", "=100;200")  ->  QueryTerm(column="uuid", operator="=", values=("100", "200"), ...)

The steps run in a fixed order and the first failure aborts the parse:
    1) primary-key alias -> canonical primary column,
    2) forbidden column check (on the rewritten name),
    3) operator detection,
    4) single removal of the operator and value splitting,
    5) value cleaning,
    6) type lookup (`generic` for columns unknown to the catalog),
    7) relation flag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from src.search.normalize import ValueCleaner, clean_values, split_values
from src.search.operators import OperatorCatalog
from src.search.schema import GENERIC_TYPE, RELATION_SEPARATOR, ColumnCatalog, QueryTerm

logger = logging.getLogger(__name__)


class SearchParserError(ValueError):
    """Raised when a raw search parameter cannot be turned into a valid term."""


class InvalidColumnError(SearchParserError):
    def __init__(self, column: str) -> None:
        super().__init__(f"Column name '{column}' is empty or blank.")
        self.column = column


class ForbiddenColumnError(SearchParserError):
    def __init__(self, column: str) -> None:
        super().__init__(
            f"Searching by '{column}' field is forbidden. "
            "Check the configuration if this is not a desirable behavior."
        )
        self.column = column


class UnrecognizedOperatorError(SearchParserError):
    def __init__(self, argument: str) -> None:
        super().__init__(
            f"No valid callback registered for {argument}. Are you missing an operator?"
        )
        self.argument = argument


class MissingValueError(SearchParserError):
    def __init__(self, column: str) -> None:
        super().__init__(f"Column '{column}' is missing a value.")
        self.column = column


def _strip_operator(argument: str, operator: str) -> str:
    # Only the detected occurrence is removed; values may legitimately contain the token.
    position = argument.index(operator)
    return argument[:position] + argument[position + len(operator):]


def parse_search_term(
        catalog: ColumnCatalog,
        operators: OperatorCatalog,
        column: str,
        argument: str,
        *,
        global_forbidden: Iterable[str] = (),
        cleaner: ValueCleaner = clean_values,
) -> QueryTerm:
    """Parse a single `(column, argument)` pair into a `QueryTerm`.

    Raises:
        InvalidColumnError: The column is empty or whitespace only.
        ForbiddenColumnError: The (resolved) column is forbidden globally or by the catalog.
        UnrecognizedOperatorError: No catalog operator occurs in the argument.
        MissingValueError: Nothing is left after operator removal and cleaning.
    """

    if not column.strip():
        raise InvalidColumnError(column)

    from_primary_key = catalog.is_primary_key(column)
    if from_primary_key:
        column = catalog.primary_column_name()

    if column in catalog.forbidden(global_forbidden):
        raise ForbiddenColumnError(column)

    operator = operators.detect(argument)
    if operator is None:
        raise UnrecognizedOperatorError(argument)

    values = [v for v in cleaner(split_values(_strip_operator(argument, operator))) if v]
    if not values:
        raise MissingValueError(column)

    term = QueryTerm(
        column=column,
        operator=operator,
        values=tuple(values),
        type=catalog.columns_with_types().get(column, GENERIC_TYPE),
        is_relation=RELATION_SEPARATOR in column and not from_primary_key,
    )
    logger.debug(
        "parsed column=%s operator=%s values=%d type=%s relation=%s",
        term.column,
        term.operator,
        len(term.values),
        term.type,
        term.is_relation,
    )
    return term


def parse_search_terms(
        catalog: ColumnCatalog,
        operators: OperatorCatalog,
        params: Mapping[str, str] | Iterable[tuple[str, str]],
        *,
        global_forbidden: Iterable[str] = (),
        cleaner: ValueCleaner = clean_values,
) -> list[QueryTerm]:
    """Parse every search parameter of a request, in order; the first invalid one aborts."""

    pairs = params.items() if isinstance(params, Mapping) else params
    if isinstance(global_forbidden, str):
        global_forbidden = (global_forbidden,)
    forbidden = tuple(global_forbidden)
    return [
        parse_search_term(
            catalog,
            operators,
            column,
            argument,
            global_forbidden=forbidden,
            cleaner=cleaner,
        )
        for column, argument in pairs
    ]
