"""Operator catalog.

Operators are matched as plain substrings of the argument, in catalog order, and the first match
wins. A token that contains an earlier token is therefore unreachable (`<` listed before `<=` makes
`<=` dead), so catalogs keep longer tokens ahead of the shorter ones they contain.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_OPERATORS: tuple[str, ...] = (
    "!<>",  # not between
    "<>",  # between
    "!=",
    "<=",
    ">=",
    "=",
    "<",
    ">",
)


@dataclass(frozen=True)
class ShadowedOperator:
    """`shadowed` can never be selected because `by` comes first and is contained in it."""

    by: str
    shadowed: str


@dataclass(frozen=True)
class OperatorCatalog:
    """Ordered operator tokens recognized by the parser."""

    tokens: tuple[str, ...] = DEFAULT_OPERATORS

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ValueError("operator catalog must not be empty")
        if any(not token for token in self.tokens):
            raise ValueError("operator tokens must be non-empty")
        if len(set(self.tokens)) != len(self.tokens):
            raise ValueError("operator tokens must be unique")

    @classmethod
    def longest_first(cls, tokens: Iterable[str]) -> OperatorCatalog:
        """Build a catalog ordered by descending token length (ties broken alphabetically)."""

        return cls(tokens=tuple(sorted(tokens, key=lambda t: (-len(t), t))))

    def ordered_operator_tokens(self) -> tuple[str, ...]:
        return self.tokens

    def detect(self, argument: str) -> str | None:
        """Return the first token (catalog order) occurring anywhere in `argument`."""

        for token in self.tokens:
            if token in argument:
                return token
        return None

    def shadowed_tokens(self) -> list[ShadowedOperator]:
        """List every token made unreachable by an earlier token it contains."""

        found: list[ShadowedOperator] = []
        for index, later in enumerate(self.tokens):
            for earlier in self.tokens[:index]:
                if earlier in later:
                    found.append(ShadowedOperator(by=earlier, shadowed=later))
                    break
        return found
