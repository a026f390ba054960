"""Tests for search value cleaning."""

from __future__ import annotations

from src.search.normalize import clean_value, clean_values, split_values


def test_clean_value_strips_whitespace_and_quotes() -> None:
    assert clean_value("  John ") == "John"
    assert clean_value('"John Doe"') == "John Doe"
    assert clean_value("' padded '") == "padded"
    assert clean_value('"unbalanced') == '"unbalanced'
    assert clean_value("O'Brien") == "O'Brien"
    assert clean_value('"') == '"'


def test_clean_values_drops_empty_and_keeps_order() -> None:
    assert clean_values(["b", " ", "", "a", '""', "0"]) == ["b", "a", "0"]


def test_split_values_on_semicolon() -> None:
    assert split_values("a;b;;c") == ["a", "b", "", "c"]
    assert split_values("") == [""]
