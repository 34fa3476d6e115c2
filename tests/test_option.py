"""Tests for the Option chaining helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

from linkpreview.scraper.option import Option


def test_map_and_bind_on_present_value() -> None:
    out = Option.of(" a ").map(str.strip).bind(lambda s: Option.of(s.upper()))
    assert out.get() == "A"


def test_empty_short_circuits_remaining_steps() -> None:
    step = MagicMock()
    assert Option.empty().map(step).bind(step).get() is None
    step.assert_not_called()


def test_map_returning_none_empties_the_chain() -> None:
    assert not Option.of({"a": 1}).map(lambda d: d.get("missing"))


def test_or_else_is_lazy() -> None:
    fallback = MagicMock(return_value=Option.of("fallback"))
    assert Option.of("first").or_else(fallback).get() == "first"
    fallback.assert_not_called()
    assert Option.empty().or_else(fallback).get() == "fallback"


def test_empty_string_is_a_present_value() -> None:
    option = Option.of("")
    assert option.is_present
    assert option.get() == ""


def test_equality_and_repr() -> None:
    assert Option.of(1) == Option.of(1)
    assert Option.empty() == Option.of(None)
    assert repr(Option.empty()) == "Option.empty()"
    assert repr(Option.of("x")) == "Option.of('x')"
