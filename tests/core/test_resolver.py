from __future__ import annotations

import pytest

from lascss_intellisense.core.resolver import MAX_RESOLVE_DEPTH, resolve_var

TABLE = {
    "las-color-red-500": "#ef4444",
    "las-color-brand": "var(--las-color-red-500)",
    "las-color-accent": "var(--las-color-brand)",
    "las-shadow": "0 1px var(--las-color-red-500)",
    "las-color-unset": "var(--las-color-nowhere)",
    "loop-a": "var(--loop-b)",
    "loop-b": "var(--loop-a)",
    "loop-x": "var(--loop-y)",
    "loop-y": "var(--loop-z)",
    "loop-z": "var(--loop-x)",
}


def test_literal_is_trimmed() -> None:
    assert resolve_var("  #fff  ", TABLE) == "#fff"


def test_empty_value_is_returned() -> None:
    assert resolve_var("", TABLE) == ""


def test_known_reference_is_substituted() -> None:
    assert resolve_var("var(--las-color-red-500)", TABLE) == "#ef4444"


def test_chained_references_are_followed() -> None:
    assert resolve_var("var(--las-color-accent)", TABLE) == "#ef4444"


def test_reference_inside_larger_value() -> None:
    assert resolve_var("var(--las-shadow)", TABLE) == "0 1px #ef4444"


def test_fallback_used_for_unknown_name() -> None:
    assert resolve_var("var(--missing, #123456)", TABLE) == "#123456"


def test_unknown_name_without_fallback_is_left_as_is() -> None:
    assert resolve_var("var(--missing)", TABLE) == "var(--missing)"


def test_chain_ending_at_unknown_name_returns_partial_resolution() -> None:
    table = {"x": "var(--y)", "y": "1px var(--unknown)"}
    assert resolve_var("var(--x)", {"x": "var(--unknown)"}) == "var(--unknown)"
    assert resolve_var(" var(--x) ", table) == "1px var(--unknown)"
    assert resolve_var(resolve_var("var(--x)", table), table) == "1px var(--unknown)"


@pytest.mark.parametrize("start", ["var(--loop-a)", "var(--loop-x)"])
def test_cycle_terminates_with_a_string(start: str) -> None:
    result = resolve_var(start, TABLE)
    assert isinstance(result, str)
    assert result == start


def test_chain_within_depth_limit_resolves() -> None:
    table = {f"n{i}": f"var(--n{i + 1})" for i in range(1, MAX_RESOLVE_DEPTH)}
    table[f"n{MAX_RESOLVE_DEPTH}"] = "#abcdef"
    assert resolve_var("var(--n1)", table) == "#abcdef"


def test_chain_beyond_depth_limit_is_returned_unresolved() -> None:
    table = {f"n{i}": f"var(--n{i + 1})" for i in range(1, MAX_RESOLVE_DEPTH + 1)}
    table[f"n{MAX_RESOLVE_DEPTH + 1}"] = "#abcdef"
    assert resolve_var("var(--n1)", table) == "var(--n1)"


@pytest.mark.parametrize(
    "value",
    [
        "#fff",
        " var(--las-color-accent) ",
        "var(--missing)",
        "var(--missing, 1px)",
        "var(--loop-a)",
        "var(--loop-x)",
        "0 1px var(--las-color-brand)",
        "var(--las-color-unset)",
    ],
)
def test_resolution_is_idempotent(value: str) -> None:
    once = resolve_var(value, TABLE)
    assert resolve_var(once, TABLE) == once
