from __future__ import annotations

import pytest

from simulator.transition_table import Rule, TransitionTable, upsert_rule


def test_lookup_of_missing_key_returns_none() -> None:
    table = TransitionTable()
    assert table.rule("q0", "0") is None
    assert ("q0", "0") not in table


def test_first_partial_set_fills_defaults() -> None:
    table = TransitionTable()
    rule = table.set("q0", "0", write="1")

    assert rule == Rule(write="1", next_state="", direction="R")
    assert not rule.is_filled()


def test_later_sets_only_touch_supplied_fields() -> None:
    table = TransitionTable()
    table.set("q0", "0", write="1", direction="L")
    table.set("q0", "0", next_state="q1")
    table.set("q0", "0", write=None)

    assert table.rule("q0", "0") == Rule(write="1", next_state="q1", direction="L")
    assert len(table) == 1


def test_upsert_rule_returns_the_same_table() -> None:
    table = TransitionTable()
    assert upsert_rule(table, "q0", "_", next_state="halt") is table
    assert table.rule("q0", "_").next_state == "halt"


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValueError):
        TransitionTable().set("q0", "0", colour="red")


def test_rename_state_rekeys_and_retargets() -> None:
    table = TransitionTable({
        ("q0", "0"): ("1", "q1", "R"),
        ("q1", "0"): ("0", "q1", "L"),
    })
    table.rename_state("q1", "q9")

    assert table.rule("q1", "0") is None
    assert table.rule("q9", "0") == Rule("0", "q9", "L")
    assert table.rule("q0", "0").next_state == "q9"


def test_rename_symbol_rekeys_and_rewrites() -> None:
    table = TransitionTable({("q0", "0"): ("0", "q0", "R")})
    table.rename_symbol("0", "A")

    assert table.rule("q0", "0") is None
    assert table.rule("q0", "A") == Rule("A", "q0", "R")


def test_discard_and_rows() -> None:
    table = TransitionTable({
        ("q0", "0"): ("1", "q0", "R"),
        ("q0", "1"): ("1", "q0", "R"),
        ("q1", "0"): ("1", "q0", "R"),
    })
    table.discard(symbol="1")

    rows = table.rows(["q0", "q1"], ["0", "1"])
    assert rows[0][0] == Rule("1", "q0", "R")
    assert rows[0][1] is None
    assert rows[1][1] is None


def test_compact_marks_empty_fields() -> None:
    assert Rule("1", "q0", "L").compact() == "1Lq0"
    assert Rule().compact() == "?R?"
