from __future__ import annotations

import copy

from simulator.transition_table import Rule, TransitionTable
from simulator.validator import (
    COMPLETE_MESSAGE,
    INVALID_DIRECTION,
    INVALID_NEXT_STATE,
    INVALID_WRITE_SYMBOL,
    MISSING_DATA,
    MISSING_TRANSITION,
    validate,
)

STATES = ["q0", "q1"]
ALPHABET = ["_", "0", "1"]
ALL_STATES = STATES + ["halt", "reject"]


def full_table() -> TransitionTable:
    return TransitionTable({
        (state, symbol): (symbol, "halt", "R")
        for state in STATES
        for symbol in ALPHABET
    })


def test_complete_table() -> None:
    result = validate(full_table(), STATES, ALPHABET, ALL_STATES)
    assert result.complete
    assert bool(result)
    assert result.message == COMPLETE_MESSAGE


def test_missing_blank_rule_is_reported(flip_definition) -> None:
    flip_definition.table.discard(state="q0", symbol="_")

    result = flip_definition.validate()

    assert not result.complete
    assert (result.state, result.symbol, result.reason) == ("q0", "_", MISSING_TRANSITION)
    assert "q0" in result.message and "_" in result.message
    assert result.message.startswith("Missing transition")


def test_first_offender_follows_declaration_order() -> None:
    # Each single missing cell is reported as itself; with two holes the earlier one wins.
    for state in STATES:
        for symbol in ALPHABET:
            table = full_table()
            table.discard(state=state, symbol=symbol)
            result = validate(table, STATES, ALPHABET, ALL_STATES)
            assert (result.state, result.symbol) == (state, symbol)

    table = full_table()
    table.discard(state="q1", symbol="_")
    table.discard(state="q0", symbol="1")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert (result.state, result.symbol) == ("q0", "1")


def test_blank_is_checked_before_declared_symbols() -> None:
    table = full_table()
    table.discard(state="q0", symbol="0")
    table.discard(state="q0", symbol="_")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert result.symbol == "_"


def test_partial_rule_is_missing_data() -> None:
    table = full_table()
    table.transitions[("q0", "0")] = Rule(write="1")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert (result.state, result.symbol, result.reason) == ("q0", "0", MISSING_DATA)


def test_unknown_next_state_is_invalid() -> None:
    table = full_table()
    table.set("q1", "1", next_state="nowhere")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert (result.state, result.symbol, result.reason) == ("q1", "1", INVALID_NEXT_STATE)
    assert "nowhere" in result.message


def test_unknown_direction_is_invalid() -> None:
    table = full_table()
    table.set("q0", "_", direction="N")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert result.reason == INVALID_DIRECTION


def test_write_symbol_outside_alphabet_is_invalid() -> None:
    table = full_table()
    table.set("q1", "0", write="Z")
    result = validate(table, STATES, ALPHABET, ALL_STATES)
    assert (result.state, result.symbol, result.reason) == ("q1", "0", INVALID_WRITE_SYMBOL)


def test_validation_is_idempotent_and_read_only() -> None:
    table = full_table()
    table.discard(state="q1", symbol="0")
    before = copy.deepcopy(table.transitions)

    first = validate(table, STATES, ALPHABET, ALL_STATES)
    second = validate(table, STATES, ALPHABET, ALL_STATES)

    assert first == second
    assert table.transitions == before
