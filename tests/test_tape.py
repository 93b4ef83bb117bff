from __future__ import annotations

import pytest

from simulator.tape import Tape


def test_from_input_pads_and_trims() -> None:
    tape = Tape.from_input("  01 ")
    assert tape.cells == ["_", "0", "1", "_", "_", "_"]


def test_from_empty_input() -> None:
    assert Tape.from_input("").cells == ["_", "_", "_", "_"]


def test_read_outside_extent_is_blank() -> None:
    tape = Tape(["a", "b"])
    assert tape.read(-3) == "_"
    assert tape.read(2) == "_"
    assert tape.read(1) == "b"


def test_write_past_end_pads_with_blanks() -> None:
    tape = Tape(["a"], blank="#")
    tape.write(3, "z")
    assert tape.cells == ["a", "#", "#", "z"]


def test_write_negative_head_is_an_error() -> None:
    with pytest.raises(ValueError):
        Tape(["a"]).write(-1, "b")


def test_left_past_start_prepends_one_blank() -> None:
    tape = Tape(["1", "0"])
    head = tape.move_and_grow(0, "L")

    assert head == 0
    assert len(tape) == 3
    assert tape.read(0) == "_"
    assert tape.read(1) == "1"


def test_right_past_end_appends_one_blank() -> None:
    tape = Tape(["1", "0"])
    head = tape.move_and_grow(1, "R")

    assert head == 2
    assert tape.cells == ["1", "0", "_"]


def test_stay_and_interior_moves_never_grow() -> None:
    tape = Tape(["a", "b", "c"])
    assert tape.move_and_grow(0, "S") == 0
    assert tape.move_and_grow(1, "L") == 0
    assert tape.move_and_grow(1, "R") == 2
    assert len(tape) == 3


def test_growth_is_at_most_one_cell_per_move() -> None:
    for direction in ("L", "R", "S"):
        for head in range(0, 4):
            tape = Tape(["a", "b", "c", "d"])
            before = tape.cells
            tape.move_and_grow(head, direction)
            assert len(tape) - len(before) in (0, 1)
            # Existing cells are never dropped, only shifted by a prepend
            assert "".join(before) in str(tape)


def test_unknown_direction_raises() -> None:
    with pytest.raises(ValueError):
        Tape(["a"]).move_and_grow(0, "X")


def test_window_covers_both_sides_of_head() -> None:
    tape = Tape(["a", "b"])
    assert tape.window(0, radius=1) == [(-1, "_"), (0, "a"), (1, "b")]
