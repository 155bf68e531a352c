import pytest

from simulator.tape import BLANK, Move, Tape


def test_reads_input_from_position_zero():
    tape = Tape("0101")
    assert tape.head == 0
    assert tape.read() == "0"
    tape.move_head(Move.RIGHT)
    assert tape.read() == "1"


def test_empty_tape_reads_blank():
    tape = Tape("")
    assert tape.read() == BLANK
    snapshot = tape.snapshot()
    assert snapshot.symbols == (BLANK,)
    assert snapshot.head == 0


@pytest.mark.parametrize("moves", [
    [],
    [Move.LEFT],
    [Move.LEFT, Move.LEFT, Move.LEFT],
    [Move.RIGHT] * 7,
    [Move.RIGHT, Move.STAY, Move.LEFT, Move.LEFT],
])
def test_write_then_read_after_any_moves(moves):
    tape = Tape("abc")
    for move in moves:
        tape.move_head(move)
    tape.write("z")
    assert tape.read() == "z"


def test_moving_left_from_zero_extends_with_blank():
    tape = Tape("1")
    tape.move_head(Move.LEFT)
    assert tape.head == -1
    assert tape.read() == BLANK

    snapshot = tape.snapshot()
    assert snapshot.symbols == (BLANK, "1")
    assert snapshot.origin == -1
    assert snapshot.head == 0
    assert snapshot.position == -1


def test_moving_right_past_end_extends_with_blank():
    tape = Tape("1")
    tape.move_head(Move.RIGHT)
    tape.move_head(Move.RIGHT)
    assert tape.head == 2
    assert tape.read() == BLANK
    assert tape.snapshot().text == "1" + BLANK + BLANK


def test_stay_keeps_head_and_window():
    tape = Tape("ab")
    tape.move_head(Move.STAY)
    assert tape.head == 0
    assert len(tape) == 2


def test_earlier_cells_keep_their_symbols():
    tape = Tape("")
    tape.write("1")
    tape.move_head(Move.LEFT)
    assert tape.read() == BLANK
    tape.move_head(Move.RIGHT)
    assert tape.read() == "1"


def test_snapshot_is_a_copy():
    tape = Tape("ab")
    snapshot = tape.snapshot()
    tape.write("x")
    assert snapshot.text == "ab"
    assert tape.snapshot().text == "xb"


def test_snapshot_has_no_padding_beyond_touched_cells():
    tape = Tape("ab")
    tape.move_head(Move.LEFT)
    tape.move_head(Move.RIGHT)
    assert tape.snapshot().range == (-1, 2)


def test_custom_blank():
    tape = Tape("", blank="#")
    tape.move_head(Move.LEFT)
    assert tape.read() == "#"


def test_snapshot_symbol_at_outside_window_is_blank():
    snapshot = Tape("ab").snapshot()
    assert snapshot.symbol_at(1) == "b"
    assert snapshot.symbol_at(-5) == BLANK
    assert snapshot.symbol_at(10, blank="#") == "#"


def test_visualize_marks_head():
    tape = Tape("abc")
    tape.move_head(Move.RIGHT)
    assert tape.snapshot().visualize() == "a b c\n  ^"


@pytest.mark.parametrize("text, move", [("l", Move.LEFT), ("R", Move.RIGHT), (" s ", Move.STAY)])
def test_move_parse(text, move):
    assert Move.parse(text) is move


def test_move_parse_rejects_unknown():
    with pytest.raises(ValueError):
        Move.parse("U")
