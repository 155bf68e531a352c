from collections import deque
from enum import Enum
from typing import NamedTuple

BLANK = "_"


class Move(Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "S"

    @property
    def delta(self):
        return {"L": -1, "R": 1, "S": 0}[self.value]

    @classmethod
    def parse(cls, text):
        """'l', 'R', ... -> Move. Raises ValueError on anything else."""
        return cls(str(text).strip().upper())


class TapeSnapshot(NamedTuple):
    """Frozen copy of the materialized tape window."""
    symbols: tuple
    head: int       # offset of the head inside `symbols`
    origin: int     # logical position of symbols[0]

    @property
    def text(self):
        return "".join(self.symbols)

    @property
    def position(self):
        return self.origin + self.head

    @property
    def range(self):
        return self.origin, self.origin + len(self.symbols)

    def symbol_at(self, position, blank=BLANK):
        idx = position - self.origin
        if 0 <= idx < len(self.symbols):
            return self.symbols[idx]
        return blank

    def visualize(self):
        """Two lines: the cells, and a caret under the head."""
        tape_str = " ".join(self.symbols)
        head_str = "  " * self.head + "^"
        return f"{tape_str}\n{head_str}"


class Tape:
    """
    Two-way infinite tape.
    Cells live in a deque; `_origin` is the logical position of the leftmost
    materialized cell, so the head may go negative without index errors.
    The cell under the head is always materialized.
    """

    def __init__(self, content="", blank=BLANK):
        self.blank = blank
        self._cells = deque(content) or deque(blank)
        self._origin = 0
        self.head = 0

    def read(self):
        return self._cells[self.head - self._origin]

    def write(self, symbol):
        self._cells[self.head - self._origin] = symbol

    def move_head(self, move):
        self.head += move.delta
        if self.head < self._origin:
            self._cells.appendleft(self.blank)
            self._origin -= 1
        elif self.head - self._origin >= len(self._cells):
            self._cells.append(self.blank)

    def snapshot(self):
        return TapeSnapshot(tuple(self._cells), self.head - self._origin, self._origin)

    def __len__(self):
        return len(self._cells)

    def __repr__(self):
        return f"Tape({''.join(self._cells)!r}, head={self.head}, origin={self._origin})"
