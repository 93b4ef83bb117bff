from simulator.transition_table import LEFT, RIGHT, STAY

BLANK_SYMBOL = "_"
TRAILING_BLANKS = 3

MOVES = {LEFT: -1, RIGHT: 1, STAY: 0}


class Tape:
    """Finite list of cells standing in for a two-way infinite tape of blanks."""

    def __init__(self, cells=None, blank=BLANK_SYMBOL):
        self.blank = blank
        self._cells = list(cells) if cells else []

    @classmethod
    def from_input(cls, text, blank=BLANK_SYMBOL):
        # One leading blank, the trimmed input, then a few blanks of headroom.
        return cls([blank] + list(text.strip()) + [blank] * TRAILING_BLANKS, blank=blank)

    @property
    def cells(self):
        return list(self._cells)

    def read(self, head):
        if 0 <= head < len(self._cells):
            return self._cells[head]
        return self.blank

    def write(self, head, symbol):
        if head < 0:
            raise ValueError(f"Cannot write at negative head position {head}")
        while head >= len(self._cells):
            self._cells.append(self.blank)
        self._cells[head] = symbol

    def move_and_grow(self, head, direction):
        """Return the head after moving; grows the tape by at most one blank cell."""
        if direction not in MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")

        head += MOVES[direction]
        if head < 0:
            self._cells.insert(0, self.blank)
            return 0
        if head >= len(self._cells):
            self._cells.append(self.blank)
        return head

    def window(self, head, radius=10):
        """Cells around the head as (position, symbol) pairs, blanks beyond the extent."""
        return [(pos, self.read(pos)) for pos in range(head - radius, head + radius + 1)]

    def __len__(self):
        return len(self._cells)

    def __str__(self):
        return "".join(self._cells)
