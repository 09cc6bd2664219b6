from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Direction(Enum):
    """Cursor movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0


class LineBuffer:
    """Ordered lines of bytes plus the cursor where the next edit applies.

    Invariants kept by every operation:
    - there is always at least one line
    - 0 <= cursor.row < len(lines)
    - 0 <= cursor.col <= len(lines[cursor.row])

    Columns are byte offsets. Accessors hand out immutable copies; the
    buffer is the only owner of the mutable line storage.
    """

    def __init__(self, lines: Optional[Iterable[bytes]] = None):
        self._lines: list[bytearray] = [bytearray(line) for line in lines or ()]
        if not self._lines:
            self._lines = [bytearray()]
        self._row = 0
        self._col = 0

    @property
    def lines(self) -> list[bytes]:
        return [bytes(line) for line in self._lines]

    @property
    def cursor(self) -> CursorPosition:
        return CursorPosition(self._row, self._col)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> bytes:
        return bytes(self._lines[row])

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def iter_lines(self) -> Iterator[bytes]:
        """Yield the stored lines in order, without copying them."""
        yield from self._lines

    def set_cursor(self, row: int, col: int) -> None:
        """Place the cursor, clamping it into the valid range."""
        self._row = max(0, min(row, len(self._lines) - 1))
        self._col = max(0, min(col, len(self._lines[self._row])))

    def insert_char(self, ch: int) -> None:
        """Insert the byte ch at the cursor and advance past it."""
        self._lines[self._row].insert(self._col, ch)
        self._col += 1

    def insert_newline(self) -> None:
        """Split the current line at the cursor; the cursor starts the new line."""
        current = self._lines[self._row]
        tail = current[self._col:]
        del current[self._col:]
        self._lines.insert(self._row + 1, tail)
        self._row += 1
        self._col = 0

    def delete_backward(self) -> None:
        """Delete the byte before the cursor, joining lines at column 0."""
        if self._col > 0:
            del self._lines[self._row][self._col - 1]
            self._col -= 1
        elif self._row > 0:
            removed = self._lines.pop(self._row)
            self._row -= 1
            previous = self._lines[self._row]
            self._col = len(previous)
            previous.extend(removed)

    def move(self, direction: Direction) -> None:
        """Move the cursor one step. Horizontal moves do not wrap between lines."""
        if direction is Direction.LEFT:
            if self._col > 0:
                self._col -= 1
        elif direction is Direction.RIGHT:
            if self._col < len(self._lines[self._row]):
                self._col += 1
        elif direction is Direction.UP:
            if self._row > 0:
                self._row -= 1
            self._clamp_col()
        elif direction is Direction.DOWN:
            if self._row < len(self._lines) - 1:
                self._row += 1
            self._clamp_col()

    def _clamp_col(self):
        self._col = min(self._col, len(self._lines[self._row]))
