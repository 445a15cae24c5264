"""
Simulated draw surface.

Records every draw call in order and keeps a character grid of the last
flushed frame, so a frame can be inspected without a terminal.
"""

from tflap.hardware.base import Color, Surface


class RecordingSurface(Surface):
    """In-memory surface of width x height character cells."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.calls: list[tuple] = []
        self._col = 0
        self._row = 0
        self._color: Color | None = None
        self._cells = self._blank()
        self._colors: list[list[Color | None]] = self._blank_colors()
        self.frame: list[str] = ["".join(row) for row in self._cells]
        self.flush_count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _blank(self) -> list[list[str]]:
        return [[" "] * self._width for _ in range(self._height)]

    def _blank_colors(self) -> list[list[Color | None]]:
        return [[None] * self._width for _ in range(self._height)]

    def clear(self) -> None:
        self.calls.append(("clear",))
        self._cells = self._blank()
        self._colors = self._blank_colors()

    def move_to(self, col: int, row: int) -> None:
        self.calls.append(("move_to", col, row))
        self._col = col
        self._row = row

    def set_color(self, color: Color) -> None:
        self.calls.append(("set_color", color))
        self._color = color

    def print_text(self, text: str) -> None:
        self.calls.append(("print_text", text))
        if 0 <= self._row < self._height:
            for ch in text:
                if 0 <= self._col < self._width:
                    self._cells[self._row][self._col] = ch
                    self._colors[self._row][self._col] = self._color
                self._col += 1

    def reset_color(self) -> None:
        self.calls.append(("reset_color",))
        self._color = None

    def flush(self) -> None:
        self.calls.append(("flush",))
        self.frame = ["".join(row) for row in self._cells]
        self.flush_count += 1

    def char_at(self, col: int, row: int) -> str:
        """Character at a cell of the last flushed frame."""
        return self.frame[row][col]

    def color_at(self, col: int, row: int) -> Color | None:
        """Color the cell was last drawn with."""
        return self._colors[row][col]
