from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

# Wordament tile values
LETTER_VALUES: dict[str, int] = {
    "a": 2, "b": 5, "c": 3, "d": 3, "e": 1, "f": 5, "g": 4, "h": 4, "i": 2,
    "j": 10, "k": 6, "l": 3, "m": 4, "n": 2, "o": 2, "p": 4, "q": 8, "r": 2,
    "s": 2, "t": 2, "u": 4, "v": 6, "w": 6, "x": 9, "y": 5, "z": 8,
}

# Neighbor order: NW, N, NE, W, E, SW, S, SE
ROW_DELTAS = (-1, -1, -1, 0, 0, 1, 1, 1)
COL_DELTAS = (-1, 0, 1, -1, 1, -1, 0, 1)


@dataclass(frozen=True)
class Cell:
    letter: str = "a"
    value: int = 0

    def __str__(self) -> str:
        return f"({self.letter}: {self.value})"


class Grid:
    """Fixed-size ``height x width`` board of lettered, valued cells.

    Every access is bounds-checked: an out-of-range row or column raises
    IndexError instead of wrapping around.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    @classmethod
    def from_letters(
        cls,
        rows: Sequence[Sequence[str]],
        values: Sequence[Sequence[int]] | None = None,
    ) -> Grid:
        """Build a grid from rows of letters, e.g. ``["ab", "cd"]``.

        Without ``values`` each cell scores its LETTER_VALUES entry.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All grid rows must have the same length")
        if values is not None and (
            len(values) != height or any(len(row) != width for row in values)
        ):
            raise ValueError(f"Values must form a {height}x{width} grid")

        grid = cls(width, height)
        for r, row in enumerate(rows):
            for c, letter in enumerate(row):
                letter = letter.lower()
                value = values[r][c] if values is not None else LETTER_VALUES.get(letter, 0)
                grid.set(letter, value, r, c)
        return grid

    def _check_bounds(self, row: int, col: int):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.height}x{self.width} grid")

    def set(self, letter: str, value: int, row: int, col: int):
        self._check_bounds(row, col)
        letter = letter.lower()
        if len(letter) != 1 or not "a" <= letter <= "z":
            raise ValueError(f"Cell letter must be a single a-z character, got {letter!r}")
        if value < 0:
            raise ValueError(f"Cell value must be non-negative, got {value}")
        self._cells[row][col] = Cell(letter, value)

    def get(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def neighbors(self, row: int, col: int) -> list[Cell | None]:
        """The 8 surrounding cells in NW, N, NE, W, E, SW, S, SE order.

        Slots that fall off the board are None. Index ``i`` pairs with
        ``ROW_DELTAS[i]`` / ``COL_DELTAS[i]``.
        """
        self._check_bounds(row, col)
        result: list[Cell | None] = []
        for dr, dc in zip(ROW_DELTAS, COL_DELTAS):
            r, c = row + dr, col + dc
            if 0 <= r < self.height and 0 <= c < self.width:
                result.append(self._cells[r][c])
            else:
                result.append(None)
        return result

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def __str__(self) -> str:
        return "\n".join("| " + " | ".join(str(cell) for cell in row) + " |" for row in self._cells)
