from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import BoardIndexError, ConfigurationError, InvalidCellError
from .geometry import Coordinate

BOARD_SIZE = 9
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
STARTING_MARBLES = 14

BoardArray = NDArray[np.int8]


class CellState(IntEnum):
    INVALID = -2
    EMPTY = -1
    PLAYER_1 = 0
    PLAYER_2 = 1

    @staticmethod
    def for_player(player: int) -> "CellState":
        if player not in (0, 1):
            raise ValueError(f"Invalid player id {player}")
        return CellState(player)

    @property
    def is_marble(self) -> bool:
        return self in (CellState.PLAYER_1, CellState.PLAYER_2)

    @property
    def opponent(self) -> "CellState":
        if not self.is_marble:
            raise ValueError(f"{self.name} has no opponent")
        return CellState.PLAYER_2 if self == CellState.PLAYER_1 else CellState.PLAYER_1

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: Dict[CellState, str] = {
    CellState.INVALID: " ",
    CellState.EMPTY: ".",
    CellState.PLAYER_1: "1",
    CellState.PLAYER_2: "2",
}

_LAYOUT_CHARS: Dict[str, CellState] = {
    "X": CellState.INVALID,
    ".": CellState.EMPTY,
    "1": CellState.PLAYER_1,
    "2": CellState.PLAYER_2,
}

ROW_LETTERS = "ihgfedcba"  # grid row 0 is the top row "i"

# The hexagon is stored in a square grid; "X" marks the unused corners.
#
#   I     2 2 2 2 2             I X X X X 2 2 2 2 2
#   H    2 2 2 2 2 2            H X X X 2 2 2 2 2 2
#   G   . . 2 2 2 . .           G X X . . 2 2 2 . .
#   F  . . . . . . . .          F X . . . . . . . .
#   E . . . . . . . . .         E . . . . . . . . .
#   D  . . . . . . . . \9       D . . . . . . . . X
#   C   . . 1 1 1 . . \8        C . . 1 1 1 . . X X
#   B    1 1 1 1 1 1 \7         B 1 1 1 1 1 1 X X X
#   A     1 1 1 1 1 \6          A 1 1 1 1 1 X X X X
#          \1\2\3\4\5             1 2 3 4 5 6 7 8 9
VALID_BOARD: Tuple[str, ...] = (
    "XXXX.....",
    "XXX......",
    "XX.......",
    "X........",
    ".........",
    "........X",
    ".......XX",
    "......XXX",
    ".....XXXX",
)

CLASSIC: Tuple[str, ...] = (
    "XXXX22222",
    "XXX222222",
    "XX..222..",
    "X........",
    ".........",
    "........X",
    "..111..XX",
    "111111XXX",
    "11111XXXX",
)

# https://abaloneonline.wordpress.com/variations/the-classics/
BELGIAN_DAISY: Tuple[str, ...] = (
    "XXXX22.11",
    "XXX222111",
    "XX.22.11.",
    "X........",
    ".........",
    "........X",
    ".11.22.XX",
    "111222XXX",
    "11.22XXXX",
)

LAYOUTS: Dict[str, Tuple[str, ...]] = {
    "classic": CLASSIC,
    "belgian_daisy": BELGIAN_DAISY,
}


def _parse_rows(rows: Sequence[str]) -> BoardArray:
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ConfigurationError(f"Layout must be {BOARD_SIZE} rows of {BOARD_SIZE} cells.")
    cells = np.empty((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            try:
                cells[r, c] = _LAYOUT_CHARS[char]
            except KeyError:
                raise ConfigurationError(f"Unknown layout character {char!r} at ({r}, {c}).") from None
    return cells


_VALID_MASK = _parse_rows(VALID_BOARD) != CellState.INVALID


class Board:
    """Square grid holding the hexagonal Abalone board.

    Cells outside the hexagon are ``CellState.INVALID`` and stay that way for the
    lifetime of the board. ``at``/``set`` are bounds-checked and raise
    ``BoardIndexError``; ``get`` is meant for line scans and reads anything
    outside the grid as ``INVALID``.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: BoardArray) -> None:
        if cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ConfigurationError(f"Board must have shape ({BOARD_SIZE}, {BOARD_SIZE}).")
        if not np.array_equal(cells != CellState.INVALID, _VALID_MASK):
            raise ConfigurationError("Board does not match the hexagonal cell mask.")
        self.cells = cells.astype(np.int8, copy=False)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        return cls(_parse_rows(rows))

    @classmethod
    def from_layout(cls, name: str = "classic") -> "Board":
        try:
            rows = LAYOUTS[name]
        except KeyError:
            raise ConfigurationError(f"Unknown layout {name!r}; expected one of {sorted(LAYOUTS)}.") from None
        return cls.from_rows(rows)

    @classmethod
    def empty(cls) -> "Board":
        return cls.from_rows(VALID_BOARD)

    @staticmethod
    def in_bounds(coord: Coordinate) -> bool:
        return 0 <= coord.row < BOARD_SIZE and 0 <= coord.col < BOARD_SIZE

    def at(self, row: int, col: int) -> CellState:
        self._check_bounds(row, col)
        return CellState(int(self.cells[row, col]))

    def get(self, coord: Coordinate) -> CellState:
        if not self.in_bounds(coord):
            return CellState.INVALID
        return CellState(int(self.cells[coord.row, coord.col]))

    def set(self, row: int, col: int, state: CellState) -> None:
        self._check_bounds(row, col)
        if state == CellState.INVALID or self.cells[row, col] == CellState.INVALID:
            raise InvalidCellError(f"Cannot change the Invalid mask at ({row}, {col}).")
        self.cells[row, col] = state

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def to_list(self) -> List[List[int]]:
        return self.cells.tolist()

    def render(self) -> str:
        lines = []
        for r in range(BOARD_SIZE):
            cols = np.flatnonzero(_VALID_MASK[r])
            line = f"<{ROW_LETTERS[r]}>" + " " * (2 * abs(BOARD_SIZE // 2 - r))
            line += "".join("   " + CellState(int(self.cells[r, c])).symbol for c in cols)
            if r > BOARD_SIZE // 2:
                line += f"  <{cols[-1] + 2}>"
            lines.append(line)
        lines.append(" " * 15 + " ".join(f"<{c + 1}>" for c in range(BOARD_SIZE // 2 + 1)))
        return "\n".join(lines)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise BoardIndexError(f"Cell ({row}, {col}) is outside the {BOARD_SIZE}x{BOARD_SIZE} grid.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return "Board(\n" + "\n".join("".join(_row_chars(row)) for row in self.cells) + "\n)"


def _row_chars(row: np.ndarray) -> Iterator[str]:
    for value in row:
        state = CellState(int(value))
        yield "X" if state == CellState.INVALID else state.symbol
