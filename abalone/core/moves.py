from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .board import BOARD_SIZE
from .geometry import NUM_DIRECTIONS, Coordinate, Direction, line_span, offset, sisters


class MoveKind(IntEnum):
    INLINE = 0
    SLIDE2_FRONT = 1
    SLIDE2_BACK = 2
    SLIDE3_FRONT = 3
    SLIDE3_BACK = 4


NUM_MOVE_KINDS = len(MoveKind)
ACTIONS_PER_CELL = NUM_DIRECTIONS * NUM_MOVE_KINDS
ACTION_VECTOR_SIZE = BOARD_SIZE * BOARD_SIZE * ACTIONS_PER_CELL


@dataclass(frozen=True)
class Move:
    """A move from ``start`` in ``direction``.

    In-line moves have ``end == start + offset(direction)``; the number of
    marbles moved follows from the board. Any other ``end`` marks a slide whose
    marbles lie on the line from ``start`` to ``end``.
    """

    direction: Direction
    start: Coordinate
    end: Coordinate

    @property
    def is_inline(self) -> bool:
        return self.end == self.start.step(self.direction)

    def __str__(self) -> str:
        return move_to_string(self)


def _slide_parts(kind: MoveKind, direction: Direction) -> Tuple[Direction, int]:
    front, back = sisters(direction)
    axis = front if kind in (MoveKind.SLIDE2_FRONT, MoveKind.SLIDE3_FRONT) else back
    length = 1 if kind in (MoveKind.SLIDE2_FRONT, MoveKind.SLIDE2_BACK) else 2
    return axis, length


def move_kind(move: Move) -> Optional[MoveKind]:
    """Classify ``move`` into one of the five encodable kinds."""
    if move.is_inline:
        return MoveKind.INLINE
    for kind in list(MoveKind)[1:]:
        axis, length = _slide_parts(kind, move.direction)
        if move.end == move.start.step(axis, length):
            return kind
    return None


def decode_action(index: int) -> Move:
    """Turn an action id into a move.

    Never raises: ids outside ``[0, ACTION_VECTOR_SIZE)`` decode to a start
    cell off the grid, which validation rejects.
    """
    remains, kind = divmod(int(index), NUM_MOVE_KINDS)
    remains, direction_index = divmod(remains, NUM_DIRECTIONS)
    row, col = divmod(remains, BOARD_SIZE)
    direction = Direction(direction_index)
    start = Coordinate(row, col)
    if kind == MoveKind.INLINE:
        end = start.step(direction)
    else:
        axis, length = _slide_parts(MoveKind(kind), direction)
        end = start.step(axis, length)
    return Move(direction, start, end)


def encode_action(move: Move) -> int:
    kind = move_kind(move)
    if kind is None:
        raise ValueError(f"Move {move!r} matches no encodable move kind.")
    index = move.start.row * BOARD_SIZE + move.start.col
    index = index * NUM_DIRECTIONS + int(move.direction)
    return index * NUM_MOVE_KINDS + int(kind)


# ----------------------------------------------------------------------
# Notation: "<row letter><column digit>" per cell, rows a (bottom) to i (top)
# ----------------------------------------------------------------------
def coordinate_to_string(coord: Coordinate) -> str:
    # Character arithmetic keeps off-grid cells formattable.
    return chr(ord("a") + BOARD_SIZE - 1 - coord.row) + chr(ord("1") + coord.col)


def string_to_coordinate(text: str) -> Optional[Coordinate]:
    if len(text) != 2:
        return None
    row = BOARD_SIZE - 1 - (ord(text[0]) - ord("a"))
    col = ord(text[1]) - ord("1")
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    return Coordinate(row, col)


def move_to_string(move: Move) -> str:
    """Format ``move`` as "b2c3" (in-line) or "c3d4c4" (slide).

    Slides list the line's start and end, then the cell the start marble moves
    to.
    """
    text = coordinate_to_string(move.start) + coordinate_to_string(move.end)
    if not move.is_inline:
        text += coordinate_to_string(move.start + offset(move.direction))
    return text


def parse_move(text: str) -> Optional[Move]:
    """Parse move notation; return ``None`` when ``text`` is malformed."""
    if len(text) not in (4, 6):
        return None
    text = text.lower()
    start = string_to_coordinate(text[0:2])
    second = string_to_coordinate(text[2:4])
    if start is None or second is None:
        return None

    if len(text) == 4:
        span = line_span(second - start)
        if span is None or span[1] != 1:
            return None
        return Move(span[0], start, second)

    target = string_to_coordinate(text[4:6])
    if target is None:
        return None
    moved = line_span(target - start)
    line = line_span(second - start)
    if moved is None or moved[1] != 1 or line is None:
        return None
    direction = moved[0]
    axis, length = line
    if axis in sisters(direction):
        return Move(direction, start, second)
    # The line was written from the other end; restate it from there.
    if axis.opposite in sisters(direction):
        return Move(direction, second, start)
    return None
