from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple


class Direction(IntEnum):
    """The six hex directions, in counterclockwise order."""

    RIGHT = 0
    UP_RIGHT = 1
    UP_LEFT = 2
    LEFT = 3
    DOWN_LEFT = 4
    DOWN_RIGHT = 5

    def rotated(self, steps: int) -> "Direction":
        return Direction((int(self) + steps) % NUM_DIRECTIONS)

    @property
    def opposite(self) -> "Direction":
        return self.rotated(3)


NUM_DIRECTIONS = len(Direction)


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.row + other.row, self.col + other.col)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.row - other.row, self.col - other.col)

    def scaled(self, factor: int) -> "Coordinate":
        return Coordinate(self.row * factor, self.col * factor)

    def step(self, direction: Direction, times: int = 1) -> "Coordinate":
        return self + OFFSETS[direction].scaled(times)


# (row, col) deltas; row 0 is the top of the board.
OFFSETS: Tuple[Coordinate, ...] = (
    Coordinate(0, 1),  # RIGHT
    Coordinate(-1, 1),  # UP_RIGHT
    Coordinate(-1, 0),  # UP_LEFT
    Coordinate(0, -1),  # LEFT
    Coordinate(1, -1),  # DOWN_LEFT
    Coordinate(1, 0),  # DOWN_RIGHT
)

# Slide axes for an in-line direction D: (D+1, D+2).
SISTERS: Tuple[Tuple[Direction, Direction], ...] = tuple(
    (direction.rotated(1), direction.rotated(2)) for direction in Direction
)

_DIRECTION_BY_OFFSET: Dict[Coordinate, Direction] = {
    offset: Direction(index) for index, offset in enumerate(OFFSETS)
}


def offset(direction: Direction) -> Coordinate:
    return OFFSETS[direction]


def sisters(direction: Direction) -> Tuple[Direction, Direction]:
    return SISTERS[direction]


def direction_for_offset(delta: Coordinate) -> Optional[Direction]:
    """Return the direction whose unit offset equals ``delta``, if any."""
    return _DIRECTION_BY_OFFSET.get(delta)


def line_span(delta: Coordinate) -> Optional[Tuple[Direction, int]]:
    """Split ``delta`` into a direction and a length of 1 or 2 steps.

    Returns ``None`` when ``delta`` is not a straight line along one of the six
    directions.
    """
    for length in (1, 2):
        if delta.row % length or delta.col % length:
            continue
        direction = direction_for_offset(Coordinate(delta.row // length, delta.col // length))
        if direction is not None:
            return direction, length
    return None
