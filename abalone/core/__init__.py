"""Core game logic for the Abalone engine."""

from .board import BOARD_SIZE, STARTING_MARBLES, Board, CellState
from .errors import (
    AbaloneError,
    BoardIndexError,
    ConfigurationError,
    IllegalActionError,
    InvalidCellError,
)
from .geometry import OFFSETS, SISTERS, Coordinate, Direction
from .moves import (
    ACTION_VECTOR_SIZE,
    Move,
    MoveKind,
    decode_action,
    encode_action,
    move_kind,
    move_to_string,
    parse_move,
)
from .rules import (
    apply_action,
    apply_move,
    compute_returns,
    enumerate_legal_actions,
    initialize_game_state,
    is_valid_move,
    legal_action_mask,
    marble_counts,
    marbles_lost,
)
from .state import GameResult, GameState

__all__ = [
    "GameState",
    "GameResult",
    "Board",
    "CellState",
    "Coordinate",
    "Direction",
    "Move",
    "MoveKind",
    "OFFSETS",
    "SISTERS",
    "ACTION_VECTOR_SIZE",
    "BOARD_SIZE",
    "STARTING_MARBLES",
    "AbaloneError",
    "BoardIndexError",
    "ConfigurationError",
    "IllegalActionError",
    "InvalidCellError",
    "apply_action",
    "apply_move",
    "compute_returns",
    "decode_action",
    "encode_action",
    "enumerate_legal_actions",
    "initialize_game_state",
    "is_valid_move",
    "legal_action_mask",
    "marble_counts",
    "marbles_lost",
    "move_kind",
    "move_to_string",
    "parse_move",
]
