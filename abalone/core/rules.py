from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .board import STARTING_MARBLES, Board, CellState
from .geometry import Coordinate, Direction, line_span
from .moves import ACTION_VECTOR_SIZE, Move, decode_action
from .state import (
    DEFAULT_MARBLES_TO_WIN,
    DEFAULT_MAX_MOVES,
    GameResult,
    GameState,
)

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 3  # most marbles that move together
LINE_SCAN_LENGTH = 2 * MAX_LINE_LENGTH  # own run + pushed run + the cell beyond
MARBLE_REWARD = 0.1


def initialize_game_state(
    *,
    layout: str = "classic",
    max_moves: int = DEFAULT_MAX_MOVES,
    marbles_to_win: int = DEFAULT_MARBLES_TO_WIN,
) -> GameState:
    return GameState(
        board=Board.from_layout(layout),
        current_player=0,
        move_count=0,
        max_moves=max_moves,
        marbles_to_win=marbles_to_win,
        result=GameResult.ONGOING,
    )


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------
def is_valid_move(board: Board, move: Move, player: int) -> bool:
    """Return whether ``player`` may play ``move`` on ``board``.

    Never raises for malformed geometry; any failed check yields ``False``.
    """
    if not (board.in_bounds(move.start) and board.in_bounds(move.end)):
        return False
    own = CellState.for_player(player)
    if board.get(move.start) != own:
        return False
    if move.is_inline:
        return _is_valid_inline(board, move.start, move.direction, own)
    return _is_valid_slide(board, move, own)


def _run_length(line: List[CellState], start: int, state: CellState) -> int:
    length = 0
    while start + length < len(line) and line[start + length] == state:
        length += 1
    return length


def _is_valid_inline(board: Board, start: Coordinate, direction: Direction, own: CellState) -> bool:
    line = [board.get(start.step(direction, i)) for i in range(LINE_SCAN_LENGTH)]
    own_run = _run_length(line, 0, own)
    if own_run > MAX_LINE_LENGTH:
        return False
    ahead = line[own_run]
    if ahead == CellState.EMPTY:
        return True
    if ahead != own.opponent:
        return False
    # Sumito: the pushed line must be strictly shorter than the pushing one.
    pushed_run = _run_length(line, own_run, own.opponent)
    if pushed_run >= own_run:
        return False
    beyond = line[own_run + pushed_run]
    return beyond in (CellState.EMPTY, CellState.INVALID)


def _is_valid_slide(board: Board, move: Move, own: CellState) -> bool:
    span = line_span(move.end - move.start)
    if span is None:
        return False
    axis, length = span
    for i in range(length + 1):
        cell = move.start.step(axis, i)
        if board.get(cell) != own:
            return False
        if board.get(cell.step(move.direction)) != CellState.EMPTY:
            return False
    return True


# ----------------------------------------------------------------------
# Application
# ----------------------------------------------------------------------
def apply_move(board: Board, move: Move) -> None:
    """Play an already validated ``move`` on ``board`` in place."""
    if move.is_inline:
        _apply_inline(board, move.start, move.direction)
    else:
        _apply_slide(board, move)


def _apply_inline(board: Board, start: Coordinate, direction: Direction) -> None:
    carried = CellState.EMPTY
    cell = start
    while board.in_bounds(cell):
        current = board.get(cell)
        if current == CellState.INVALID:
            break
        board.set(cell.row, cell.col, carried)
        if current == CellState.EMPTY:
            return
        carried = current
        cell = cell.step(direction)
    # The carried marble left the playing area.


def _apply_slide(board: Board, move: Move) -> None:
    span = line_span(move.end - move.start)
    if span is None:
        return
    axis, length = span
    for i in range(length + 1):
        cell = move.start.step(axis, i)
        destination = cell.step(move.direction)
        board.set(destination.row, destination.col, board.get(cell))
        board.set(cell.row, cell.col, CellState.EMPTY)


# ----------------------------------------------------------------------
# Game flow
# ----------------------------------------------------------------------
def marble_counts(board: Board) -> Tuple[int, int]:
    return board.count(CellState.PLAYER_1), board.count(CellState.PLAYER_2)


def marbles_lost(state: GameState, player: int) -> int:
    return STARTING_MARBLES - state.marble_count(player)


def _threshold_loser(state: GameState) -> Optional[int]:
    for player in (0, 1):
        if marbles_lost(state, player) >= state.marbles_to_win:
            return player
    return None


def compute_returns(state: GameState) -> List[float]:
    """Per-player returns for ``state``.

    A decided game pays +1/-1. Otherwise the marble balance gives a shaping
    signal of 0.1 per marble, positive for the player who has lost fewer.
    """
    winner = state.winner
    if winner is not None:
        return [1.0, -1.0] if winner == 0 else [-1.0, 1.0]
    loser = _threshold_loser(state)
    if loser is not None:
        return [-1.0, 1.0] if loser == 0 else [1.0, -1.0]
    balance = marbles_lost(state, 1) - marbles_lost(state, 0)
    return [balance * MARBLE_REWARD, -balance * MARBLE_REWARD]


def apply_action(state: GameState, action: int, *, in_place: bool = False) -> GameState:
    """Play ``action`` for the current player.

    An illegal action forfeits the game: the opponent wins and the board is left
    untouched.
    """
    source_state = state if in_place else state.copy()
    if source_state.is_terminal:
        raise ValueError("Cannot apply action to a terminal state.")

    mover = source_state.current_player
    move = decode_action(action)
    if not is_valid_move(source_state.board, move, mover):
        logger.debug("Player %d forfeits with illegal action %d", mover, action)
        source_state.result = GameResult.win_for(1 - mover)
        return source_state

    apply_move(source_state.board, move)

    if marbles_lost(source_state, 1 - mover) >= source_state.marbles_to_win:
        logger.info("Player %d wins after %d moves", mover, source_state.move_count + 1)
        source_state.result = GameResult.win_for(mover)
        source_state.move_count += 1
        return source_state

    source_state.current_player = 1 - mover
    source_state.move_count += 1
    if source_state.move_count >= source_state.max_moves:
        logger.debug("Move limit %d reached", source_state.max_moves)
        source_state.result = GameResult.MOVE_LIMIT
    return source_state


def enumerate_legal_actions(state: GameState, player: Optional[int] = None) -> List[int]:
    if state.is_terminal:
        return []
    if player is None:
        player = state.current_player
    return [
        index
        for index in range(ACTION_VECTOR_SIZE)
        if is_valid_move(state.board, decode_action(index), player)
    ]


def legal_action_mask(state: GameState) -> np.ndarray:
    mask = np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
    mask[enumerate_legal_actions(state)] = 1
    return mask
