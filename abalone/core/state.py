from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, CellState

NUM_PLAYERS = 2
DEFAULT_MAX_MOVES = 200  # a game shouldn't last longer than that
DEFAULT_MARBLES_TO_WIN = 6  # 6 in the standard game, 4 in blitz


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_1_WIN = "player_1_win"
    PLAYER_2_WIN = "player_2_win"
    MOVE_LIMIT = "move_limit"

    @staticmethod
    def win_for(player: int) -> "GameResult":
        return GameResult.PLAYER_1_WIN if player == 0 else GameResult.PLAYER_2_WIN

    @property
    def winner(self) -> Optional[int]:
        if self == GameResult.PLAYER_1_WIN:
            return 0
        if self == GameResult.PLAYER_2_WIN:
            return 1
        return None


@dataclass
class GameState:
    board: Board
    current_player: int = 0  # player 0 moves first
    move_count: int = 0
    max_moves: int = DEFAULT_MAX_MOVES
    marbles_to_win: int = DEFAULT_MARBLES_TO_WIN
    result: GameResult = GameResult.ONGOING

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            move_count=self.move_count,
            max_moves=self.max_moves,
            marbles_to_win=self.marbles_to_win,
            result=self.result,
        )

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING or self.move_count >= self.max_moves

    @property
    def winner(self) -> Optional[int]:
        return self.result.winner

    def marble_count(self, player: int) -> int:
        return self.board.count(CellState.for_player(player))

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player}, result={self.result}, moves={self.move_count})\n"
            f"{self.board.render()}"
        )
