"""Two-player game contract: a game descriptor and the states it creates."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from abalone.config import GameConfig
from abalone.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    GameState,
    apply_action,
    compute_returns,
    decode_action,
    encode_action,
    enumerate_legal_actions,
    is_valid_move,
    move_to_string,
    parse_move,
)
from abalone.core.state import NUM_PLAYERS
from abalone.features import BOARD_CHANNELS, state_to_numpy

TERMINAL_PLAYER_ID = -4


class AbaloneGame:
    """Static facts about Abalone plus a factory for initial states."""

    short_name = "abalone"
    long_name = "Abalone"

    def __init__(self, config: Optional[GameConfig] = None, **params) -> None:
        base = config.to_dict() if config is not None else {}
        base.update(params)
        self.config = GameConfig.from_dict(base)

    def num_distinct_actions(self) -> int:
        return ACTION_VECTOR_SIZE

    def num_players(self) -> int:
        return NUM_PLAYERS

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0

    def observation_tensor_shape(self) -> Tuple[int, int, int]:
        return (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)

    def max_game_length(self) -> int:
        return self.config.max_moves

    def action_to_string(self, player: int, action: int) -> str:
        return move_to_string(decode_action(action))

    def new_initial_state(self) -> "AbaloneState":
        return AbaloneState(self, self.config.new_state())


class AbaloneState:
    def __init__(self, game: AbaloneGame, state: GameState) -> None:
        self.game = game
        self._state = state
        self._history: List[int] = []

    @property
    def game_state(self) -> GameState:
        return self._state

    def current_player(self) -> int:
        return TERMINAL_PLAYER_ID if self.is_terminal() else self._state.current_player

    def legal_actions(self) -> List[int]:
        return enumerate_legal_actions(self._state)

    def is_legal_action(self, action: int) -> bool:
        if self.is_terminal() or not 0 <= action < ACTION_VECTOR_SIZE:
            return False
        return is_valid_move(self._state.board, decode_action(action), self._state.current_player)

    def apply_action(self, action: int) -> None:
        apply_action(self._state, action, in_place=True)
        self._history.append(int(action))

    def apply_move_string(self, text: str) -> bool:
        """Apply a move given in notation; return False when it does not parse."""
        move = parse_move(text)
        if move is None:
            return False
        self.apply_action(encode_action(move))
        return True

    def action_to_string(self, player: int, action: int) -> str:
        return self.game.action_to_string(player, action)

    def is_terminal(self) -> bool:
        return self._state.is_terminal

    def returns(self) -> List[float]:
        return compute_returns(self._state)

    def history(self) -> List[int]:
        return list(self._history)

    def information_state_string(self, player: int) -> str:
        self._check_player(player)
        return ", ".join(str(action) for action in self._history)

    def observation_string(self, player: int) -> str:
        self._check_player(player)
        return str(self)

    def observation_tensor(self, player: int) -> np.ndarray:
        self._check_player(player)
        return state_to_numpy(self._state)

    def clone(self) -> "AbaloneState":
        cloned = AbaloneState(self.game, self._state.copy())
        cloned._history = list(self._history)
        return cloned

    def _check_player(self, player: int) -> None:
        if not 0 <= player < NUM_PLAYERS:
            raise ValueError(f"Invalid player id {player}")

    def __str__(self) -> str:
        returns = self.returns()
        winner = self._state.winner
        return "\n".join(
            [
                "board = ",
                self._state.board.render(),
                f"num_moves = {self._state.move_count}",
                f"returns = {returns[0]:g}, {returns[1]:g}",
                f"winner = {'' if winner is None else winner + 1}",
                f"done = {int(self.is_terminal())}",
            ]
        )
