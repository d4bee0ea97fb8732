from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from abalone.config import GameConfig
from abalone.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    GameResult,
    GameState,
    IllegalActionError,
    apply_action,
    compute_returns,
    legal_action_mask,
)
from abalone.features import BOARD_CHANNELS, state_to_numpy

logger = logging.getLogger(__name__)


class AbaloneEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        config: Optional[GameConfig] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._config = (config or GameConfig()).validate()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32)
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._state = self._config.new_state()
        self._last_info: Dict[str, Any] = {}

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        config = self._config
        if options:
            config = GameConfig.from_dict({**config.to_dict(), **options})
        self._state = config.new_state()
        observation = state_to_numpy(self._state)
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        mover = self._state.current_player
        legal_mask = self._last_info.get("legal_action_mask")
        if legal_mask is None:
            legal_mask = legal_action_mask(self._state)
        if self._enforce_legal and not legal_mask[action_index]:
            raise IllegalActionError("Illegal action provided and enforce_legal_actions=True.")

        self._state = apply_action(self._state, int(action_index), in_place=False)

        observation = state_to_numpy(self._state)
        info = self._build_info()
        self._last_info = info

        terminated = self._state.winner is not None
        truncated = self._state.result == GameResult.MOVE_LIMIT
        reward = compute_returns(self._state)[mover] if terminated else 0.0
        if terminated or truncated:
            logger.debug("Episode finished: %s after %d moves", self._state.result.value, self._state.move_count)

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._state.board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_info(self) -> Dict[str, Any]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": self._state.current_player,
        }
