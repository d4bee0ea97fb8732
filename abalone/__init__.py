"""Abalone rules engine."""

from . import core, env, features
from .config import GameConfig, load_config
from .env import AbaloneEnv
from .features import BOARD_CHANNELS, build_board_tensor, state_to_numpy, state_to_torch
from .game import TERMINAL_PLAYER_ID, AbaloneGame, AbaloneState

__all__ = [
    "core",
    "env",
    "features",
    "AbaloneEnv",
    "AbaloneGame",
    "AbaloneState",
    "GameConfig",
    "TERMINAL_PLAYER_ID",
    "load_config",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "state_to_numpy",
    "state_to_torch",
]
