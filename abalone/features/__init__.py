"""Observation encoding for the Abalone engine."""

from .observation import BOARD_CHANNELS, build_board_tensor, state_to_numpy, state_to_torch

__all__ = [
    "BOARD_CHANNELS",
    "build_board_tensor",
    "state_to_numpy",
    "state_to_torch",
]
