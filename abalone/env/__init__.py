"""Gymnasium environment wrapping the Abalone engine."""

from .gym_env import AbaloneEnv

__all__ = ["AbaloneEnv"]
