from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from abalone.core import STARTING_MARBLES, ConfigurationError, GameState, initialize_game_state
from abalone.core.board import LAYOUTS
from abalone.core.state import DEFAULT_MARBLES_TO_WIN, DEFAULT_MAX_MOVES

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    marbles_to_win: int = DEFAULT_MARBLES_TO_WIN
    max_moves: int = DEFAULT_MAX_MOVES
    layout: str = "classic"

    def validate(self) -> "GameConfig":
        for name in ("marbles_to_win", "max_moves"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}.")
        if not isinstance(self.layout, str):
            raise ConfigurationError(f"layout must be a string, got {self.layout!r}.")
        if not 1 <= self.marbles_to_win <= STARTING_MARBLES:
            raise ConfigurationError(
                f"marbles_to_win must be in [1, {STARTING_MARBLES}], got {self.marbles_to_win}."
            )
        if self.max_moves <= 0:
            raise ConfigurationError(f"max_moves must be positive, got {self.max_moves}.")
        if self.layout not in LAYOUTS:
            raise ConfigurationError(f"Unknown layout {self.layout!r}; expected one of {sorted(LAYOUTS)}.")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown game config key %r", key)
        return cls(**{k: v for k, v in data.items() if k in known}).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def new_state(self) -> GameState:
        return initialize_game_state(
            layout=self.layout,
            max_moves=self.max_moves,
            marbles_to_win=self.marbles_to_win,
        )


def load_config(path: Optional[Union[str, Path]]) -> GameConfig:
    """Read a YAML game config; a missing file yields the defaults."""
    if path is None:
        return GameConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.debug("Config %s not found, using defaults", cfg_path)
        return GameConfig()
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{cfg_path} must contain a mapping.")
    return GameConfig.from_dict(data.get("game", data))
