from __future__ import annotations

from typing import Optional

import numpy as np
import torch

from abalone.core import BOARD_SIZE, Board, CellState, GameState

BOARD_CHANNELS = len(CellState)  # invalid, empty, player 1, player 2


def build_board_tensor(board: Board) -> np.ndarray:
    """Return the one-hot board tensor with shape (4, 9, 9) channel-first.

    Planes are ordered Invalid, Empty, Player 1, Player 2; every cell has
    exactly one hot entry.
    """
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    channels = board.cells.astype(np.int64) - int(CellState.INVALID)
    rows, cols = np.indices((BOARD_SIZE, BOARD_SIZE))
    tensor[channels, rows, cols] = 1.0
    return tensor


def state_to_numpy(state: GameState) -> np.ndarray:
    return build_board_tensor(state.board)


def state_to_torch(
    state: GameState,
    *,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    return torch.from_numpy(state_to_numpy(state)).to(device=device, dtype=dtype)
