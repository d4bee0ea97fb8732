import numpy as np
import pytest

from abalone import TERMINAL_PLAYER_ID, AbaloneGame, GameConfig
from abalone.core import Coordinate, Direction, Move, encode_action

A1B1 = encode_action(Move(Direction.UP_LEFT, Coordinate(8, 0), Coordinate(7, 0)))


def test_game_descriptor():
    game = AbaloneGame()

    assert game.num_distinct_actions() == 2430
    assert game.num_players() == 2
    assert game.min_utility() == -1.0
    assert game.max_utility() == 1.0
    assert game.utility_sum() == 0.0
    assert game.observation_tensor_shape() == (4, 9, 9)
    assert game.max_game_length() == 200
    assert game.action_to_string(0, A1B1) == "a1b1"


def test_game_parameters_override_config():
    game = AbaloneGame(GameConfig(max_moves=50), marbles_to_win=4)

    assert game.max_game_length() == 50
    assert game.new_initial_state().game_state.marbles_to_win == 4


def test_initial_state():
    state = AbaloneGame().new_initial_state()

    assert state.current_player() == 0
    assert not state.is_terminal()
    assert len(state.legal_actions()) == 44
    assert state.is_legal_action(A1B1)
    assert not state.is_legal_action(-1)
    assert not state.is_legal_action(2430)
    assert state.returns() == [0.0, 0.0]
    text = str(state)
    assert "num_moves = 0" in text
    assert "done = 0" in text


def test_observation_tensor_is_one_hot():
    state = AbaloneGame().new_initial_state()
    tensor = state.observation_tensor(0)

    assert tensor.shape == (4, 9, 9)
    assert np.array_equal(tensor.sum(axis=0), np.ones((9, 9)))
    assert tensor[0].sum() == 20
    assert tensor[2].sum() == 14
    assert tensor[3].sum() == 14
    assert tensor[2, 8, 0] == 1.0


def test_apply_action_records_history():
    state = AbaloneGame().new_initial_state()
    state.apply_action(A1B1)
    reply = state.legal_actions()[0]
    state.apply_action(reply)

    assert state.history() == [A1B1, reply]
    assert state.information_state_string(0) == f"{A1B1}, {reply}"
    assert state.current_player() == 0


def test_illegal_action_ends_game():
    state = AbaloneGame().new_initial_state()
    before = state.observation_tensor(0)

    state.apply_action(0)

    assert state.is_terminal()
    assert state.current_player() == TERMINAL_PLAYER_ID
    assert state.returns() == [-1.0, 1.0]
    assert np.array_equal(state.observation_tensor(0), before)
    assert state.legal_actions() == []
    assert "winner = 2" in str(state)


def test_apply_move_string():
    state = AbaloneGame().new_initial_state()

    assert not state.apply_move_string("zz")
    assert state.history() == []
    assert state.apply_move_string("a1b1")
    assert state.history() == [A1B1]
    assert state.current_player() == 1


def test_clone_is_independent():
    state = AbaloneGame().new_initial_state()
    clone = state.clone()
    clone.apply_action(A1B1)

    assert state.history() == []
    assert state.current_player() == 0
    assert clone.current_player() == 1


def test_player_arguments_are_checked():
    state = AbaloneGame().new_initial_state()

    with pytest.raises(ValueError):
        state.observation_string(2)
    with pytest.raises(ValueError):
        state.observation_tensor(-1)
    assert state.observation_string(1) == str(state)


def test_random_playout_respects_invariants():
    rng = np.random.default_rng(0)
    state = AbaloneGame(max_moves=30).new_initial_state()
    invalid_mask = state.observation_tensor(0)[0].copy()
    counts = (14, 14)

    while not state.is_terminal():
        legal = state.legal_actions()
        assert legal
        state.apply_action(int(rng.choice(legal)))
        tensor = state.observation_tensor(0)
        assert np.array_equal(tensor[0], invalid_mask)
        new_counts = (int(tensor[2].sum()), int(tensor[3].sum()))
        assert new_counts[0] <= counts[0] and new_counts[1] <= counts[1]
        counts = new_counts

    returns = state.returns()
    assert sum(returns) == pytest.approx(0.0)
    assert all(-1.0 <= r <= 1.0 for r in returns)
    assert state.current_player() == TERMINAL_PLAYER_ID
