import numpy as np
import pytest

from abalone import AbaloneEnv, GameConfig
from abalone.core import ACTION_VECTOR_SIZE, IllegalActionError, encode_action, enumerate_legal_actions


def test_reset_returns_valid_observation():
    env = AbaloneEnv()
    obs, info = env.reset()

    assert obs.shape == (4, 9, 9)
    assert info["legal_action_mask"].shape == (ACTION_VECTOR_SIZE,)
    assert info["current_player"] == 0
    assert env.observation_space.contains(obs)


def test_legal_mask_matches_enumeration():
    env = AbaloneEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = enumerate_legal_actions(env.state)

    assert np.count_nonzero(mask) == len(legal) == 44
    assert all(mask[index] == 1 for index in legal)


def test_step_advances_state_and_returns_reward():
    env = AbaloneEnv()
    obs, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs != obs)
    assert next_info["current_player"] == 1


def test_illegal_action_rejected_when_enforced():
    env = AbaloneEnv()
    env.reset()

    with pytest.raises(IllegalActionError):
        env.step(0)
    with pytest.raises(ValueError):
        env.step(ACTION_VECTOR_SIZE)


def test_illegal_action_forfeits_when_not_enforced():
    env = AbaloneEnv(enforce_legal_actions=False)
    env.reset()

    _, reward, terminated, truncated, info = env.step(0)

    assert terminated
    assert not truncated
    assert reward == -1.0
    assert not info["legal_action_mask"].any()


def test_move_limit_truncates():
    env = AbaloneEnv(config=GameConfig(max_moves=5))
    _, info = env.reset(options={"max_moves": 1})
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    _, reward, terminated, truncated, _ = env.step(action)

    assert truncated
    assert not terminated
    assert reward == 0.0


def test_render_ansi():
    env = AbaloneEnv(render_mode="ansi")
    env.reset()

    assert env.render().splitlines()[0].startswith("<i>")
    with pytest.raises(NotImplementedError):
        AbaloneEnv().render()
