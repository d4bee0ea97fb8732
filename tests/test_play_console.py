import json
from pathlib import Path

from abalone.core import Coordinate, Direction, Move, encode_action

from scripts.play_console import replay_logged_game


def create_sample_log(path: Path) -> None:
    first = encode_action(Move(Direction.UP_LEFT, Coordinate(8, 0), Coordinate(7, 0)))
    second = encode_action(Move(Direction.DOWN_RIGHT, Coordinate(0, 8), Coordinate(1, 8)))
    moves = [
        {"move_index": 0, "player": 1, "notation": "a1b1", "action_index": first},
        {"move_index": 1, "player": 2, "notation": "i9h9", "action_index": second},
    ]
    log = {"metadata": {"config": {"max_moves": 100}}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)

    summary = replay_logged_game(log_path, verbose=False)

    assert summary["moves"] == 2
    assert summary["result"] == "ongoing"
    board = summary["board"]
    assert board[6][0] == 0
    assert board[8][0] == -1
    assert board[2][8] == 1
    assert board[0][8] == -1


def test_verbose_replay_prints_each_position(tmp_path, capsys):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)

    replay_logged_game(log_path, verbose=True)

    out = capsys.readouterr().out
    assert out.count("board = ") == 3
    assert "Player 1: a1b1" in out
    assert "Player 2: i9h9" in out
    assert "Result: ongoing" in out
