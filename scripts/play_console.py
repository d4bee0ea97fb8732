#!/usr/bin/env python3
"""Play Abalone in the console with move notation, with optional logging & replay."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from abalone import AbaloneGame, AbaloneState, load_config
from abalone.core import decode_action, move_to_string, parse_move


def list_legal_moves(state: AbaloneState) -> List[str]:
    return [move_to_string(decode_action(idx)) for idx in state.legal_actions()]


def prompt_move(state: AbaloneState) -> str:
    player = state.current_player()
    while True:
        raw = input(f"Player {player + 1} move (? lists moves, q quits): ").strip().lower()
        if raw in {"q", "quit", "exit"}:
            print("Game aborted.")
            sys.exit(0)
        if raw == "?":
            print(" ".join(list_legal_moves(state)))
            continue
        if parse_move(raw) is None:
            print("Unreadable move, expected e.g. 'c3d3' or 'c3c5d3'.")
            continue
        return raw


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    game = AbaloneGame(**data.get("metadata", {}).get("config", {}))
    state = game.new_initial_state()
    moves = data.get("moves", [])
    if verbose:
        print(state)
    for entry in moves:
        idx = entry["action_index"]
        state.apply_action(idx)
        if verbose:
            print(f"Player {entry.get('player', '?')}: {entry.get('notation', game.action_to_string(0, idx))}")
            print(state)
    game_state = state.game_state
    summary = {
        "result": game_state.result.value,
        "moves": len(moves),
        "board": game_state.board.to_list(),
    }
    if verbose:
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    if args.max_moves is not None:
        config.max_moves = args.max_moves
    if args.layout is not None:
        config.layout = args.layout
    game = AbaloneGame(config)
    state = game.new_initial_state()
    log_records: List[Dict] = []

    while not state.is_terminal():
        print(state)
        player = state.current_player()
        notation = move_to_string(parse_move(prompt_move(state)))
        state.apply_move_string(notation)
        log_records.append(
            {
                "move_index": len(log_records),
                "player": player + 1,
                "notation": notation,
                "action_index": state.history()[-1],
            }
        )

    print(state)
    winner = state.game_state.winner
    if winner is None:
        print("Move limit reached.")
    else:
        print(f"Player {winner + 1} wins!")

    if args.log_file:
        metadata = {
            "config": config.to_dict(),
            "result": state.game_state.result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Abalone in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--max-moves", type=int)
    parser.add_argument("--layout", choices=["classic", "belgian_daisy"])
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
