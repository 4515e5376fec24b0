#!/usr/bin/env python3
"""
Replay a recorded Blokli game through the rules engine.

The record is a JSON file of the form:

    {"moves": [
        {"player": "blue", "piece_id": 0, "cells": [[4, 4]]},
        {"player": "orange", "pass": true}
    ]}

Each step is checked exactly as the game service would check it. The replay
stops at the first illegal step.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from blokli.board import PlayerColor, format_board
from blokli.game import BlokliGame, MoveError
from service.config import ServiceConfig
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    game: BlokliGame
    steps_applied: int
    error: Optional[str] = None
    failed_step: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def replay_record(record: Dict[str, Any]) -> ReplayResult:
    """
    Replay every step of a game record.

    Args:
        record: Parsed game record with a "moves" list

    Returns:
        ReplayResult with the final game and, on failure, the failing step
    """
    game = BlokliGame()
    moves = record.get("moves", [])

    for index, step in enumerate(moves):
        try:
            player = PlayerColor(step["player"])
            if step.get("pass"):
                game.pass_turn(player)
            else:
                game.make_move(player, int(step["piece_id"]), [tuple(cell) for cell in step["cells"]])
        except (MoveError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Step {index}: {e}")
            return ReplayResult(game, index, error=str(e), failed_step=index)
        logger.debug(f"Step {index}: applied {step}")

    return ReplayResult(game, len(moves))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Replay a recorded Blokli game")
    parser.add_argument("record", type=Path, help="Path to a JSON game record")
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log every step")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else ServiceConfig.from_env().log_level, args.log_file)

    with open(args.record, encoding="utf-8") as f:
        record = json.load(f)

    result = replay_record(record)
    game = result.game

    print(format_board(game.board))
    print(f"steps applied: {result.steps_applied}")
    print(f"blue score: {game.get_score(PlayerColor.BLUE)}")
    print(f"orange score: {game.get_score(PlayerColor.ORANGE)}")
    if game.game_over:
        print(f"result: {game.winner.value}")
    else:
        print(f"next turn: {game.current_turn.value}")

    if not result.ok:
        print(f"illegal step {result.failed_step}: {result.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
