"""
Tests for replaying recorded games from JSON.
"""

import json
import logging

import pytest

from blokli.board import PlayerColor
from scripts.replay_game import main, replay_record


OPENING = [
    {"player": "blue", "piece_id": 0, "cells": [[4, 4]]},
    {"player": "orange", "piece_id": 0, "cells": [[9, 9]]},
    {"player": "blue", "piece_id": 1, "cells": [[5, 5], [5, 6]]},
]


@pytest.fixture(autouse=True)
def reset_root_logger():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


def test_replay_legal_record():
    result = replay_record({"moves": OPENING})

    assert result.ok
    assert result.steps_applied == 3
    assert result.game.board[5, 6] == 1
    assert result.game.current_turn is PlayerColor.ORANGE
    assert result.game.get_score(PlayerColor.BLUE) == 86


def test_replay_stops_at_illegal_step():
    moves = OPENING + [{"player": "orange", "piece_id": 1, "cells": [[9, 10], [9, 11]]}]
    result = replay_record({"moves": moves})

    assert not result.ok
    assert result.failed_step == 3
    assert result.steps_applied == 3
    assert result.error == "Invalid placement: piece touches your own piece along an edge"


def test_replay_rejects_pass_with_moves():
    result = replay_record({"moves": [{"player": "blue", "pass": True}]})
    assert result.error == "You have valid moves available"
    assert result.failed_step == 0


def test_replay_malformed_step():
    result = replay_record({"moves": [{"player": "purple", "piece_id": 0, "cells": [[4, 4]]}]})
    assert not result.ok

    result = replay_record({"moves": [{"player": "blue", "cells": [[4, 4]]}]})
    assert not result.ok


def test_replay_empty_record():
    result = replay_record({})
    assert result.ok
    assert result.steps_applied == 0


def test_main_prints_summary(tmp_path, capsys):
    record = tmp_path / "game.json"
    record.write_text(json.dumps({"moves": OPENING}), encoding="utf-8")

    assert main([str(record)]) == 0
    out = capsys.readouterr().out
    assert "steps applied: 3" in out
    assert "blue score: 86" in out
    assert "next turn: orange" in out


def test_main_reports_illegal_step(tmp_path, capsys):
    record = tmp_path / "game.json"
    record.write_text(json.dumps({"moves": [{"player": "orange", "piece_id": 0, "cells": [[9, 9]]}]}),
                      encoding="utf-8")

    assert main([str(record)]) == 1
    assert "illegal step 0: Not your turn" in capsys.readouterr().err


def test_main_takes_log_level_from_env(tmp_path, monkeypatch):
    record = tmp_path / "game.json"
    record.write_text(json.dumps({"moves": OPENING}), encoding="utf-8")
    monkeypatch.setenv("BLOKLI_LOG_LEVEL", "warning")

    assert main([str(record)]) == 0
    assert logging.getLogger().level == logging.WARNING

    assert main([str(record), "--verbose"]) == 0
    assert logging.getLogger().level == logging.DEBUG
