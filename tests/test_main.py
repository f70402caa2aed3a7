import io
import json

import pytest
from wordle_game.main import main, parse_options


def test_parse_options():
    options = parse_options(["-r", "-s", "42", "-d", "-S", "stats.json", "-n", "Ada"])
    assert options.random_mode
    assert options.seed == "42"
    assert options.hard_mode
    assert options.state_file == "stats.json"
    assert options.player_name == "Ada"
    assert options.answer is None

    options = parse_options(["--word", "crane"])
    assert options.answer == "crane"
    assert not options.random_mode
    assert not options.hard_mode


def test_seed_requires_random():
    with pytest.raises(SystemExit) as exc_info:
        parse_options(["--seed", "42"])
    assert exc_info.value.code == 2


def test_main_plays_and_saves(tmp_path, monkeypatch, capsys):
    state_file = tmp_path / "game_state.json"
    monkeypatch.setattr('sys.stdin', io.StringIO("n\nslate\ncrane\nn\n"))

    assert main(["-w", "CRANE", "-S", str(state_file)]) == 0

    output = capsys.readouterr().out
    assert "Feedback: RRGRG" in output
    assert "Feedback: GGGGG" in output
    assert json.loads(state_file.read_text(encoding='utf-8')) == {
        "total_rounds": 1,
        "successful_games": 1,
        "attempts": 2,
        "used_words": {"SLATE": 1, "CRANE": 1},
    }


def test_main_fails_when_state_cannot_be_saved(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("n\ncrane\nn\n"))

    assert main(["-w", "CRANE", "-S", str(tmp_path)]) == 1
    assert "Error saving game state" in capsys.readouterr().err


class InterruptingInput(io.StringIO):
    def readline(self, *args):
        line = super().readline(*args)
        if not line:
            raise KeyboardInterrupt
        return line


def test_main_saves_state_on_interrupt(tmp_path, monkeypatch):
    state_file = tmp_path / "game_state.json"
    monkeypatch.setattr('sys.stdin', InterruptingInput("n\nslate\n"))

    assert main(["-w", "CRANE", "-S", str(state_file)]) == 130
    assert json.loads(state_file.read_text(encoding='utf-8')) == {
        "total_rounds": 1,
        "successful_games": 0,
        "attempts": 1,
        "used_words": {"SLATE": 1},
    }
