import io

import pytest

from wordle_game.controllers.game_controller import GameController, SessionOptions
from wordle_game.models.stats import SessionStats
from wordle_game.services.stats_service import load_session_stats, save_session_stats
from wordle_game.utils.terminal import Ansi, Console


def run_session(word_sets, lines, tmp_path, **options):
    options.setdefault('state_file', str(tmp_path / "state.json"))
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    console = Console(stdin=stdin, stdout=stdout, is_tty=False)
    controller = GameController(word_sets, SessionOptions(**options), console)
    stats = controller.run()
    return stats, stdout.getvalue().splitlines()


def test_single_round_session(word_sets, tmp_path):
    stats, output = run_session(word_sets, ["crane", "n", "slate", "zzzzz", "crane", "n"], tmp_path)

    assert output[0] == "I am not in a tty. Please print according to test requirements!"
    assert output[1] == "Welcome to wordle, player!"
    assert "Feedback: RRGRG" in output
    assert "Invalid guess. Please enter a 5-letter word from the word list." in output
    assert "Feedback: GGGGG" in output
    assert "Congratulations! You've guessed the word." in output
    assert output[-6:] == [
        "Games played: 1",
        "Successful games: 1",
        "Average attempts: 2.00",
        "Most frequently used words:",
        "CRANE: 1",
        "SLATE: 1",
    ]

    assert load_session_stats(tmp_path / "state.json") == stats
    assert stats.total_rounds == 1
    assert stats.attempts == 2


def test_lost_round_reveals_answer(word_sets, tmp_path):
    guesses = ["slate", "trace", "sleek", "steep", "hello", "world"]
    stats, output = run_session(word_sets, ["crane", "n"] + guesses + ["n"], tmp_path)

    assert "Sorry, you've used all attempts. The word was 'CRANE'." in output
    assert stats.successful_games == 0
    assert stats.attempts == 6
    assert "Average attempts: 0.00" in output


def test_invalid_answer_is_retried_without_counting(word_sets, tmp_path):
    stats, output = run_session(word_sets, ["xxxxx", "crane", "n", "crane", "n"], tmp_path)

    assert "The answer word must be a valid 5-letter word from the word list." in output
    assert output.count("Please enter the answer word (5 letters):") == 2
    assert stats.total_rounds == 1


def test_multiple_rounds_accumulate_existing_stats(word_sets, tmp_path):
    path = tmp_path / "state.json"
    save_session_stats(SessionStats(total_rounds=2, successful_games=1, attempts=7, used_words={"CRANE": 3}), path)

    lines = ["crane", "n", "crane", "y", "steep", "n", "steep", "n"]
    stats, _ = run_session(word_sets, lines, tmp_path, state_file=str(path))

    assert stats.total_rounds == 4
    assert stats.successful_games == 3
    assert stats.attempts == 9
    assert stats.used_words == {"CRANE": 4, "STEEP": 1}
    assert load_session_stats(path) == stats


def test_end_of_input_closes_unfinished_round_as_loss(word_sets, tmp_path):
    stats, output = run_session(word_sets, ["crane", "n", "slate", "trace"], tmp_path)

    assert output[-6] == "Games played: 1"
    assert stats.total_rounds == 1
    assert stats.successful_games == 0
    assert stats.attempts == 2
    assert stats.attempts == sum(stats.used_words.values())
    assert stats.used_words == {"SLATE": 1, "TRACE": 1}
    assert load_session_stats(tmp_path / "state.json") == stats


def test_end_of_input_before_answer_leaves_no_round(word_sets, tmp_path):
    stats, _ = run_session(word_sets, ["crane", "n", "crane", "y"], tmp_path)

    assert stats.total_rounds == 1
    assert stats.successful_games == 1
    assert stats.attempts == 1


class InterruptingInput(io.StringIO):
    def readline(self, *args):
        line = super().readline(*args)
        if not line:
            raise KeyboardInterrupt
        return line


def test_interrupt_saves_stats_then_reraises(word_sets, tmp_path):
    stdin = InterruptingInput("crane\nn\nslate\n")
    stdout = io.StringIO()
    console = Console(stdin=stdin, stdout=stdout, is_tty=False)
    options = SessionOptions(state_file=str(tmp_path / "state.json"))

    with pytest.raises(KeyboardInterrupt):
        GameController(word_sets, options, console).run()

    assert "Games played: 1" in stdout.getvalue()
    assert load_session_stats(tmp_path / "state.json") == SessionStats(
        total_rounds=1, successful_games=0, attempts=1, used_words={"SLATE": 1}
    )


def test_explicit_answer_and_hard_mode(word_sets, tmp_path):
    lines = ["trace", "slate", "crane", "n"]
    stats, output = run_session(word_sets, lines, tmp_path, answer="crane", hard_mode=True)

    assert "Do you want to enable hard mode? (y/n)" not in output
    assert "Please enter the answer word (5 letters):" not in output
    assert any("Position 2 must be 'R'" in line for line in output)
    assert stats.attempts == 2


def test_invalid_explicit_answer_falls_back_to_prompt(word_sets, tmp_path):
    lines = ["crane", "n", "crane", "n"]
    stats, output = run_session(word_sets, lines, tmp_path, answer="QQQQQ")

    assert "The answer word must be a valid 5-letter word from the word list." in output
    assert stats.total_rounds == 1
    assert stats.successful_games == 1


def test_random_mode_is_seeded(word_sets, tmp_path):
    expected = word_sets.answer_picker(7).pick()
    stats, output = run_session(word_sets, ["n", expected.lower(), "n"], tmp_path, random_mode=True, seed="7")

    assert "Please enter the answer word (5 letters):" not in output
    assert "Feedback: GGGGG" in output
    assert stats.used_words == {expected: 1}


def test_colored_feedback_on_tty(word_sets, tmp_path):
    stdin = io.StringIO("crane\nn\ncrane\nn\n")
    stdout = io.StringIO()
    console = Console(stdin=stdin, stdout=stdout, is_tty=True)
    options = SessionOptions(state_file=str(tmp_path / "state.json"), player_name="Ada")
    GameController(word_sets, options, console).run()

    output = stdout.getvalue()
    assert "I am in a tty." in output
    assert "Welcome to wordle, Ada!" in output
    assert Ansi.GREEN + "C" + Ansi.RESET in output
