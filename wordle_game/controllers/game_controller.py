"""
Game Controller

Runs an interactive session: connects the terminal to the round and stats
services, one round at a time.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import Config
from ..models.game import RoundOutcome, RoundStatus
from ..models.stats import SessionStats
from ..services.round_service import RoundController
from ..services.stats_service import load_session_stats, save_session_stats
from ..services.word_service import AnswerPicker, WordSets, resolve_seed
from ..utils.game_logger import game_logger
from ..utils.helpers import is_yes, normalize_word
from ..utils.terminal import Ansi, Console, style


@dataclass
class SessionOptions:
    """Settings taken from the command line."""
    answer: Optional[str] = None
    random_mode: bool = False
    seed: Optional[str] = None
    hard_mode: bool = False
    state_file: str = Config.STATE_FILE
    player_name: str = 'player'


class GameController:
    """
    Interactive session driver.

    Stats are loaded once when the session starts, handed to every round
    and saved once when the player stops.
    """

    def __init__(self,
                 word_sets: WordSets,
                 options: Optional[SessionOptions] = None,
                 console: Optional[Console] = None):
        self.word_sets = word_sets
        self.options = options or SessionOptions()
        self.console = console or Console()
        self.picker: Optional[AnswerPicker] = None
        self._explicit_answer_failed = False
        self.current_round: Optional[RoundController] = None

    def run(self) -> SessionStats:
        """
        Plays rounds until the player declines or input runs out.

        A round left unfinished by end of input or an interrupt is closed as
        a loss before the stats are saved.

        Raises:
            OSError: If the stats cannot be saved at the end of the session
            KeyboardInterrupt: Re-raised once the stats have been saved
        """
        game_logger.set_player(self.options.player_name)
        stats = load_session_stats(self.options.state_file)
        game_logger.log_game_event(
            'stats_loaded', state_file=str(self.options.state_file), total_rounds=stats.total_rounds
        )

        self._greet()
        if self.options.random_mode:
            self._setup_random_mode()

        interrupted = False
        try:
            while True:
                self.play_round(stats)
                again = self.console.read_line("Do you want to play another round? (y/n)")
                game_logger.log_player_action('choose_continue', stats.total_rounds, response=again)
                if not is_yes(again):
                    break
        except EOFError:
            game_logger.log_game_event('input_closed', stats.total_rounds)
        except KeyboardInterrupt:
            interrupted = True
            game_logger.log_game_event('session_interrupted', stats.total_rounds)

        self._close_current_round(stats)
        self.print_summary(stats)
        save_session_stats(stats, self.options.state_file)
        game_logger.log_game_event(
            'stats_saved', state_file=str(self.options.state_file), total_rounds=stats.total_rounds
        )
        if interrupted:
            raise KeyboardInterrupt
        return stats

    def play_round(self, stats: SessionStats) -> Optional[RoundOutcome]:
        """
        Plays one round to completion.

        Raises:
            EOFError: If input ends before the round finishes
        """
        round_controller = RoundController(self.word_sets, stats)
        self.current_round = round_controller

        while True:
            answer = self._next_answer()
            game_logger.log_player_action('submit_answer', stats.total_rounds + 1)
            is_valid, error = round_controller.confirm_answer(answer)
            if is_valid:
                break
            self.console.write(error)
            if self.options.answer and not self.options.random_mode:
                self._explicit_answer_failed = True

        round_number = stats.total_rounds
        game_logger.log_game_event('round_started', round_number)

        if self.options.hard_mode:
            hard_mode = True
        else:
            response = self.console.read_line("Do you want to enable hard mode? (y/n)")
            hard_mode = is_yes(response)
        round_controller.set_hard_mode(hard_mode)
        game_logger.log_player_action('choose_hard_mode', round_number, hard_mode=hard_mode)

        while not round_controller.finished:
            raw_guess = self.console.read_line(
                f"Attempt {round_controller.attempts + 1}: Enter your guess:"
            )
            guess = normalize_word(raw_guess)
            result = round_controller.submit_guess(guess)
            game_logger.log_player_action(
                'submit_guess', round_number, guess=guess, accepted=result.accepted
            )
            if not result.accepted:
                self.console.write(result.error)
                continue

            self.console.write(f"Feedback: {self.console.render(result.feedback)}")

        if round_controller.status == RoundStatus.WON:
            self.console.write("Congratulations! You've guessed the word.")
            game_logger.log_game_event('round_won', round_number, attempts=round_controller.attempts)
        else:
            self.console.write(
                f"Sorry, you've used all attempts. The word was '{round_controller.answer}'."
            )
            game_logger.log_game_event('round_lost', round_number, answer=round_controller.answer)

        return round_controller.outcome

    def print_summary(self, stats: SessionStats) -> None:
        summary = stats.summary()
        self.console.write(f"Games played: {summary.total_rounds}")
        self.console.write(f"Successful games: {summary.successful_games}")
        self.console.write(f"Average attempts: {summary.average_attempts:.2f}")
        self.console.write("Most frequently used words:")
        for word, count in summary.top_words:
            self.console.write(f"{word}: {count}")

    def _close_current_round(self, stats: SessionStats) -> None:
        if self.current_round is None or self.current_round.finished:
            return
        outcome = self.current_round.abandon()
        if outcome is not None:
            game_logger.log_game_event('round_abandoned', stats.total_rounds, attempts=outcome.attempts)

    def _greet(self) -> None:
        if self.console.is_tty:
            self.console.write(
                f"I am in a tty. Please print {style('colorful characters', Ansi.BOLD, Ansi.BLINK, Ansi.BLUE)}!"
            )
        else:
            self.console.write("I am not in a tty. Please print according to test requirements!")
        self.console.write(f"Welcome to wordle, {self.options.player_name}!")

    def _setup_random_mode(self) -> None:
        seed, generated = resolve_seed(self.options.seed)
        self.picker = self.word_sets.answer_picker(seed)
        game_logger.log_game_event('seed_chosen', seed=seed, generated=generated)

    def _next_answer(self) -> str:
        if self.picker is not None:
            return self.picker.pick()
        if self.options.answer and not self._explicit_answer_failed:
            return self.options.answer
        return self.console.read_line("Please enter the answer word (5 letters):")
