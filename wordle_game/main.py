"""
Wordle Terminal Game - Main Entry Point

Parses the command line, loads the word lists and runs an interactive
session against standard input and output.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import Config
from .controllers.game_controller import GameController, SessionOptions
from .services.word_service import WordSets
from .utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='wordle', description="Wordle Game in the terminal")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-w', '--word', help="Specify the answer word")
    parser.add_argument('-r', '--random', action='store_true', help="Enable random mode")
    parser.add_argument('-s', '--seed', help="Specify the seed for random word generation")
    parser.add_argument('-d', '--difficult', action='store_true', help="Enable hard mode")
    parser.add_argument('-S', '--state', default=Config.STATE_FILE,
                        help="Specify the state file for saving/loading game state")
    parser.add_argument('-n', '--name', default='player', help="Player name used in greetings and logs")
    return parser


def parse_options(argv: Optional[List[str]] = None) -> SessionOptions:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and not args.random:
        parser.error("the argument --seed requires --random")

    return SessionOptions(
        answer=args.word,
        random_mode=args.random,
        seed=args.seed,
        hard_mode=args.difficult,
        state_file=args.state,
        player_name=args.name
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to load the word lists and play a session."""
    options = parse_options(argv)

    try:
        word_sets = WordSets.from_files()
    except (OSError, ValueError) as e:
        game_logger.log_error(e, 'load_word_lists')
        print(f"Error loading word lists: {e}", file=sys.stderr)
        return 1

    controller = GameController(word_sets, options)
    try:
        controller.run()
    except OSError as e:
        game_logger.log_error(e, 'save_state')
        print(f"Error saving game state: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        game_logger.logger.info("Session interrupted (KeyboardInterrupt), game state saved")
        return 130

    return 0


if __name__ == '__main__':
    sys.exit(main())
