import argparse
import logging
import sys
from typing import Callable, Optional

from models import BonusPosition, GameContext, Messages, ScoredCandidate
from scramble_logic.config import load_context
from scramble_logic.constants import LOG_FORMAT
from scramble_logic.exceptions import ConfigurationError
from scramble_logic.game_round import (format_unused_letters, parse_bonus_position,
                                       play_round)
from scramble_logic.normalizer import normalize

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def print_block(output: OutputFunc, messages: Messages, *lines: str) -> None:
    output(messages.blank)
    for line in lines:
        output(line)
    output(messages.blank)
    output(messages.separator)
    output(messages.blank)


def print_title(output: OutputFunc, messages: Messages) -> None:
    output(messages.blank)
    output(messages.separator)
    output(messages.title)
    output(messages.separator)
    output(messages.blank)


def print_winner(output: OutputFunc, messages: Messages, winner: ScoredCandidate) -> None:
    headline = messages.winner.format(word=winner.word, score=winner.score)
    if winner.unused_letters:
        leftover = f"{messages.unused_letters} {format_unused_letters(winner.unused_letters)}."
    else:
        leftover = messages.all_letters_used
    print_block(output, messages, headline, leftover)


def print_no_words(output: OutputFunc, messages: Messages, letters: str) -> None:
    print_block(output, messages, messages.no_word_found,
                f"{messages.unused_letters} {format_unused_letters(letters)}")


def ask_letters(context: GameContext, ask: InputFunc, output: OutputFunc) -> str:
    messages = context.messages
    while True:
        raw_letters = ask(messages.letters_entry)
        if normalize(raw_letters, context.letter_scores, context.accent_folds):
            return raw_letters
        print_block(output, messages, messages.invalid_characters_warning,
                    messages.valid_characters_hint)


def ask_bonus(context: GameContext, ask: InputFunc, output: OutputFunc) -> BonusPosition:
    messages = context.messages
    while True:
        bonus = parse_bonus_position(ask(messages.bonus_position))
        if bonus is not None:
            return bonus
        print_block(output, messages, messages.bonus_position_hint,
                    messages.bonus_position_disable)


def run_round(context: GameContext, ask: InputFunc, output: OutputFunc) -> None:
    raw_letters = ask_letters(context, ask, output)
    bonus = ask_bonus(context, ask, output)
    result = play_round(raw_letters, bonus, context)
    if result.winner is not None:
        print_winner(output, context.messages, result.winner)
    else:
        print_no_words(output, context.messages, result.letters)


def run_game(context: GameContext, ask: Optional[InputFunc] = None,
             output: Optional[OutputFunc] = None, max_rounds: Optional[int] = None) -> int:
    """Play rounds until input ends; returns the number of completed rounds."""
    ask = ask or input
    output = output or print
    print_title(output, context.messages)
    rounds = 0
    try:
        while max_rounds is None or rounds < max_rounds:
            run_round(context, ask, output)
            rounds += 1
    except (EOFError, KeyboardInterrupt):
        output(context.messages.blank)
        logger.info(f"Session ended after {rounds} round(s).")
    return rounds


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the best scoring word that can be built from your letters.")
    parser.add_argument("--assets", default=None,
                        help="Directory holding score.json, accentuation.json, words.json and messages.json.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging verbosity (default: WARNING).")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    try:
        context = load_context(args.assets)
        run_game(context)
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}. Exiting.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
