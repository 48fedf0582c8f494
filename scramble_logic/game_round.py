import logging
import re
from typing import Iterable, Optional

from models import BonusPosition, GameContext, RoundResult
from .constants import MAX_BONUS_POSITION_DIGITS, UNUSED_LETTERS_SEPARATOR
from .matcher import find_matches
from .normalizer import normalize, remove_whitespaces
from .ranker import rank_words
from .scorer import score_candidates

logger = logging.getLogger(__name__)

BONUS_POSITION_PATTERN = re.compile(r"[0-9]+")


def parse_bonus_position(text: str) -> Optional[BonusPosition]:
    """Parse the typed bonus position; None means the input was rejected."""
    position = remove_whitespaces(text or "")
    if not BONUS_POSITION_PATTERN.fullmatch(position):
        return None
    position = position.lstrip("0") or "0"
    if len(position) > MAX_BONUS_POSITION_DIGITS:
        return BonusPosition(position=10 ** MAX_BONUS_POSITION_DIGITS)
    return BonusPosition(position=int(position))


def format_unused_letters(letters: Iterable[str]) -> str:
    return UNUSED_LETTERS_SEPARATOR.join(letters)


def play_round(raw_letters: str, bonus: Optional[BonusPosition],
               context: GameContext) -> RoundResult:
    letters = normalize(raw_letters, context.letter_scores, context.accent_folds)
    if not letters:
        return RoundResult(letters=letters)

    candidates = find_matches(letters, context)
    if not candidates:
        logger.info(f"No dictionary word matches '{letters}'.")
        return RoundResult(letters=letters)

    scored = score_candidates(candidates, context.letter_scores, bonus)
    winner = rank_words(scored)
    logger.info(
        f"Round '{letters}' (bonus {bonus.position if bonus else 0}): {len(candidates)} matches, winner {winner.word} with {winner.score} points.")
    return RoundResult(letters=letters, winner=winner, candidates_found=len(candidates))
