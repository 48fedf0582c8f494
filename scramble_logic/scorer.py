from typing import Dict, List, Optional

from models import BonusPosition, MatchCandidate, ScoredCandidate
from .exceptions import UnknownLetterError


def calculate_word_score(word: str, letter_scores: Dict[str, int],
                         bonus: Optional[BonusPosition] = None) -> int:
    """Sum of letter values, doubling the letter at the 1-based bonus position."""
    bonus_index = bonus.position if bonus is not None and bonus.enabled else None

    score = 0
    for i, letter in enumerate(word, start=1):
        if letter not in letter_scores:
            raise UnknownLetterError(letter, word)
        letter_score = letter_scores[letter]
        if i == bonus_index:
            letter_score *= 2
        score += letter_score

    return score


def score_candidates(candidates: List[MatchCandidate], letter_scores: Dict[str, int],
                     bonus: Optional[BonusPosition] = None) -> List[ScoredCandidate]:
    return [
        ScoredCandidate(word=candidate.word,
                        unused_letters=candidate.unused_letters,
                        score=calculate_word_score(candidate.word, letter_scores, bonus))
        for candidate in candidates
    ]
