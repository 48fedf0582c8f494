import logging
from typing import List

from models import ScoredCandidate

logger = logging.getLogger(__name__)


def keep_highest_scores(candidates: List[ScoredCandidate]) -> List[ScoredCandidate]:
    ordered = sorted(candidates, key=lambda c: c.score, reverse=True)
    best = ordered[0].score
    return [c for c in ordered if c.score == best]


def keep_shortest_words(candidates: List[ScoredCandidate]) -> List[ScoredCandidate]:
    ordered = sorted(candidates, key=lambda c: len(c.word))
    shortest = len(ordered[0].word)
    return [c for c in ordered if len(c.word) == shortest]


def first_alphabetically(candidates: List[ScoredCandidate]) -> ScoredCandidate:
    return sorted(candidates, key=lambda c: c.word)[0]


def rank_words(candidates: List[ScoredCandidate]) -> ScoredCandidate:
    """Pick the winner: highest score, then shortest word, then alphabetical order."""
    if not candidates:
        raise ValueError("Cannot rank an empty list of candidates.")

    survivors = keep_highest_scores(candidates)
    logger.debug(f"{len(survivors)} candidate(s) share the top score {survivors[0].score}.")
    if len(survivors) > 1:
        survivors = keep_shortest_words(survivors)
        logger.debug(f"{len(survivors)} candidate(s) share the shortest length {len(survivors[0].word)}.")
        if len(survivors) > 1:
            return first_alphabetically(survivors)

    return survivors[0]
