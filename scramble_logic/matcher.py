import logging
from typing import List

from models import GameContext, MatchCandidate, MatchResult
from .normalizer import normalize

logger = logging.getLogger(__name__)


def match_word(word: str, letters: str) -> MatchResult:
    """Check whether `word` can be built entirely from `letters`.

    Input letters are consumed left to right. As soon as the last letter of the
    word is found, every input letter not yet scanned is reported as unused,
    after the ones that were skipped along the way.
    """
    remaining = list(word)
    if not remaining:
        return MatchResult(matched=True, unused_letters=tuple(letters))

    unused: List[str] = []
    for index, letter in enumerate(letters):
        if letter in remaining:
            remaining.remove(letter)
            if not remaining:
                unused.extend(letters[index + 1:])
                return MatchResult(matched=True, unused_letters=tuple(unused))
        else:
            unused.append(letter)

    return MatchResult(matched=False)


def find_matches(letters: str, context: GameContext) -> List[MatchCandidate]:
    matches = []
    for raw_word in context.words:
        word = normalize(raw_word, context.letter_scores, context.accent_folds)
        if not word:
            logger.debug(f"Skipping dictionary entry '{raw_word}': no scorable letters.")
            continue
        result = match_word(word, letters)
        if result.matched:
            matches.append(MatchCandidate(
                word=word, unused_letters=result.unused_letters))
    logger.debug(f"{len(matches)} of {len(context.words)} dictionary words match '{letters}'.")
    return matches
