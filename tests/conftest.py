import pytest

from models import GameContext, Messages

LETTER_SCORES = {
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4, 'G': 2, 'H': 4, 'I': 1, 'J': 8,
    'K': 5, 'L': 1, 'M': 3, 'N': 1, 'O': 1, 'P': 3, 'Q': 10, 'R': 1, 'S': 1, 'T': 1,
    'U': 1, 'V': 4, 'W': 4, 'X': 8, 'Y': 4, 'Z': 10,
}

ACCENT_FOLDS = {"É": "E", "Ç": "C", "Ã": "A", "Æ": "AE"}

WORDS = ("cat", "Taco", "coat", "act", "dog", "café", "123", "at")


@pytest.fixture
def context() -> GameContext:
    return GameContext(
        letter_scores=LETTER_SCORES,
        accent_folds=ACCENT_FOLDS,
        words=WORDS,
        messages=Messages(),
    )


@pytest.fixture
def scripted_input():
    def build(answers):
        remaining = iter(answers)

        def ask(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        return ask
    return build
