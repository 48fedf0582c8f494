import re
from typing import Dict

WHITESPACE_PATTERN = re.compile(r"\s+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
# Latin letters plus the Latin-1 accented range, without the × and ÷ signs.
NON_LETTER_PATTERN = re.compile(r"[^a-zA-Zà-öø-üÀ-ÖØ-Ü]+")


def remove_whitespaces(text: str) -> str:
    return WHITESPACE_PATTERN.sub("", text)


def remove_numbers(text: str) -> str:
    return DIGITS_PATTERN.sub("", text)


def remove_special_characters(text: str) -> str:
    return NON_LETTER_PATTERN.sub("", text)


def remove_accentuation(text: str, accent_folds: Dict[str, str]) -> str:
    return "".join(accent_folds.get(letter, letter) for letter in text)


def normalize(text: str, letter_scores: Dict[str, int], accent_folds: Dict[str, str]) -> str:
    """Canonical form of a word: uppercase, accent-folded, scored letters only.

    Letters that survive folding but have no entry in the score table are
    dropped, so every canonical word can be scored.
    """
    if not text:
        return ""
    text = remove_whitespaces(text)
    text = remove_numbers(text)
    text = remove_special_characters(text)
    text = remove_accentuation(text.upper(), accent_folds)
    return "".join(letter for letter in text if letter in letter_scores)
