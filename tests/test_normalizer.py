import pytest

from scramble_logic.normalizer import (normalize, remove_accentuation, remove_numbers,
                                       remove_special_characters, remove_whitespaces)


def canonical(text, context):
    return normalize(text, context.letter_scores, context.accent_folds)


def test_normalize_strips_digits_punctuation_and_accents(context):
    assert canonical("café 123!", context) == "CAFE"


def test_normalize_removes_every_kind_of_whitespace(context):
    assert canonical(" t\ta\nc o ", context) == "TACO"


def test_normalize_empty_input(context):
    assert canonical("", context) == ""
    assert canonical("  42 ?! ", context) == ""


def test_normalize_multi_letter_fold(context):
    assert canonical("æon", context) == "AEON"


def test_normalize_drops_multiplication_sign(context):
    assert canonical("a×b÷c", context) == "ABC"


def test_normalize_drops_letters_without_score(context):
    scores = {k: v for k, v in context.letter_scores.items() if k != "Q"}
    assert normalize("quiz", scores, context.accent_folds) == "UIZ"


@pytest.mark.parametrize("text", ["café 123!", "Ação", "  x Y z ", "ÆÇÉ", "", "!!", "résumé"])
def test_normalize_is_idempotent(context, text):
    once = canonical(text, context)
    assert canonical(once, context) == once


def test_helpers():
    assert remove_whitespaces("a b\tc") == "abc"
    assert remove_numbers("a1b22c") == "abc"
    assert remove_special_characters("é-a.b,c") == "éabc"
    assert remove_accentuation("ÉCOLE", {"É": "E"}) == "ECOLE"
