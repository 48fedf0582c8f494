from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from scramble_logic.exceptions import ConfigurationError


class Messages(BaseModel):
    model_config = ConfigDict(frozen=True)

    blank: str = ""
    separator: str = "-" * 40
    title: str = "WORD SCRAMBLE"
    letters_entry: str = "Type the letters you want to play with: "
    bonus_position: str = "Type the bonus position (0 for no bonus): "
    invalid_characters_warning: str = "No valid letters were typed."
    valid_characters_hint: str = "Use letters only, accented letters are accepted."
    bonus_position_hint: str = "The bonus position must be a whole number."
    bonus_position_disable: str = "Type 0 to play without a bonus position."
    no_word_found: str = "No word could be built with these letters."
    unused_letters: str = "Letters left over:"
    all_letters_used: str = "All letters were used!"
    winner: str = "{word}, word worth {score} points."

    @field_validator("winner")
    @classmethod
    def check_winner_template(cls, template: str) -> str:
        try:
            template.format(word="WORD", score=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigurationError(
                f"Winner message '{template}' may only use the {{word}} and {{score}} placeholders.") from e
        return template


class GameContext(BaseModel):
    """Read-only tables shared by every round of a session."""
    model_config = ConfigDict(frozen=True)

    letter_scores: Dict[str, int]
    accent_folds: Dict[str, str] = Field(default_factory=dict)
    words: Tuple[str, ...] = ()
    messages: Messages = Field(default_factory=Messages)

    @field_validator("letter_scores")
    @classmethod
    def check_letter_scores(cls, scores: Dict[str, int]) -> Dict[str, int]:
        if not scores:
            raise ConfigurationError("Score table is empty.")
        for letter, value in scores.items():
            if len(letter) != 1 or not letter.isalpha() or letter != letter.upper():
                raise ConfigurationError(
                    f"Score table key '{letter}' is not a single uppercase letter.")
            if value < 0:
                raise ConfigurationError(
                    f"Score for letter '{letter}' is negative ({value}).")
        return scores

    @model_validator(mode="after")
    def check_accent_folds(self) -> "GameContext":
        for accented, folded in self.accent_folds.items():
            if len(accented) != 1:
                raise ConfigurationError(
                    f"Accentuation key '{accented}' must be a single character.")
            missing = [c for c in folded if c not in self.letter_scores]
            if not folded or missing:
                raise ConfigurationError(
                    f"Accentuation '{accented}' -> '{folded}' folds to letters missing from the score table.")
        return self


class BonusPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(default=0, ge=0)

    @property
    def enabled(self) -> bool:
        return self.position > 0


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: bool
    unused_letters: Tuple[str, ...] = ()


class MatchCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    unused_letters: Tuple[str, ...] = ()


class ScoredCandidate(MatchCandidate):
    score: int = Field(ge=0)


class RoundResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    letters: str
    winner: Optional[ScoredCandidate] = None
    candidates_found: int = 0

    @property
    def has_winner(self) -> bool:
        return self.winner is not None
