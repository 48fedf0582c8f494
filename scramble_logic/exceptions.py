class WordScrambleError(Exception):
    pass


class ConfigurationError(WordScrambleError):
    """Raised when the loaded assets are missing or inconsistent."""


class UnknownLetterError(ConfigurationError):

    def __init__(self, letter: str, word: str):
        self.letter = letter
        self.word = word
        super().__init__(
            f"Letter '{letter}' in word '{word}' has no value in the score table.")
