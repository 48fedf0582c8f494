import os

ASSETS_ENV_VAR = "WORD_SCRAMBLE_ASSETS"
PACKAGED_ASSETS_DIR = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "assets")

SCORE_FILE = "score.json"
ACCENTUATION_FILE = "accentuation.json"
WORDS_FILE = "words.json"
MESSAGES_FILE = "messages.json"

UNUSED_LETTERS_SEPARATOR = ", "
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
# Longer bonus positions are clamped; no word reaches them.
MAX_BONUS_POSITION_DIGITS = 9
