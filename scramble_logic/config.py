import json
import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models import GameContext, Messages
from .constants import (ACCENTUATION_FILE, ASSETS_ENV_VAR, MESSAGES_FILE,
                        PACKAGED_ASSETS_DIR, SCORE_FILE, WORDS_FILE)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_assets_dir(assets_dir: Optional[str] = None) -> str:
    possible_paths = [
        assets_dir,
        os.environ.get(ASSETS_ENV_VAR),
        PACKAGED_ASSETS_DIR,
    ]
    for path in possible_paths:
        if not path:
            continue
        if os.path.isdir(path):
            return path
        logger.warning(f"Assets directory {path} does not exist, skipping.")
    raise ConfigurationError("No assets directory could be found.")


def get_file_contents(assets_dir: str, file_name: str) -> Any:
    path = os.path.join(assets_dir, file_name)
    if not os.path.exists(path):
        raise ConfigurationError(
            f"Could not load {file_name}: the file does not exist in {assets_dir}.")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Could not parse {file_name}: {e}") from e


def _load_words(assets_dir: str) -> List[str]:
    contents = get_file_contents(assets_dir, WORDS_FILE)
    words = contents.get("words") if isinstance(contents, dict) else None
    if not isinstance(words, list):
        raise ConfigurationError(
            f"{WORDS_FILE} must hold an object with a 'words' list.")
    loaded = []
    for entry in words:
        if not isinstance(entry, str):
            logger.warning(f"Ignoring non-text entry {entry!r} in {WORDS_FILE}.")
            continue
        loaded.append(entry)
    return loaded


def load_context(assets_dir: Optional[str] = None) -> GameContext:
    """Load the score table, accentuation table, dictionary and messages once."""
    assets_dir = resolve_assets_dir(assets_dir)
    letter_scores: Dict[str, int] = get_file_contents(assets_dir, SCORE_FILE)
    accent_folds: Dict[str, str] = get_file_contents(assets_dir, ACCENTUATION_FILE)
    words = _load_words(assets_dir)

    messages_path = os.path.join(assets_dir, MESSAGES_FILE)
    if os.path.exists(messages_path):
        messages = get_file_contents(assets_dir, MESSAGES_FILE)
    else:
        logger.warning(f"{MESSAGES_FILE} not found in {assets_dir}. Using default messages.")
        messages = {}

    try:
        context = GameContext(
            letter_scores=letter_scores,
            accent_folds=accent_folds,
            words=tuple(words),
            messages=Messages(**messages),
        )
    except (TypeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid assets in {assets_dir}: {e}") from e

    logger.info(
        f"Loaded {len(context.words)} words and {len(context.letter_scores)} letter scores from {assets_dir}")
    return context
