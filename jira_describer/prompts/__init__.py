"""Prompt templates sent to the AI command.

``system.txt`` holds the shared writing rules, ``section.txt`` drafts one
section and ``improve.txt`` revises existing section text.
"""

import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=None)
def load_prompt(filename: str) -> str:
    """Return the text of a bundled prompt file.

    A missing file means a broken installation, so ``FileNotFoundError``
    propagates to the caller.
    """
    filepath = PROMPTS_DIR / filename
    logger.debug("Loading prompt file: %s", filepath)
    return filepath.read_text(encoding="utf-8")


__all__ = ["load_prompt", "PROMPTS_DIR"]
