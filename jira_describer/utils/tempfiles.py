"""Temporary files that never outlive the block using them."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


@contextmanager
def scoped_temp_file(
    content: str = "", *, prefix: str = "jira-describer-", suffix: str = ".txt"
) -> Iterator[Path]:
    """Create a uniquely named file holding ``content`` and remove it on exit.

    The file is deleted when the block finishes, whether it returns normally,
    raises, or is interrupted.
    """
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.debug("Created temporary file %s", path)
        yield path
    finally:
        try:
            path.unlink()
            logger.debug("Removed temporary file %s", path)
        except FileNotFoundError:
            pass


__all__ = ["scoped_temp_file"]
