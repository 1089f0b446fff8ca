"""Review text in an external editor that blocks until closed."""

from __future__ import annotations

import logging
import re
import shlex
import shutil
import subprocess
from typing import List

from jira_describer.utils import scoped_temp_file

logger = logging.getLogger(__name__)

HEADER = (
    "# Jira section: {name}\n"
    "# Edit the content below, save and close the editor to continue.\n"
    "# Lines starting with # are ignored.\n\n"
)


class EditorError(RuntimeError):
    pass


class ExternalEditor:
    def __init__(self, command: str = "code --wait", timeout: float = 300.0) -> None:
        self.argv: List[str] = shlex.split(command)
        self.timeout = timeout

    def is_available(self) -> bool:
        return bool(self.argv) and shutil.which(self.argv[0]) is not None

    def edit(self, content: str, section_name: str) -> str:
        """Open ``content`` in the editor and return the saved text.

        Raises :class:`EditorError` when the editor cannot be run. An empty
        result returns ``content`` unchanged.
        """
        if not self.is_available():
            raise EditorError(f"Editor '{' '.join(self.argv)}' is not available")

        slug = re.sub(r"\s+", "-", section_name.strip().lower()) or "section"
        initial = HEADER.format(name=section_name) + content
        with scoped_temp_file(initial, prefix=f"jira-{slug}-", suffix=".md") as path:
            logger.debug("Opening %s with %s", path, self.argv)
            try:
                subprocess.run([*self.argv, str(path)], check=True, timeout=self.timeout)
            except subprocess.TimeoutExpired as exc:
                raise EditorError(f"Editor did not close within {self.timeout:g} seconds") from exc
            except (OSError, subprocess.CalledProcessError) as exc:
                raise EditorError(f"Editor failed: {exc}") from exc
            edited = path.read_text(encoding="utf-8")

        text = strip_comment_lines(edited)
        if not text:
            logger.info("Editor returned no content for %s; keeping original", section_name)
            return content
        return text


def strip_comment_lines(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if not line.startswith("#")).strip()


__all__ = ["ExternalEditor", "EditorError", "strip_comment_lines"]
