"""Jira-related helper utilities."""
from typing import Any, List
import logging
import re

logger = logging.getLogger(__name__)

ISSUE_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*-\d+$")


def extract_plain_text(content: Any) -> str:
    """Return the text of a description field.

    API v2 returns wiki markup as a string, which is passed through. An
    Atlassian Document Format value is flattened so each block node becomes
    one line and inline text runs are concatenated.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content

    lines: List[str] = []

    def _inline(node: Any) -> str:
        if not isinstance(node, dict):
            return ""
        if node.get("type") == "hardBreak":
            return "\n"
        return str(node.get("text") or "") + "".join(_inline(c) for c in node.get("content", []))

    def _blocks(node: Any) -> None:
        if isinstance(node, list):
            for item in node:
                _blocks(item)
            return
        if not isinstance(node, dict):
            return
        children = node.get("content", [])
        if children and all("text" in c or c.get("type") == "hardBreak" for c in children if isinstance(c, dict)):
            lines.append(_inline(node))
        elif "text" in node:
            lines.append(str(node["text"]))
        else:
            _blocks(children)

    logger.debug("Flattening structured description content")
    _blocks(content)
    return "\n".join(line for line in lines if line.strip()).strip()


def is_issue_key(text: str) -> bool:
    """Return ``True`` when ``text`` looks like ``PROJ-123``."""
    return bool(ISSUE_KEY_PATTERN.match(text.strip().upper()))


__all__ = ["extract_plain_text", "is_issue_key", "ISSUE_KEY_PATTERN"]
