"""Utility helpers for Jira Describer."""

from .jira import extract_plain_text, is_issue_key
from .prompt import fill_placeholders
from .tempfiles import scoped_temp_file

__all__ = [
    "extract_plain_text",
    "is_issue_key",
    "fill_placeholders",
    "scoped_temp_file",
]
