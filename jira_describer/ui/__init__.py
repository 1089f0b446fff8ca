"""
User Interface module for Jira Describer.

This module contains the console prompts and the external editor bridge.
"""

from .console import ConsoleUI, read_text_block
from .editor import EditorError, ExternalEditor

__all__ = ["ConsoleUI", "read_text_block", "EditorError", "ExternalEditor"]
