"""Agents that turn issue data into section drafts."""

from .section_writer import SectionWriterAgent

__all__ = ["SectionWriterAgent"]
