"""Render collected section contents into Jira panel markup."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import yaml

from jira_describer.exceptions import EmptyTemplateError, MissingRequiredSectionError, TemplateError
from jira_describer.models import SectionContent, TemplateSection

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS_PATH = Path(__file__).parent / "sections.yml"
PANEL_CLOSE = "{panel}"
PANEL_TITLE_PATTERN = re.compile(r"\{panel:title=([^|}]*)")


def load_sections(path: str | Path | None = None) -> List[TemplateSection]:
    """Load the ordered section list from a YAML file."""
    path = Path(path) if path else DEFAULT_SECTIONS_PATH
    logger.debug("Loading template sections from %s", path)
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []
    if not isinstance(raw, list):
        raise ValueError(f"Section file {path} must contain a list of sections")

    sections = [TemplateSection(**item) for item in raw]
    seen = set()
    for section in sections:
        if section.name in seen:
            raise ValueError(f"Duplicate section name '{section.name}' in {path}")
        seen.add(section.name)
    logger.info("Loaded %d template sections", len(sections))
    return sections


def panel_open(section: TemplateSection) -> str:
    return (
        f"{{panel:title={section.name}|borderStyle=none"
        f"|titleBGColor={section.title_background_color}"
        f"|bgColor={section.background_color}}}"
    )


def panel_titles(text: str) -> List[str]:
    """Return the titles of all panels in ``text`` in order of appearance."""
    return PANEL_TITLE_PATTERN.findall(text or "")


class TemplateBuilder:
    """Holds the section definitions and renders finished descriptions."""

    def __init__(self, sections: Optional[Iterable[TemplateSection]] = None) -> None:
        self._sections = list(sections) if sections is not None else load_sections()

    @property
    def sections(self) -> List[TemplateSection]:
        return list(self._sections)

    def get_section(self, name: str) -> Optional[TemplateSection]:
        return next((s for s in self._sections if s.name == name), None)

    def render(self, contents: Sequence[SectionContent]) -> str:
        """Return panel markup for every non-empty entry of ``contents``.

        Empty optional sections are skipped; an empty required section raises
        :class:`MissingRequiredSectionError`. If nothing is left to emit,
        :class:`EmptyTemplateError` is raised.
        """
        parts: List[str] = []
        for item in contents:
            text = item.content.strip()
            if not text:
                if item.section.required:
                    raise MissingRequiredSectionError(item.section.name)
                logger.debug("Skipping empty optional section %s", item.section.name)
                continue
            parts.extend([panel_open(item.section), text, PANEL_CLOSE])

        if not parts:
            raise EmptyTemplateError()
        logger.debug("Rendered %d panels", len(parts) // 3)
        return "\n".join(parts)

    def validate(self, template: str) -> List[str]:
        """Return the names of required sections whose panel is missing."""
        missing = [
            s.name
            for s in self._sections
            if s.required and f"{{panel:title={s.name}" not in (template or "")
        ]
        if missing:
            logger.debug("Template is missing required sections: %s", missing)
        return missing

    def preview(self, contents: Sequence[SectionContent]) -> str:
        try:
            return self.render(contents)
        except TemplateError as exc:
            return f"Error generating preview: {exc}"


__all__ = [
    "TemplateBuilder",
    "load_sections",
    "panel_open",
    "panel_titles",
    "DEFAULT_SECTIONS_PATH",
    "PANEL_CLOSE",
]
