"""Section definitions and the panel template renderer."""

from .builder import TemplateBuilder, load_sections, panel_titles

__all__ = ["TemplateBuilder", "load_sections", "panel_titles"]
