"""
Models module for Jira Describer.

This module contains data models, schemas, and data structures.
"""

from .jira_models import Issue
from .template_models import SectionContent, TemplateSection

__all__ = ["Issue", "SectionContent", "TemplateSection"]
