"""Agent that drafts and refines template sections with the AI client."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from jira_describer.llm_clients import AIResponse, BaseLLMClient
from jira_describer.models import Issue, TemplateSection
from jira_describer.prompts import load_prompt
from jira_describer.utils import fill_placeholders

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIMIT = 150
DEFAULT_FEEDBACK = "Please improve and refine this content while keeping the core message."

# section name -> (word limit, closing directive)
SECTION_DIRECTIVES: Dict[str, Tuple[int, str]] = {
    "Context": (
        100,
        "CRITICAL: Keep your response under 100 words and focus only on essential "
        'background context. Do NOT start with "Context:" or similar labels.',
    ),
    "Description": (
        150,
        "CRITICAL: Focus on WHAT and WHY only. Avoid technical implementation details (HOW). "
        'Do NOT start with "Description:" or similar labels. '
        "Keep your response under 150 words and focus on business goals and objectives.",
    ),
    "Technical Requirements": (
        150,
        "CRITICAL: Focus on HOW the work will be implemented. Include technical details, "
        'constraints, and specifications. Do NOT start with "Technical Requirements:" or '
        "similar labels. Keep your response under 150 words and focus on technical "
        "implementation details.",
    ),
    "Acceptance criteria": (
        150,
        "CRITICAL: Focus on specific, testable conditions. Use clear bullet points or "
        'numbered lists. Do NOT start with "Acceptance Criteria:" or similar labels. '
        "Keep your response under 150 words.",
    ),
}
GENERIC_DIRECTIVE = (
    "IMPORTANT: Keep your response under 150 words and focus only on essential "
    "information. Do NOT start with section labels or repeat the section name."
)


def format_issue_info(issue: Issue) -> str:
    """Return the bullet list describing ``issue`` in prompts."""
    info = [
        f"• Issue Key: {issue.key}",
        f"• Summary: {issue.summary}",
        f"• Issue Type: {issue.issue_type}",
        f"• Project: {issue.project_name} ({issue.project_key})",
        f"• Status: {issue.status}",
    ]
    if issue.assignee:
        info.append(f"• Assignee: {issue.assignee}")
    info.append(f"• Reporter: {issue.reporter}")
    if issue.priority:
        info.append(f"• Priority: {issue.priority}")
    if issue.description:
        info.append(f"• Current Description: {issue.description}")
    return "\n".join(info)


class SectionWriterAgent:
    """Builds section prompts and asks the AI client for drafts."""

    def __init__(self, client: BaseLLMClient) -> None:
        logger.debug("Initializing SectionWriterAgent with %s", client.__class__.__name__)
        self.client = client
        self.system_prompt = load_prompt("system.txt").strip()
        self.section_prompt = load_prompt("section.txt")
        self.improve_prompt = load_prompt("improve.txt")

    @staticmethod
    def word_limit(section: TemplateSection) -> int:
        return SECTION_DIRECTIVES.get(section.name, (DEFAULT_WORD_LIMIT, ""))[0]

    @staticmethod
    def directive(section: TemplateSection) -> str:
        return SECTION_DIRECTIVES.get(section.name, (DEFAULT_WORD_LIMIT, GENERIC_DIRECTIVE))[1]

    def build_prompt(self, section: TemplateSection, issue: Issue, user_context: str = "") -> str:
        """Return the full generation prompt for ``section``."""
        context_block = ""
        if user_context and user_context.strip():
            context_block = f"Additional context from user:\n{user_context.strip()}\n\n"
        return fill_placeholders(
            self.section_prompt,
            {
                "system": self.system_prompt,
                "issue_info": format_issue_info(issue),
                "section_name": section.name,
                "instruction": section.generation_instruction,
                "user_context": context_block,
                "directive": self.directive(section),
            },
        ).strip()

    def build_improve_prompt(self, section: TemplateSection, content: str, feedback: str = "") -> str:
        return fill_placeholders(
            self.improve_prompt,
            {
                "system": self.system_prompt,
                "section_name": section.name,
                "content": content,
                "feedback": feedback.strip() or DEFAULT_FEEDBACK,
                "word_limit": self.word_limit(section),
            },
        ).strip()

    def generate(self, section: TemplateSection, issue: Issue, user_context: str = "") -> AIResponse:
        logger.info("Generating content for section %s of %s", section.name, issue.key)
        return self.client.generate(self.build_prompt(section, issue, user_context))

    def improve(self, section: TemplateSection, content: str, feedback: str = "") -> AIResponse:
        logger.info("Improving content for section %s", section.name)
        return self.client.generate(self.build_improve_prompt(section, content, feedback))


__all__ = ["SectionWriterAgent", "format_issue_info", "SECTION_DIRECTIVES", "DEFAULT_FEEDBACK"]
