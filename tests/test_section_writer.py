"""Tests for jira_describer.agents.section_writer."""

import pytest

from jira_describer.agents import SectionWriterAgent
from jira_describer.agents.section_writer import DEFAULT_FEEDBACK, format_issue_info
from jira_describer.llm_clients import AIResponse
from jira_describer.models import TemplateSection

from conftest import FakeLLM


@pytest.fixture
def llm():
    return FakeLLM([AIResponse.ok("draft")])


@pytest.fixture
def writer(llm):
    return SectionWriterAgent(llm)


class TestIssueInfo:
    def test_lists_all_known_fields(self, issue):
        info = format_issue_info(issue)
        assert "• Issue Key: PROJ-1" in info
        assert "• Project: Project (PROJ)" in info
        assert "• Assignee: Ada" in info
        assert "• Priority: High" in info
        assert "• Current Description: Old description" in info

    def test_optional_fields_omitted(self, issue):
        bare = issue.model_copy(update={"assignee": None, "priority": None, "description": None})
        info = format_issue_info(bare)
        assert "Assignee" not in info
        assert "Priority" not in info
        assert "Current Description" not in info


class TestBuildPrompt:
    def test_contains_system_issue_and_section_parts(self, writer, sections, issue):
        prompt = writer.build_prompt(sections[0], issue, "Customers asked for it")
        assert prompt.startswith("You are a Senior Software Engineer")
        assert "Summary: Add export button" in prompt
        assert "Section to generate: Context" in prompt
        assert "Requirements: Explain why." in prompt
        assert "Additional context from user:\nCustomers asked for it" in prompt
        assert "under 100 words" in prompt

    def test_blank_context_is_left_out(self, writer, sections, issue):
        prompt = writer.build_prompt(sections[1], issue, "   ")
        assert "Additional context from user" not in prompt
        assert "Focus on WHAT and WHY only" in prompt

    def test_unknown_section_uses_generic_directive(self, writer, issue):
        prompt = writer.build_prompt(TemplateSection(name="Risks"), issue)
        assert "Do NOT start with section labels" in prompt

    def test_braces_in_issue_text_survive(self, writer, sections, issue):
        noisy = issue.model_copy(update={"description": "{panel:title=Old}x{panel}"})
        prompt = writer.build_prompt(sections[0], noisy)
        assert "{panel:title=Old}x{panel}" in prompt


class TestGenerate:
    def test_generate_sends_prompt(self, writer, llm, sections, issue):
        response = writer.generate(sections[3], issue, "")
        assert response.content == "draft"
        assert "Section to generate: Acceptance criteria" in llm.prompts[0]

    def test_improve_uses_default_feedback(self, writer, llm, sections):
        writer.improve(sections[0], "current text")
        prompt = llm.prompts[0]
        assert "Current content:\ncurrent text" in prompt
        assert DEFAULT_FEEDBACK in prompt
        assert "under 100 words" in prompt
        assert 'labels like "Context:"' in prompt

    def test_improve_with_feedback(self, writer, llm, sections):
        writer.improve(sections[1], "current", "make it shorter")
        assert "make it shorter" in llm.prompts[0]
        assert "under 150 words" in llm.prompts[0]
