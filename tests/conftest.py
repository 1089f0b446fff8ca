"""Shared fixtures and fakes for the test suite."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, List, Optional

import pytest

from jira_describer.llm_clients import AIResponse, BaseLLMClient
from jira_describer.models import Issue, TemplateSection


@pytest.fixture
def sections() -> List[TemplateSection]:
    return [
        TemplateSection(
            name="Context",
            required=True,
            background_color="#fceae6",
            title_background_color="#e76f51",
            generation_instruction="Explain why.",
        ),
        TemplateSection(
            name="Description",
            required=True,
            background_color="#edfaf9",
            title_background_color="#2a9d8f",
            generation_instruction="Explain what.",
        ),
        TemplateSection(
            name="Technical Requirements",
            required=False,
            background_color="#f0f3ff",
            title_background_color="#6366f1",
            generation_instruction="Explain how.",
        ),
        TemplateSection(
            name="Acceptance criteria",
            required=True,
            generation_instruction="List testable conditions.",
        ),
    ]


@pytest.fixture
def issue() -> Issue:
    return Issue(
        key="PROJ-1",
        summary="Add export button",
        description="Old description",
        issue_type="Story",
        project_key="PROJ",
        project_name="Project",
        status="Open",
        assignee="Ada",
        reporter="Grace",
        priority="High",
    )


class FakeLLM(BaseLLMClient):
    """Returns queued responses and records prompts."""

    def __init__(self, responses: Iterable[AIResponse] = ()) -> None:
        self.responses = deque(responses)
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> AIResponse:
        self.prompts.append(prompt)
        if self.responses:
            return self.responses.popleft()
        return AIResponse.ok("generated text")


class FakeJira:
    def __init__(self, issues: Optional[dict] = None, update_error: Optional[Exception] = None) -> None:
        self.issues = issues or {}
        self.update_error = update_error
        self.fetched: List[str] = []
        self.updates: List[tuple] = []

    def get_issue(self, issue_key: str) -> Issue:
        self.fetched.append(issue_key)
        result = self.issues[issue_key]
        if isinstance(result, Exception):
            raise result
        return result

    def update_description(self, issue_key: str, description: str) -> bool:
        if self.update_error is not None:
            error, self.update_error = self.update_error, None
            raise error
        self.updates.append((issue_key, description))
        return True

    def browse_url(self, issue_key: str) -> str:
        return f"https://jira.test/browse/{issue_key}"

    def close(self) -> None:
        pass


class ScriptedUI:
    """Stand-in for ConsoleUI answering prompts from a script.

    ``choices`` holds menu answers as option values, ``blocks`` holds text
    block answers, ``answers`` single-line answers and ``confirms`` booleans.
    """

    def __init__(
        self,
        choices: Iterable[Any] = (),
        blocks: Iterable[str] = (),
        answers: Iterable[str] = (),
        confirms: Iterable[bool] = (),
    ) -> None:
        self.choices = deque(choices)
        self.blocks = deque(blocks)
        self.answers = deque(answers)
        self.confirms = deque(confirms)
        self.messages: List[tuple] = []
        self.shown: List[tuple] = []
        self.menus: List[tuple] = []

    def _pop(self, queue: deque, what: str) -> Any:
        if not queue:
            raise AssertionError(f"UI script ran out of {what}")
        return queue.popleft()

    def choose(self, title, options):
        self.menus.append((title, [value for value, _ in options]))
        value = self._pop(self.choices, "choices")
        assert value in [v for v, _ in options], f"{value!r} not offered in {title!r}"
        return value

    def read_block(self, title):
        return self._pop(self.blocks, "blocks")

    def ask(self, text, default=""):
        return self._pop(self.answers, "answers")

    def confirm(self, text, default=False):
        return self._pop(self.confirms, "confirms")

    def info(self, message):
        self.messages.append(("info", message))

    def success(self, message):
        self.messages.append(("success", message))

    def warning(self, message):
        self.messages.append(("warning", message))

    def error(self, message):
        self.messages.append(("error", message))

    def show_text(self, title, text, style="cyan"):
        self.shown.append((title, text))

    def show_raw(self, text):
        self.shown.append(("raw", text))

    def show_issue(self, issue, url=""):
        self.shown.append(("issue", issue.key))

    def show_description(self, description):
        self.shown.append(("description", description))

    def show_section_header(self, section, index, total):
        pass
