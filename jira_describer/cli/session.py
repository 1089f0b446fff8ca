"""Interactive wizard that builds and publishes a Jira description.

The session is an explicit state machine::

    IDLE -> FETCHING_ISSUE -> SECTION_LOOP -> RENDERING -> AWAITING_MENU
        AWAITING_MENU -> UPDATING -> DONE
        AWAITING_MENU -> RESTARTING -> SECTION_LOOP
        AWAITING_MENU -> EXITING

Moving on to another issue after ``DONE`` starts a fresh pass of the same
loop instead of recursing.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from jira_describer.adapters import JiraAPI, compose_description
from jira_describer.agents import SectionWriterAgent
from jira_describer.exceptions import JiraClientError, NoContentProvidedError, TemplateError
from jira_describer.llm_clients import AIResponse, BaseLLMClient
from jira_describer.models import Issue, SectionContent, TemplateSection
from jira_describer.templates import TemplateBuilder
from jira_describer.ui import ConsoleUI, EditorError, ExternalEditor
from jira_describer.utils import is_issue_key


class State(Enum):
    IDLE = "idle"
    FETCHING_ISSUE = "fetching_issue"
    SECTION_LOOP = "section_loop"
    RENDERING = "rendering"
    AWAITING_MENU = "awaiting_menu"
    UPDATING = "updating"
    RESTARTING = "restarting"
    DONE = "done"
    EXITING = "exiting"


class FillMethod(Enum):
    AI = "ai"
    MANUAL = "manual"
    SKIP = "skip"


class ReviewAction(Enum):
    ACCEPT = "accept"
    EDIT = "edit"
    REGENERATE = "regenerate"
    MANUAL = "manual"


class MenuChoice(Enum):
    REPLACE = "replace"
    APPEND = "append"
    EDIT_PANELS = "edit_panels"
    SHOW = "show"
    RESTART = "restart"
    QUIT = "quit"


class PanelAction(Enum):
    IMPROVE = "improve"
    REGENERATE = "regenerate"
    MANUAL = "manual"
    KEEP = "keep"


REVIEW_OPTIONS = [
    (ReviewAction.ACCEPT, "Accept suggestion"),
    (ReviewAction.EDIT, "Edit suggestion"),
    (ReviewAction.REGENERATE, "Regenerate"),
    (ReviewAction.MANUAL, "Discard and write manually"),
]

MENU_OPTIONS = [
    (MenuChoice.REPLACE, "Replace description with this template"),
    (MenuChoice.APPEND, "Append template to existing description"),
    (MenuChoice.EDIT_PANELS, "Edit panels"),
    (MenuChoice.SHOW, "Show raw template (no update)"),
    (MenuChoice.RESTART, "Start over (rebuild template)"),
    (MenuChoice.QUIT, "Quit"),
]

PANEL_OPTIONS = [
    (PanelAction.IMPROVE, "Ask the AI to improve the current content"),
    (PanelAction.REGENERATE, "Replace with new AI-generated content"),
    (PanelAction.MANUAL, "Edit the content manually"),
    (PanelAction.KEEP, "Keep current content"),
]


class InteractiveSession:
    def __init__(
        self,
        jira: JiraAPI,
        writer: SectionWriterAgent,
        builder: TemplateBuilder,
        ui: ConsoleUI,
        editor: Optional[ExternalEditor] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.jira = jira
        self.writer = writer
        self.builder = builder
        self.ui = ui
        self.editor = editor
        self.logger = logger or logging.getLogger(__name__)
        self.state = State.IDLE

    def _transition(self, state: State) -> None:
        self.logger.debug("Session state %s -> %s", self.state.name, state.name)
        self.state = state

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------
    def run(self, issue_key: str) -> State:
        """Process ``issue_key`` and any follow-up issues the user asks for."""
        next_key: Optional[str] = issue_key
        while next_key:
            next_key = self.process_issue(next_key)
        return self.state

    def process_issue(self, issue_key: str) -> Optional[str]:
        """Run the wizard for one issue; return the next key to process, if any."""
        self._transition(State.FETCHING_ISSUE)
        self.ui.info(f"Fetching issue {issue_key}...")
        issue = self.jira.get_issue(issue_key)
        self.ui.show_issue(issue, self.jira.browse_url(issue.key))
        self.ui.show_description(issue.description)

        contents: List[SectionContent] = []
        template = ""
        append = False
        self._transition(State.SECTION_LOOP)
        while True:
            if self.state in (State.SECTION_LOOP, State.RESTARTING):
                contents = self.collect_sections(issue)
                self._transition(State.RENDERING)

            elif self.state is State.RENDERING:
                if not any(item.content.strip() for item in contents):
                    raise NoContentProvidedError()
                try:
                    template = self.builder.render(contents)
                except TemplateError as exc:
                    self.ui.error(str(exc))
                    rebuild = self.ui.confirm("Rebuild the template?", default=True)
                    self._transition(State.RESTARTING if rebuild else State.EXITING)
                    continue
                missing = self.builder.validate(template)
                if missing:
                    self.ui.warning(f"Missing required sections: {', '.join(missing)}")
                self.ui.show_text("Generated template", template, style="green")
                self._transition(State.AWAITING_MENU)

            elif self.state is State.AWAITING_MENU:
                choice = self.ui.choose("What would you like to do?", MENU_OPTIONS)
                if choice in (MenuChoice.REPLACE, MenuChoice.APPEND):
                    append = choice is MenuChoice.APPEND
                    self._transition(State.UPDATING)
                elif choice is MenuChoice.EDIT_PANELS:
                    contents = self.edit_panels(issue, contents)
                    self._transition(State.RENDERING)
                elif choice is MenuChoice.SHOW:
                    self.ui.show_raw(template)
                elif choice is MenuChoice.RESTART:
                    self.ui.info("Starting over...")
                    self._transition(State.RESTARTING)
                else:
                    self._transition(State.EXITING)

            elif self.state is State.UPDATING:
                if self.update_issue(issue, template, append):
                    self._transition(State.DONE)
                else:
                    self._transition(State.AWAITING_MENU)

            elif self.state is State.DONE:
                return self.prompt_next_issue()

            else:
                self.ui.info("Exiting without updating the issue.")
                return None

    # ------------------------------------------------------------------
    # Section loop
    # ------------------------------------------------------------------
    def collect_sections(self, issue: Issue) -> List[SectionContent]:
        sections = self.builder.sections
        contents = []
        for index, section in enumerate(sections, 1):
            self.ui.show_section_header(section, index, len(sections))
            text = self.fill_section(section, issue)
            contents.append(SectionContent(section=section, content=text))
        return contents

    def fill_section(self, section: TemplateSection, issue: Issue) -> str:
        options = [
            (FillMethod.AI, "AI suggestion (with optional context)"),
            (FillMethod.MANUAL, "Write it myself"),
        ]
        if not section.required:
            options.append((FillMethod.SKIP, "Skip this section"))

        while True:
            method = self.ui.choose(f"How do you want to fill '{section.name}'?", options)
            if method is FillMethod.SKIP:
                return ""
            if method is FillMethod.AI:
                text = self.draft_with_ai(section, issue)
            else:
                text = self.write_manually(section)
            if text or not section.required:
                return text
            self.ui.warning(f"'{section.name}' is required and cannot be left empty.")

    def draft_with_ai(self, section: TemplateSection, issue: Issue) -> str:
        context = self.ui.read_block("Context to guide the AI (optional)")
        while True:
            self.ui.info("Asking the AI for a suggestion...")
            response = self.writer.generate(section, issue, context)
            if not BaseLLMClient.is_usable(response):
                self.ui.error(f"AI error: {response.error}")
                self.ui.info("Continuing without AI suggestion; write the content manually.")
                return self.write_manually(section)

            suggestion = response.content.strip()
            self.ui.show_text(f"AI suggestion: {section.name}", suggestion, style="magenta")
            action = self.ui.choose("What do you want to do with this suggestion?", REVIEW_OPTIONS)
            if action is ReviewAction.ACCEPT:
                return suggestion
            if action is ReviewAction.EDIT:
                return self.edit_text(section, suggestion)
            if action is ReviewAction.MANUAL:
                return self.write_manually(section)
            extra = self.ui.read_block("Additional guidance for the next attempt (optional)")
            if extra:
                context = f"{context}\n{extra}".strip()

    def write_manually(self, section: TemplateSection) -> str:
        return self.ui.read_block(f"Write the content for '{section.name}'")

    def edit_text(self, section: TemplateSection, text: str) -> str:
        """Let the user revise ``text``; an empty revision keeps it."""
        if self.editor is not None and self.editor.is_available():
            try:
                edited = self.editor.edit(text, section.name)
                self.ui.success("Content updated from the editor.")
                return edited
            except EditorError as exc:
                self.ui.error(str(exc))
                self.ui.info("Falling back to inline editing.")
        self.ui.show_text("Current content", text)
        revised = self.ui.read_block("Enter the revised content (leave empty to keep the current text)")
        return revised or text

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def edit_panels(self, issue: Issue, contents: List[SectionContent]) -> List[SectionContent]:
        """Revise individual panels until the user is done."""
        contents = list(contents)
        while True:
            options: List[Tuple[Optional[int], str]] = [
                (i, item.section.name) for i, item in enumerate(contents) if item.content.strip()
            ]
            options.append((None, "Done editing"))
            index = self.ui.choose("Select a panel to edit", options)
            if index is None:
                return contents

            item = contents[index]
            self.ui.show_text(f"Current content: {item.section.name}", item.content)
            action = self.ui.choose("How would you like to change this panel?", PANEL_OPTIONS)
            new_content = item.content
            if action is PanelAction.IMPROVE:
                feedback = self.ui.read_block("What should be improved? (optional)")
                response = self.writer.improve(item.section, item.content, feedback)
                new_content = self._offer(response, item.content)
            elif action is PanelAction.REGENERATE:
                context = self.ui.read_block("Context to guide the AI (optional)")
                response = self.writer.generate(item.section, issue, context)
                new_content = self._offer(response, item.content)
            elif action is PanelAction.MANUAL:
                new_content = self.edit_text(item.section, item.content)

            if new_content != item.content:
                contents[index] = SectionContent(section=item.section, content=new_content)
                self.ui.success(f"Panel '{item.section.name}' updated.")

    def _offer(self, response: AIResponse, current: str) -> str:
        if not BaseLLMClient.is_usable(response):
            self.ui.error(f"AI error: {response.error}")
            return current
        self.ui.show_text("AI version", response.content.strip(), style="magenta")
        if self.ui.confirm("Use this version?", default=True):
            return response.content.strip()
        return current

    def update_issue(self, issue: Issue, template: str, append: bool) -> bool:
        """Write the template to Jira; return ``False`` if the update failed."""
        description = compose_description(issue.description, template, append)
        action = "Appending template to" if append else "Replacing description of"
        self.ui.info(f"{action} {issue.key}...")
        try:
            self.jira.update_description(issue.key, description)
        except JiraClientError as exc:
            self.logger.error("Update of %s failed: %s", issue.key, exc)
            self.ui.error(str(exc))
            return False
        self.ui.success("Template appended successfully!" if append else "Description replaced successfully!")
        self.ui.info(f"View the issue at {self.jira.browse_url(issue.key)}")
        return True

    def prompt_next_issue(self) -> Optional[str]:
        if not self.ui.confirm("Describe another Jira issue?", default=False):
            return None
        while True:
            key = self.ui.ask("Issue key (e.g. PROJ-123)").strip().upper()
            if is_issue_key(key):
                return key
            self.ui.warning("Please enter a key like PROJ-123.")


__all__ = ["InteractiveSession", "State", "MenuChoice", "FillMethod", "ReviewAction", "PanelAction"]
