"""Terminal UI primitives built on :mod:`rich`."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from jira_describer.models import Issue, TemplateSection

SKIP_TOKEN = "skip"
T = TypeVar("T")


def read_text_block(read_line: Callable[[], str], skip_token: str = SKIP_TOKEN) -> str:
    """Read a block of free text, one line per ``read_line`` call.

    Input ends after two consecutive empty lines or at end of input. A line
    consisting only of ``skip_token`` (any case) abandons the block and returns
    an empty string. Single blank lines inside the block are kept; the result
    is stripped of surrounding whitespace.
    """
    lines: List[str] = []
    blank_run = 0
    while True:
        try:
            line = read_line()
        except EOFError:
            break
        stripped = line.strip()
        if stripped.lower() == skip_token:
            return ""
        if not stripped:
            blank_run += 1
            if blank_run >= 2:
                break
        else:
            blank_run = 0
        lines.append(line.rstrip("\r\n"))
    return "\n".join(lines).strip()


class ConsoleUI:
    """Prompts and panels shown to the operator."""

    def __init__(
        self,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.console = console or Console()
        self._input = input_func or self.console.input

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ[/] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✔[/] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]✖[/] {escape(message)}")

    def show_text(self, title: str, text: str, style: str = "cyan") -> None:
        self.console.print(Panel(Text(text), title=title, border_style=style, padding=(1, 2)))

    def show_raw(self, text: str) -> None:
        self.console.print(Text(text))

    def show_issue(self, issue: Issue, url: str = "") -> None:
        body = Text()
        body.append("Issue: ", style="bold blue")
        body.append(f"{issue.key}\n", style="yellow")
        body.append("Title: ", style="bold blue")
        body.append(issue.summary)
        if url:
            body.append(f"\n{url}", style="dim")
        self.console.print(Panel(body, border_style="blue", padding=(1, 2)))

    def show_description(self, description: Optional[str]) -> None:
        self.show_text("Current description", description or "(no description)")

    def show_section_header(self, section: TemplateSection, index: int, total: int) -> None:
        flag = "required" if section.required else "optional"
        self.console.print(Rule(f"[bold cyan]{escape(section.name)}[/] [dim]({flag}, {index}/{total})[/]"))
        if section.user_prompt:
            self.console.print(f"[dim]{escape(section.user_prompt)}[/]")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def ask(self, text: str, default: str = "") -> str:
        suffix = f" [dim]\\[{default}][/]" if default else ""
        raw = self._input(f"[cyan]▸[/] {escape(text)}{suffix}: ").strip()
        return raw or default

    def confirm(self, text: str, default: bool = False) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            raw = self.ask(f"{text} ({hint})").lower()
            if not raw:
                return default
            if raw in {"y", "yes"}:
                return True
            if raw in {"n", "no"}:
                return False
            self.warning("Please answer y or n.")

    def choose(self, title: str, options: Sequence[Tuple[T, str]]) -> T:
        """Show a numbered menu and return the value of the chosen option."""
        self.console.print(f"\n[bold]{escape(title)}[/]")
        for i, (_, label) in enumerate(options, 1):
            self.console.print(f"  [cyan]{i:>2}[/]  {escape(label)}")
        while True:
            raw = self.ask("Choose")
            try:
                idx = int(raw) - 1
            except ValueError:
                idx = -1
            if 0 <= idx < len(options):
                return options[idx][0]
            self.warning(f"Enter a number between 1 and {len(options)}.")

    def read_block(self, title: str) -> str:
        hint = f'press Enter twice to finish, or type "{SKIP_TOKEN}" to leave empty'
        self.console.print(f"[bold]{escape(title)}[/] [dim]({hint})[/]")
        return read_text_block(lambda: self._input("[dim]│[/] "))


__all__ = ["ConsoleUI", "read_text_block", "SKIP_TOKEN"]
