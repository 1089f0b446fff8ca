import logging
from typing import Optional

import typer
import yaml

from jira_describer.adapters import JiraAPI, JiraConfig
from jira_describer.agents import SectionWriterAgent
from jira_describer.cli.session import InteractiveSession
from jira_describer.configs import Config, load_config, setup_logging
from jira_describer.exceptions import JiraClientError, NoContentProvidedError
from jira_describer.llm_clients import create_llm_client
from jira_describer.templates import TemplateBuilder, load_sections
from jira_describer.ui import ConsoleUI, ExternalEditor

logger = logging.getLogger(__name__)

app = typer.Typer(help="Build structured Jira issue descriptions with AI help", add_completion=False)


def build_session(config: Config, ui: ConsoleUI) -> InteractiveSession:
    """Wire the Jira client, AI writer, template builder and editor together."""
    jira = JiraAPI(JiraConfig(config.jira_base_url, config.jira_token, config.jira_timeout))
    writer = SectionWriterAgent(create_llm_client(config))
    builder = TemplateBuilder(load_sections(config.sections_file))
    editor = ExternalEditor(config.editor_command, config.editor_timeout) if config.use_editor else None
    return InteractiveSession(jira, writer, builder, ui, editor=editor)


@app.command()
def describe(
    issue_key: str = typer.Argument(..., help="Jira issue key, e.g. PROJ-123"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show warnings and errors"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
) -> None:
    """Fill in the description of ISSUE_KEY section by section."""
    ui = ConsoleUI()
    level = logging.DEBUG if verbose else logging.WARNING if quiet else None
    try:
        config = load_config(config_path)
        setup_logging(config, level)
        session = build_session(config, ui)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        # pydantic ValidationError is a ValueError
        ui.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1)
    logger.info("Starting session for %s against %s", issue_key, config.jira_base_url)

    try:
        session.run(issue_key.strip().upper())
    except (KeyboardInterrupt, EOFError):
        ui.warning("Interrupted. Nothing collected in this run was saved.")
        raise typer.Exit(code=130)
    except (JiraClientError, NoContentProvidedError) as exc:
        ui.error(str(exc))
        raise typer.Exit(code=1)
    except Exception:
        logger.exception("Unexpected error")
        ui.error("Unexpected error. Run with --verbose for details.")
        raise typer.Exit(code=1)
    finally:
        session.jira.close()
    ui.success("Goodbye!")


if __name__ == "__main__":
    app()
