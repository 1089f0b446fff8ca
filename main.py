"""CLI entry point for Jira Describer.

Runs the interactive description wizard for the issue key given on the
command line::

    python main.py PROJ-123 --verbose
"""

from jira_describer.cli.main import app


if __name__ == "__main__":
    app()
