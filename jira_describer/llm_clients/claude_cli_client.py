"""Client that shells out to the ``claude`` command-line tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import List, Optional, Sequence

from jira_describer.exceptions import (
    AIClientError,
    AITimeoutError,
    EmptyResponseError,
    ExecutionFailedError,
    ToolMissingError,
)
from jira_describer.llm_clients.base_llm_client import AIResponse, BaseLLMClient
from jira_describer.utils import scoped_temp_file

DEFAULT_TIMEOUT = 60.0


class ClaudeCLIClient(BaseLLMClient):
    """Run an external AI command with the prompt on its standard input.

    The prompt goes through a temporary file rather than argv so long issue
    descriptions do not hit command-line length limits.
    """

    def __init__(
        self,
        command: str = "claude",
        args: Optional[Sequence[str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
    ) -> None:
        self.command = command
        self.args: List[str] = list(args) if args is not None else ["--print"]
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.logger.debug(
            "Initializing ClaudeCLIClient with command=%s args=%s timeout=%s",
            command,
            self.args,
            timeout,
        )

    def generate(self, prompt: str) -> AIResponse:
        """Run the command and wrap the outcome; errors never escape."""
        try:
            content = self._run(prompt)
        except AIClientError as exc:
            self.logger.warning("AI generation failed: %s", exc)
            return AIResponse.failure(exc)
        self.logger.info("AI generation returned %d characters", len(content))
        return AIResponse.ok(content)

    def _run(self, prompt: str) -> str:
        executable = shutil.which(self.command)
        if executable is None:
            raise ToolMissingError(
                f"AI command '{self.command}' not found on PATH. "
                "Please install it first (e.g. https://claude.ai/cli)."
            )

        cmd = [executable, *self.args]
        self.logger.debug("Running %s with a %d character prompt", cmd, len(prompt))
        try:
            with scoped_temp_file(prompt, prefix="claude-prompt-") as path:
                with open(path, "r", encoding="utf-8") as stdin:
                    result = subprocess.run(
                        cmd,
                        stdin=stdin,
                        capture_output=True,
                        encoding="utf-8",
                        errors="replace",
                        timeout=self.timeout,
                    )
        except subprocess.TimeoutExpired as exc:
            raise AITimeoutError(
                f"AI command timed out after {self.timeout:g} seconds. Try with shorter context."
            ) from exc
        except OSError as exc:
            raise ExecutionFailedError(f"Failed to run AI command: {exc}") from exc

        stdout = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()
        if result.returncode != 0:
            detail = stderr or stdout or "no output"
            raise ExecutionFailedError(
                f"AI command execution failed with exit code {result.returncode}: {detail}"
            )
        if not stdout:
            if stderr:
                raise EmptyResponseError(f"AI command returned no output: {stderr}")
            raise EmptyResponseError("AI command returned empty response")
        if stderr:
            self.logger.debug("AI command stderr: %s", stderr)
        return stdout


__all__ = ["ClaudeCLIClient", "DEFAULT_TIMEOUT"]
