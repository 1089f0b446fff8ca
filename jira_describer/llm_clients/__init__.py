"""LLM client implementations."""

import logging

from jira_describer.configs.config import Config
from .base_llm_client import AIResponse, BaseLLMClient
from .claude_cli_client import ClaudeCLIClient

logger = logging.getLogger(__name__)


def create_llm_client(config: Config) -> BaseLLMClient:
    """Return the configured command-line AI client."""
    logger.debug("Creating LLM client for command %s", config.ai_command)
    return ClaudeCLIClient(
        command=config.ai_command,
        args=config.ai_args,
        timeout=config.ai_timeout,
    )


__all__ = ["AIResponse", "BaseLLMClient", "ClaudeCLIClient", "create_llm_client"]
