"""Abstract base class for LLM clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

from jira_describer.exceptions import AIClientError

logger = logging.getLogger(__name__)


@dataclass
class AIResponse:
    """Outcome of a single generation request."""

    content: str
    success: bool
    error: Optional[str] = None
    exception: Optional[AIClientError] = None

    @classmethod
    def ok(cls, content: str) -> "AIResponse":
        return cls(content=content, success=True)

    @classmethod
    def failure(cls, exc: AIClientError) -> "AIResponse":
        return cls(content="", success=False, error=str(exc), exception=exc)


class BaseLLMClient(ABC):
    """Interface that all LLM clients must implement."""

    @abstractmethod
    def generate(self, prompt: str) -> AIResponse:
        """Return the model output for ``prompt``; must not raise."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def is_usable(response: AIResponse) -> bool:
        """Return ``True`` when ``response`` carries text worth showing."""
        return bool(
            response.success and response.content and response.content.strip() and not response.error
        )


__all__ = ["AIResponse", "BaseLLMClient"]
