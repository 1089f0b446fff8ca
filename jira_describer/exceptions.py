"""Exception hierarchy shared by the Jira, AI and template layers."""

from __future__ import annotations


class JiraDescriberError(Exception):
    """Base class for all errors raised by this package."""


# ----------------------------------------------------------------------
# Jira REST layer
# ----------------------------------------------------------------------
class JiraClientError(JiraDescriberError):
    """A call to the Jira REST API failed."""


class IssueNotFoundError(JiraClientError):
    def __init__(self, issue_key: str) -> None:
        super().__init__(f"Issue {issue_key} not found. Please check the issue key.")
        self.issue_key = issue_key


class AuthenticationError(JiraClientError):
    def __init__(self) -> None:
        super().__init__("Authentication failed. Please check your Jira token.")


class PermissionDeniedError(JiraClientError):
    def __init__(self, issue_key: str) -> None:
        super().__init__(
            f"Permission denied. You don't have permission to edit issue {issue_key}."
        )
        self.issue_key = issue_key


class RequestFailedError(JiraClientError):
    """Any other HTTP or network failure."""

    def __init__(
        self, message: str, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ----------------------------------------------------------------------
# AI command-line layer
# ----------------------------------------------------------------------
class AIClientError(JiraDescriberError):
    """The external AI command could not produce a suggestion."""


class ToolMissingError(AIClientError):
    pass


class AITimeoutError(AIClientError):
    pass


class ExecutionFailedError(AIClientError):
    pass


class EmptyResponseError(AIClientError):
    pass


# ----------------------------------------------------------------------
# Template / session layer
# ----------------------------------------------------------------------
class TemplateError(JiraDescriberError):
    """The collected section contents cannot be rendered."""


class MissingRequiredSectionError(TemplateError):
    def __init__(self, section_name: str) -> None:
        super().__init__(f'Required section "{section_name}" cannot be empty')
        self.section_name = section_name


class EmptyTemplateError(TemplateError):
    def __init__(self) -> None:
        super().__init__("No valid content provided for any sections")


class NoContentProvidedError(TemplateError):
    def __init__(self) -> None:
        super().__init__("No content provided for any sections")


__all__ = [
    "JiraDescriberError",
    "JiraClientError",
    "IssueNotFoundError",
    "AuthenticationError",
    "PermissionDeniedError",
    "RequestFailedError",
    "AIClientError",
    "ToolMissingError",
    "AITimeoutError",
    "ExecutionFailedError",
    "EmptyResponseError",
    "TemplateError",
    "MissingRequiredSectionError",
    "EmptyTemplateError",
    "NoContentProvidedError",
]
