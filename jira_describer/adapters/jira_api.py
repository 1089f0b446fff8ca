"""Minimal Jira REST client adapter."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from jira_describer.exceptions import (
    AuthenticationError,
    IssueNotFoundError,
    PermissionDeniedError,
    RequestFailedError,
)
from jira_describer.models import Issue

API_PREFIX = "/rest/api/2"


def _build_auth_headers(auth_token: str) -> Dict[str, str]:
    """Return headers for Jira bearer-token auth."""
    token = auth_token.strip()
    if not token.lower().startswith("bearer "):
        token = f"Bearer {token}"
    return {
        "Authorization": token,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


@dataclass
class JiraConfig:
    base_url: str
    auth_token: str
    timeout: Optional[float] = None


class JiraAPI:
    """Simple wrapper around the Jira REST API."""

    def __init__(
        self,
        config: JiraConfig,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or requests.Session()
        # Normalize base URL to avoid double slashes
        self.config.base_url = self.config.base_url.rstrip("/")
        self.session.headers.update(_build_auth_headers(config.auth_token))

    def _issue_url(self, issue_key: str) -> str:
        return f"{self.config.base_url}{API_PREFIX}/issue/{issue_key}"

    def browse_url(self, issue_key: str) -> str:
        return f"{self.config.base_url}/browse/{issue_key}"

    def get_issue(self, issue_key: str) -> Issue:
        """Fetch a single issue. Raises a :class:`JiraClientError` on failure."""
        url = self._issue_url(issue_key)
        self.logger.debug("Fetching issue %s", issue_key)
        try:
            resp = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise RequestFailedError(
                f"Network error while fetching issue {issue_key}: {exc}"
            ) from exc
        self.logger.info("GET %s -> %s", url, resp.status_code)

        if resp.status_code == 404:
            raise IssueNotFoundError(issue_key)
        if resp.status_code == 401:
            raise AuthenticationError()
        if not resp.ok:
            raise RequestFailedError(
                f"Failed to fetch issue {issue_key}: {resp.status_code} {resp.reason}",
                status_code=resp.status_code,
                body=resp.text,
            )
        try:
            data = resp.json()
        except ValueError as exc:
            raise RequestFailedError(
                f"Invalid JSON returned for issue {issue_key}",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc
        return Issue.from_api(data)

    def update_description(self, issue_key: str, description: str) -> bool:
        """Replace the description of ``issue_key`` with ``description``."""
        url = self._issue_url(issue_key)
        payload = {"fields": {"description": description}}
        self.logger.debug("Updating description of %s (%d chars)", issue_key, len(description))
        try:
            resp = self.session.put(url, json=payload, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise RequestFailedError(
                f"Network error while updating issue {issue_key}: {exc}"
            ) from exc
        self.logger.info("PUT %s -> %s", url, resp.status_code)

        if resp.status_code == 404:
            raise IssueNotFoundError(issue_key)
        if resp.status_code == 401:
            raise AuthenticationError()
        if resp.status_code == 403:
            raise PermissionDeniedError(issue_key)
        if not resp.ok:
            body = resp.text or ""
            raise RequestFailedError(
                f"Failed to update issue: {resp.status_code} {resp.reason}. {body}".strip(),
                status_code=resp.status_code,
                body=body,
            )
        return True

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self.session.close()


def compose_description(existing: str | None, template: str, append: bool) -> str:
    """Return the description to send for replace or append mode."""
    if not append:
        return template
    return f"{existing or ''}\n\n{template}"
