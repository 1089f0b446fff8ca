"""Adapter package for Jira Describer."""

from .jira_api import JiraAPI, JiraConfig, compose_description

__all__ = ["JiraAPI", "JiraConfig", "compose_description"]
