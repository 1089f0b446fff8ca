"""
Jira Describer - Main Package

Interactive assistant that builds structured Jira issue descriptions from
AI drafts and manual edits, then writes them back through the REST API.
"""

__version__ = "1.0.0"
__author__ = "Dimitar Navushtanov"

# Main package exports
__all__ = [
    "configs",
    "adapters",
    "llm_clients",
    "templates",
    "agents",
    "ui",
    "cli",
]
