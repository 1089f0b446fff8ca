"""Placeholder substitution for the bundled prompt templates."""

import re
from typing import Any, Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def fill_placeholders(template: str, values: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` placeholders found in ``values`` in a single pass.

    Unknown placeholders are left as they are, and substituted text is never
    scanned again, so issue text containing Jira markup such as ``{panel}``
    or ``{code}`` passes through untouched.
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        return str(values[name]) if name in values else match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


__all__ = ["fill_placeholders", "PLACEHOLDER_PATTERN"]
