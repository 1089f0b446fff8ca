from typing import Any, Dict, Optional

from pydantic import BaseModel

from jira_describer.utils.jira import extract_plain_text


class Issue(BaseModel):
    key: str
    summary: str
    description: Optional[str] = None
    issue_type: str = ""
    project_key: str = ""
    project_name: str = ""
    status: str = ""
    assignee: Optional[str] = None
    reporter: str = ""
    priority: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Issue":
        """Build an :class:`Issue` from a ``/rest/api/2/issue`` payload."""
        fields = data.get("fields") or {}

        def _name(value: Any, attr: str = "name") -> Optional[str]:
            if isinstance(value, dict):
                return value.get(attr)
            return None

        project = fields.get("project") or {}
        description = fields.get("description")
        return cls(
            key=data.get("key", ""),
            summary=fields.get("summary") or "",
            description=extract_plain_text(description) if description else None,
            issue_type=_name(fields.get("issuetype")) or "",
            project_key=project.get("key", ""),
            project_name=project.get("name", ""),
            status=_name(fields.get("status")) or "",
            assignee=_name(fields.get("assignee"), "displayName"),
            reporter=_name(fields.get("reporter"), "displayName") or "",
            priority=_name(fields.get("priority")),
        )
