"""
Domain Entities - Typed records decoded from Jira JSON documents.

Issues and items are immutable once decoded. IssuePage is the only mutable
structure and lives for the duration of a single filter listing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..constants import ARRAY_TYPE, MULTISELECT_CUSTOM_TYPE, JiraField


def _nested_name(fields: dict[str, Any], key: str) -> str:
    """Return fields[key]['name'], or an empty string when the object is missing."""
    value = fields.get(key)
    if not value:
        return ""
    return value.get(JiraField.NAME) or ""


@dataclass(frozen=True)
class Issue:
    """A Jira issue as seen by the connector."""

    id: int
    key: str
    summary: str = ""
    description: str = ""
    project: str = ""
    issue_type: str = ""
    assignee: str = ""
    priority: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Issue:
        """Decode one issue object from a search page or single-issue response."""
        fields = data.get(JiraField.FIELDS) or {}
        return cls(
            id=int(data[JiraField.ID]),
            key=data[JiraField.KEY],
            summary=fields.get(JiraField.SUMMARY) or "",
            description=fields.get(JiraField.DESCRIPTION) or "",
            project=_nested_name(fields, JiraField.PROJECT),
            issue_type=_nested_name(fields, JiraField.ISSUETYPE),
            assignee=_nested_name(fields, JiraField.ASSIGNEE),
            priority=_nested_name(fields, JiraField.PRIORITY),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
            "description": self.description,
            "project": self.project,
            "issue_type": self.issue_type,
            "assignee": self.assignee,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class Item:
    """An (id, name) pair: priority, project, custom field or workflow action."""

    id: str
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Item:
        return cls(id=str(data[JiraField.ID]), name=data[JiraField.NAME])

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass
class IssuePage:
    """
    Accumulated search results for one filter listing.

    ``total_available`` comes from the first page and is never recomputed,
    even if later pages report a different total.
    """

    issues: list[Issue] = field(default_factory=list)
    total_available: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> IssuePage:
        return cls(
            issues=_decode_issues(data),
            total_available=int(data.get(JiraField.TOTAL, 0)),
        )

    def add_issues(self, data: dict[str, Any]) -> None:
        """Append the issues of a subsequent page in server order."""
        self.issues.extend(_decode_issues(data))


def _decode_issues(data: dict[str, Any]) -> list[Issue]:
    return [Issue.from_json(issue) for issue in data.get(JiraField.ISSUES, [])]


@dataclass(frozen=True)
class FieldTypeDescriptor:
    """The part of a field's edit-metadata schema that shapes update bodies."""

    type: str
    custom: str | None = None

    @property
    def is_array(self) -> bool:
        return self.type == ARRAY_TYPE

    @property
    def is_multiselect(self) -> bool:
        return self.is_array and self.custom == MULTISELECT_CUSTOM_TYPE
