"""
Issue Tracker Port - Abstract interface for the issue connector.

Implementations:
- JiraConnector: Atlassian Jira REST API (v2)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain.entities import Issue, Item


class IssueTrackerError(Exception):
    """Base exception for issue tracker errors."""

    def __init__(
        self,
        message: str,
        issue_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.issue_key = issue_key
        self.cause = cause


class AuthenticationError(IssueTrackerError):
    """The remote service rejected the credential (HTTP 401)."""


class RemoteServiceError(IssueTrackerError):
    """
    Any other non-success response.

    Carries the status description and raw body verbatim for diagnostics.
    """

    def __init__(
        self,
        status_code: int,
        status_description: str,
        body: str,
        issue_key: str | None = None,
    ):
        super().__init__(
            f"{status_code} {status_description}".strip(),
            issue_key=issue_key,
        )
        self.status_code = status_code
        self.status_description = status_description
        self.body = body


class FieldMetadataError(IssueTrackerError):
    """The requested field cannot be updated on the target issue."""

    def __init__(self, message: str, field_name: str, issue_key: str | None = None):
        super().__init__(message, issue_key=issue_key)
        self.field_name = field_name


class MetadataMissingError(FieldMetadataError):
    """Field is absent from the issue's edit-metadata."""


class MetadataTypeMissingError(FieldMetadataError):
    """Field metadata has no schema type."""


class IssueConnectorPort(ABC):
    """
    Abstract interface consumed by the project-management application.

    All operations are synchronous and raise IssueTrackerError subclasses on
    failure, except validate_credential which reports a boolean.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the tracker name (e.g., 'Jira')."""
        ...

    @abstractmethod
    def validate_credential(self) -> bool:
        """Check that the configured user can be looked up with the credential."""
        ...

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_issue(self, issue_key: str) -> Issue:
        """Fetch a single issue by id or key."""
        ...

    @abstractmethod
    def get_issues_by_filter(self, filter_id: str) -> list[Issue]:
        """
        Fetch every issue matched by a saved filter.

        Args:
            filter_id: Server-side saved filter identifier

        Returns:
            All matching issues in server order
        """
        ...

    @abstractmethod
    def list_available_actions(self, issue_key: str) -> list[Item]:
        """List the workflow transitions available on an issue."""
        ...

    @abstractmethod
    def list_custom_fields(self) -> list[Item]:
        """List custom fields defined on the instance."""
        ...

    @abstractmethod
    def list_priorities(self) -> list[Item]:
        ...

    @abstractmethod
    def list_projects(self) -> list[Item]:
        ...

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def update_issue_field(self, issue_key: str, field_name: str, value: str) -> Issue:
        """
        Set one field on an issue.

        Args:
            issue_key: The issue to update
            field_name: Field id as it appears in edit-metadata
            value: New value

        Returns:
            The issue as read back after the update

        Raises:
            MetadataMissingError: If the field is not editable on the issue
            MetadataTypeMissingError: If the field has no schema type
        """
        ...

    @abstractmethod
    def add_comment(self, issue_key: str, text: str) -> None:
        ...

    @abstractmethod
    def progress_workflow(
        self,
        issue_key: str,
        transition_action: str,
        assignee: str | None = None,
    ) -> None:
        """Run a workflow transition, optionally reassigning the issue."""
        ...


__all__ = [
    "AuthenticationError",
    "FieldMetadataError",
    "IssueConnectorPort",
    "IssueTrackerError",
    "MetadataMissingError",
    "MetadataTypeMissingError",
    "RemoteServiceError",
]
