"""
Jira Connector - Implements IssueConnectorPort for Atlassian Jira.

This is the main entry point for Jira integration. It composes the
pagination aggregator, the field metadata resolver and the update body
builder with the single-shot REST calls.
"""

from __future__ import annotations

import logging
from typing import Any

from ...core.constants import JiraField, JiraResource, SearchParam
from ...core.domain.entities import Issue, Item
from ...core.domain.enums import OperationKind
from ...core.ports.config_provider import ConnectorConfig
from ...core.ports.issue_tracker import IssueConnectorPort, IssueTrackerError
from ...core.ports.transport import TransportPort
from .classifier import decode_body, decoding, ensure_success
from .field_metadata import FieldMetadataResolver
from .pagination import IssueAggregator
from .transport import RequestsTransport
from .update_body import build_update_body


class JiraConnector(IssueConnectorPort):
    """
    Jira implementation of the IssueConnectorPort.

    Stateless across calls: the only per-instance state is the transport and
    the configured user name.
    """

    def __init__(self, transport: TransportPort, username: str = ""):
        """
        Initialize the connector.

        Args:
            transport: Transport bound to the Jira REST API root
            username: User looked up by validate_credential
        """
        self._transport = transport
        self.username = username
        self.logger = logging.getLogger("JiraConnector")

        self._aggregator = IssueAggregator(transport)
        self._metadata = FieldMetadataResolver(transport)

    @classmethod
    def from_config(cls, config: ConnectorConfig) -> JiraConnector:
        """Build a connector talking to Jira over HTTP."""
        return cls(RequestsTransport.from_config(config), username=config.username)

    def close(self) -> None:
        """Release the transport (and its HTTP session)."""
        self._transport.close()

    def __enter__(self) -> JiraConnector:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def name(self) -> str:
        return "Jira"

    def validate_credential(self) -> bool:
        try:
            response = self._transport.execute(
                "GET",
                JiraResource.USER,
                params={SearchParam.USERNAME: self.username},
            )
        except IssueTrackerError as e:
            self.logger.warning(f"Credential check failed: {e}")
            return False

        if response.status_code != OperationKind.READ.success_status:
            self.logger.warning(
                f"Credential check for '{self.username}' returned {response.status_code}"
            )
            return False
        return True

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    def get_issue(self, issue_key: str) -> Issue:
        data = self._get(JiraResource.ISSUE, issue_key=issue_key)
        with decoding("issue", issue_key):
            return Issue.from_json(data)

    def get_issues_by_filter(self, filter_id: str) -> list[Issue]:
        return self._aggregator.collect(filter_id)

    def list_available_actions(self, issue_key: str) -> list[Item]:
        data = self._get(JiraResource.TRANSITIONS_WITH_FIELDS, issue_key=issue_key)
        with decoding("transitions", issue_key):
            return [Item.from_json(t) for t in data.get(JiraField.TRANSITIONS, [])]

    def list_custom_fields(self) -> list[Item]:
        data = self._get(JiraResource.FIELD)
        with decoding("field list"):
            return [Item.from_json(f) for f in data if f.get(JiraField.CUSTOM)]

    def list_priorities(self) -> list[Item]:
        data = self._get(JiraResource.PRIORITY)
        with decoding("priority list"):
            return [Item.from_json(p) for p in data]

    def list_projects(self) -> list[Item]:
        data = self._get(JiraResource.PROJECT)
        with decoding("project list"):
            return [Item.from_json(p) for p in data]

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    def update_issue_field(self, issue_key: str, field_name: str, value: str) -> Issue:
        descriptor = self._metadata.resolve(issue_key, field_name)
        body = build_update_body(field_name, descriptor, value)

        response = self._transport.execute(
            "PUT",
            JiraResource.ISSUE,
            segments={JiraResource.ISSUE_SEGMENT: issue_key},
            json=body.to_json(),
        )
        ensure_success(response, OperationKind.UPDATE, issue_key=issue_key)
        self.logger.info(f"Updated {field_name} on {issue_key}")

        return self.get_issue(issue_key)

    def add_comment(self, issue_key: str, text: str) -> None:
        response = self._transport.execute(
            "POST",
            JiraResource.COMMENT,
            segments={JiraResource.ISSUE_SEGMENT: issue_key},
            json={JiraField.BODY: text},
        )
        ensure_success(response, OperationKind.CREATE, issue_key=issue_key)
        self.logger.info(f"Added comment to {issue_key}")

    def progress_workflow(
        self,
        issue_key: str,
        transition_action: str,
        assignee: str | None = None,
    ) -> None:
        body: dict[str, Any] = {JiraField.TRANSITION: {JiraField.ID: transition_action}}
        if assignee is not None:
            body[JiraField.FIELDS] = {JiraField.ASSIGNEE: {JiraField.NAME: assignee}}

        response = self._transport.execute(
            "POST",
            JiraResource.TRANSITIONS,
            segments={JiraResource.ISSUE_SEGMENT: issue_key},
            json=body,
        )
        ensure_success(response, OperationKind.UPDATE, issue_key=issue_key)
        self.logger.info(f"Transitioned {issue_key} via action {transition_action}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get(self, resource: str, issue_key: str | None = None) -> Any:
        """GET a resource, classify the response and decode its JSON body."""
        segments = {JiraResource.ISSUE_SEGMENT: issue_key} if issue_key is not None else None
        response = self._transport.execute("GET", resource, segments=segments)
        ensure_success(response, OperationKind.READ, issue_key=issue_key)
        return decode_body(response, issue_key=issue_key)
