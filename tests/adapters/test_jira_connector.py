"""
Tests for JiraConnector.

The connector runs against a scripted FakeTransport, so each test states the
exact responses the remote service returns.
"""

from unittest.mock import MagicMock

import pytest
from factories import edit_meta, issue_json, queue_filter_pages

from jira_connector.adapters.jira.connector import JiraConnector
from jira_connector.adapters.jira.transport import RequestsTransport
from jira_connector.core.domain import Issue, Item
from jira_connector.core.ports import (
    AuthenticationError,
    IssueTrackerError,
    MetadataMissingError,
    MetadataTypeMissingError,
    RemoteServiceError,
)


MULTISELECT = "com.atlassian.jira.plugin.system.customfieldtypes:multiselect"


@pytest.fixture
def connector(transport):
    return JiraConnector(transport, username="bot")


class TestJiraConnectorInit:
    def test_name(self, connector):
        assert connector.name == "Jira"

    def test_from_config(self, connector_config):
        connector = JiraConnector.from_config(connector_config)

        assert connector.username == "bot"
        assert isinstance(connector._transport, RequestsTransport)
        assert connector._transport.api_url == "https://jira.example.com/rest/api/2"

    def test_close_releases_transport(self):
        transport = MagicMock()

        JiraConnector(transport).close()

        transport.close.assert_called_once_with()

    def test_context_manager_closes(self):
        transport = MagicMock()

        with JiraConnector(transport) as connector:
            assert connector.name == "Jira"
            transport.close.assert_not_called()

        transport.close.assert_called_once_with()

    def test_close_on_scripted_transport_is_harmless(self, connector, transport):
        connector.close()

        assert transport.requests == []


class TestValidateCredential:
    def test_valid(self, connector, transport):
        transport.queue(200, {"name": "bot"})

        assert connector.validate_credential() is True
        request = transport.requests[0]
        assert request.resource == "user"
        assert request.params == {"username": "bot"}

    @pytest.mark.parametrize("status", [401, 403, 404, 500])
    def test_any_failure_is_false(self, connector, transport, status):
        transport.queue(status)

        assert connector.validate_credential() is False

    def test_transport_error_is_false(self):
        broken = MagicMock()
        broken.execute.side_effect = IssueTrackerError("connection refused")

        assert JiraConnector(broken, username="bot").validate_credential() is False


class TestGetIssuesByFilter:
    def test_end_to_end_twenty_three_issues(self, connector, transport):
        queue_filter_pages(transport, 23)

        issues = connector.get_issues_by_filter("10200")

        assert len(issues) == 23
        assert all(isinstance(i, Issue) for i in issues)
        assert [r.params["startAt"] for r in transport.requests] == ["0", "10", "20"]
        assert issues[22].key == "PROJ-22"

    def test_auth_failure_propagates(self, connector, transport):
        transport.queue(401)

        with pytest.raises(AuthenticationError):
            connector.get_issues_by_filter("10200")


class TestGetIssue:
    def test_get_issue(self, connector, transport):
        transport.queue(200, issue_json(5))

        issue = connector.get_issue("PROJ-5")

        assert issue.key == "PROJ-5"
        assert transport.requests[0].resource == "issue/{issueIdOrKey}"
        assert transport.requests[0].segments == {"issueIdOrKey": "PROJ-5"}

    def test_empty_key_still_fills_the_path(self, connector, transport):
        transport.queue(404, "", reason="Not Found")

        with pytest.raises(RemoteServiceError):
            connector.get_issue("")

        assert transport.requests[0].segments == {"issueIdOrKey": ""}

    def test_issue_without_id(self, connector, transport):
        transport.queue(200, {"key": "PROJ-5", "fields": {}})

        with pytest.raises(IssueTrackerError) as exc_info:
            connector.get_issue("PROJ-5")

        assert exc_info.value.issue_key == "PROJ-5"
        assert isinstance(exc_info.value.cause, KeyError)

    def test_not_found(self, connector, transport):
        transport.queue(404, '{"errorMessages":["Issue Does Not Exist"]}', reason="Not Found")

        with pytest.raises(RemoteServiceError) as exc_info:
            connector.get_issue("PROJ-404")

        assert exc_info.value.status_code == 404
        assert exc_info.value.issue_key == "PROJ-404"


class TestUpdateIssueField:
    """Tests for update_issue_field."""

    def test_scalar_field_scenario(self, connector, transport):
        transport.queue(200, edit_meta(assignee={"type": "user", "system": "assignee"}))
        transport.queue(204)
        transport.queue(200, issue_json(5, assignee={"name": "alice"}))

        issue = connector.update_issue_field("PROJ-5", "assignee", "alice")

        meta, put, get = transport.requests
        assert meta.resource == "issue/{issueIdOrKey}/editmeta"
        assert put.method == "PUT"
        assert put.resource == "issue/{issueIdOrKey}"
        assert put.segments == {"issueIdOrKey": "PROJ-5"}
        assert put.json == {"fields": {"assignee": "alice"}}
        assert get.method == "GET"
        assert get.segments == {"issueIdOrKey": "PROJ-5"}
        assert issue.key == "PROJ-5"
        assert issue.assignee == "alice"

    def test_multiselect_field(self, connector, transport):
        transport.queue(200, edit_meta(customfield_10100={"type": "array", "custom": MULTISELECT}))
        transport.queue(204)
        transport.queue(200, issue_json(5))

        connector.update_issue_field("PROJ-5", "customfield_10100", "Red")

        assert transport.requests[1].json == {
            "update": {"customfield_10100": [{"set": [{"value": "Red"}]}]}
        }

    def test_array_field(self, connector, transport):
        transport.queue(200, edit_meta(labels={"type": "array", "items": "string"}))
        transport.queue(204)
        transport.queue(200, issue_json(5))

        connector.update_issue_field("PROJ-5", "labels", "backend")

        assert transport.requests[1].json == {"update": {"labels": [{"set": ["backend"]}]}}

    def test_missing_field_sends_nothing(self, connector, transport):
        transport.queue(200, edit_meta(summary={"type": "string"}))

        with pytest.raises(MetadataMissingError):
            connector.update_issue_field("PROJ-5", "labels", "x")

        assert len(transport.requests) == 1

    def test_missing_type(self, connector, transport):
        transport.queue(200, {"fields": {"labels": {"schema": {}}}})

        with pytest.raises(MetadataTypeMissingError):
            connector.update_issue_field("PROJ-5", "labels", "x")

    def test_put_rejected(self, connector, transport):
        transport.queue(200, edit_meta(summary={"type": "string"}))
        transport.queue(400, '{"errors":{"summary":"too long"}}', reason="Bad Request")

        with pytest.raises(RemoteServiceError) as exc_info:
            connector.update_issue_field("PROJ-5", "summary", "x" * 300)

        assert exc_info.value.body == '{"errors":{"summary":"too long"}}'
        assert len(transport.requests) == 2

    def test_put_returning_200_is_a_failure(self, connector, transport):
        transport.queue(200, edit_meta(summary={"type": "string"}))
        transport.queue(200, "{}")

        with pytest.raises(RemoteServiceError):
            connector.update_issue_field("PROJ-5", "summary", "x")

    def test_follow_up_read_failure_propagates(self, connector, transport):
        transport.queue(200, edit_meta(summary={"type": "string"}))
        transport.queue(204)
        transport.queue(401)

        with pytest.raises(AuthenticationError):
            connector.update_issue_field("PROJ-5", "summary", "x")

    def test_put_auth_failure(self, connector, transport):
        transport.queue(200, edit_meta(summary={"type": "string"}))
        transport.queue(401, "", reason="Unauthorized")

        with pytest.raises(AuthenticationError) as exc_info:
            connector.update_issue_field("PROJ-5", "summary", "x")

        assert exc_info.value.issue_key == "PROJ-5"
        assert [r.method for r in transport.requests] == ["GET", "PUT"]

    def test_editmeta_of_wrong_shape(self, connector, transport):
        transport.queue(200, [])

        with pytest.raises(IssueTrackerError):
            connector.update_issue_field("PROJ-5", "summary", "x")

        assert len(transport.requests) == 1


class TestAddComment:
    def test_add_comment(self, connector, transport):
        transport.queue(201, {"id": "1"})

        connector.add_comment("PROJ-5", "Looks good")

        request = transport.requests[0]
        assert request.method == "POST"
        assert request.resource == "issue/{issueIdOrKey}/comment"
        assert request.json == {"body": "Looks good"}

    def test_requires_created(self, connector, transport):
        transport.queue(200)

        with pytest.raises(RemoteServiceError):
            connector.add_comment("PROJ-5", "x")

    def test_auth_failure(self, connector, transport):
        transport.queue(401)

        with pytest.raises(AuthenticationError):
            connector.add_comment("PROJ-5", "x")


class TestProgressWorkflow:
    def test_without_assignee(self, connector, transport):
        transport.queue(204)

        connector.progress_workflow("PROJ-5", "21", None)

        request = transport.requests[0]
        assert request.method == "POST"
        assert request.resource == "issue/{issueIdOrKey}/transitions"
        assert request.json == {"transition": {"id": "21"}}

    def test_with_assignee(self, connector, transport):
        transport.queue(204)

        connector.progress_workflow("PROJ-5", "21", "bob")

        assert transport.requests[0].json == {
            "transition": {"id": "21"},
            "fields": {"assignee": {"name": "bob"}},
        }

    def test_failure(self, connector, transport):
        transport.queue(400, "bad transition", reason="Bad Request")

        with pytest.raises(RemoteServiceError):
            connector.progress_workflow("PROJ-5", "99", None)

    def test_auth_failure(self, connector, transport):
        transport.queue(401, "", reason="Unauthorized")

        with pytest.raises(AuthenticationError) as exc_info:
            connector.progress_workflow("PROJ-5", "21", "bob")

        assert exc_info.value.issue_key == "PROJ-5"
        assert len(transport.requests) == 1


class TestListings:
    def test_available_actions(self, connector, transport):
        transport.queue(
            200,
            {
                "expand": "transitions",
                "transitions": [
                    {"id": "11", "name": "Start Progress", "fields": {}},
                    {"id": "21", "name": "Resolve", "fields": {}},
                ],
            },
        )

        actions = connector.list_available_actions("PROJ-5")

        assert actions == [Item("11", "Start Progress"), Item("21", "Resolve")]
        request = transport.requests[0]
        assert request.resource == "issue/{issueIdOrKey}/transitions?expand=transitions.fields"
        assert request.segments == {"issueIdOrKey": "PROJ-5"}

    def test_custom_fields_filtered(self, connector, transport):
        transport.queue(
            200,
            [
                {"id": "summary", "name": "Summary", "custom": False},
                {"id": "customfield_10100", "name": "Color", "custom": True},
                {"id": "customfield_10200", "name": "Team", "custom": True},
            ],
        )

        fields = connector.list_custom_fields()

        assert fields == [Item("customfield_10100", "Color"), Item("customfield_10200", "Team")]
        assert transport.requests[0].resource == "field"

    def test_priorities(self, connector, transport):
        transport.queue(200, [{"id": "1", "name": "Blocker"}, {"id": "3", "name": "Major"}])

        assert connector.list_priorities() == [Item("1", "Blocker"), Item("3", "Major")]
        assert transport.requests[0].resource == "priority"

    def test_projects(self, connector, transport):
        transport.queue(200, [{"id": "10000", "key": "PROJ", "name": "Project"}])

        assert connector.list_projects() == [Item("10000", "Project")]
        assert transport.requests[0].resource == "project"

    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.list_priorities(),
            lambda c: c.list_projects(),
            lambda c: c.list_custom_fields(),
            lambda c: c.list_available_actions("PROJ-5"),
        ],
    )
    def test_auth_failure(self, connector, transport, call):
        transport.queue(401)

        with pytest.raises(AuthenticationError):
            call(connector)

    @pytest.mark.parametrize(
        ("call", "body"),
        [
            (lambda c: c.list_available_actions("PROJ-5"), []),
            (lambda c: c.list_available_actions("PROJ-5"), {"transitions": [{"id": "11"}]}),
            (lambda c: c.list_custom_fields(), {"fields": []}),
            (lambda c: c.list_priorities(), [{"name": "Blocker"}]),
            (lambda c: c.list_projects(), {"values": []}),
        ],
    )
    def test_unexpected_document_shape(self, connector, transport, call, body):
        transport.queue(200, body)

        with pytest.raises(IssueTrackerError) as exc_info:
            call(connector)

        assert "Unexpected" in str(exc_info.value)
