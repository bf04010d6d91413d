"""
Constants - Jira REST resource paths and JSON field names.

Keeping the wire vocabulary in one place lets the adapters stay free of
string literals for paths and keys.
"""

from __future__ import annotations


# Issues returned per search page. The server caps filter searches at this
# size for the connector, so pagination is driven off it.
PAGE_SIZE = 10

DEFAULT_API_PATH = "rest/api/2"

MULTISELECT_CUSTOM_TYPE = "com.atlassian.jira.plugin.system.customfieldtypes:multiselect"

ARRAY_TYPE = "array"


class JiraResource:
    """Resource paths relative to the REST API root."""

    USER = "user"
    SEARCH = "search"
    ISSUE = "issue/{issueIdOrKey}"
    COMMENT = "issue/{issueIdOrKey}/comment"
    TRANSITIONS = "issue/{issueIdOrKey}/transitions"
    TRANSITIONS_WITH_FIELDS = "issue/{issueIdOrKey}/transitions?expand=transitions.fields"
    EDIT_META = "issue/{issueIdOrKey}/editmeta"
    PRIORITY = "priority"
    PROJECT = "project"
    FIELD = "field"

    ISSUE_SEGMENT = "issueIdOrKey"


class JiraField:
    """JSON keys used in Jira request and response documents."""

    ID = "id"
    KEY = "key"
    NAME = "name"
    VALUE = "value"
    FIELDS = "fields"
    UPDATE = "update"
    SET = "set"
    BODY = "body"
    TRANSITION = "transition"
    TRANSITIONS = "transitions"
    CUSTOM = "custom"
    SCHEMA = "schema"
    TYPE = "type"
    TOTAL = "total"
    ISSUES = "issues"

    SUMMARY = "summary"
    DESCRIPTION = "description"
    PROJECT = "project"
    ISSUETYPE = "issuetype"
    ASSIGNEE = "assignee"
    PRIORITY = "priority"


class SearchParam:
    """Query parameters understood by the search resource."""

    JQL = "jql"
    MAX_RESULTS = "maxResults"
    START_AT = "startAt"
    USERNAME = "username"
