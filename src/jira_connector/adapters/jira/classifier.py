"""
Response classification - one place that maps status codes to outcomes.

Every connector operation passes its response through ensure_success, so no
operation interprets an unexpected status on its own.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from http import HTTPStatus
from typing import Any

from ...core.domain.enums import OperationKind, ResponseKind
from ...core.ports.issue_tracker import (
    AuthenticationError,
    IssueTrackerError,
    RemoteServiceError,
)
from ...core.ports.transport import TransportResponse


def classify(status_code: int, operation: OperationKind) -> ResponseKind:
    """Classify a status code for the given operation kind."""
    if status_code == operation.success_status:
        return ResponseKind.SUCCESS
    if status_code == HTTPStatus.UNAUTHORIZED:
        return ResponseKind.AUTH_FAILURE
    return ResponseKind.OTHER_FAILURE


def ensure_success(
    response: TransportResponse,
    operation: OperationKind,
    issue_key: str | None = None,
) -> TransportResponse:
    """
    Raise the matching error unless the response is a success.

    Args:
        response: Response returned by the transport
        operation: Kind of operation that produced it
        issue_key: Issue the request concerned, for error context

    Returns:
        The response unchanged, for chaining

    Raises:
        AuthenticationError: On 401
        RemoteServiceError: On any other unexpected status
    """
    kind = classify(response.status_code, operation)
    if kind is ResponseKind.SUCCESS:
        return response
    if kind is ResponseKind.AUTH_FAILURE:
        raise AuthenticationError(
            "Jira authentication failed. Check JIRA_USERNAME and JIRA_PASSWORD.",
            issue_key=issue_key,
        )
    raise RemoteServiceError(
        response.status_code,
        response.status_description,
        response.body,
        issue_key=issue_key,
    )


def decode_body(response: TransportResponse, issue_key: str | None = None) -> Any:
    """Decode the JSON body of a successful response."""
    try:
        return json.loads(response.body)
    except ValueError as e:
        raise IssueTrackerError(
            f"Malformed JSON in response: {response.body[:200]}",
            issue_key=issue_key,
            cause=e,
        ) from e


@contextmanager
def decoding(document: str, issue_key: str | None = None) -> Iterator[None]:
    """
    Turn errors raised while reading a decoded document into IssueTrackerError.

    A 200 response whose JSON does not have the expected shape (a list where
    an object was expected, a missing id) is a remote failure, not a bug in
    the caller.
    """
    try:
        yield
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise IssueTrackerError(
            f"Unexpected {document} document: {e!r}",
            issue_key=issue_key,
            cause=e,
        ) from e
