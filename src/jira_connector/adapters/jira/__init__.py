"""
Jira Adapter - Implementation of IssueConnectorPort for Atlassian Jira.

- JiraConnector: facade implementing IssueConnectorPort
- RequestsTransport: HTTP transport built on requests
- IssueAggregator: filter listing across search pages
- FieldMetadataResolver: edit-metadata lookups for field updates
"""

from .classifier import classify, decode_body, decoding, ensure_success
from .connector import JiraConnector
from .field_metadata import FieldMetadataResolver, descriptor_from_metadata
from .pagination import IssueAggregator, additional_pages
from .transport import RequestsTransport
from .update_body import (
    FieldAssignment,
    OptionSetOperation,
    UpdateBody,
    ValueSetOperation,
    build_update_body,
)


__all__ = [
    "FieldAssignment",
    "FieldMetadataResolver",
    "IssueAggregator",
    "JiraConnector",
    "OptionSetOperation",
    "RequestsTransport",
    "UpdateBody",
    "ValueSetOperation",
    "additional_pages",
    "build_update_body",
    "classify",
    "decode_body",
    "decoding",
    "descriptor_from_metadata",
    "ensure_success",
]
