"""
jira-connector - Read and update Jira issues through the REST API.

Lists issues by saved filter across search pages, updates single fields
with the payload shape the field's edit-metadata calls for, and wraps the
comment, transition and lookup-list resources.
"""

from .adapters.jira import JiraConnector, RequestsTransport
from .core.domain import FieldTypeDescriptor, Issue, Item
from .core.ports import (
    AuthenticationError,
    ConnectorConfig,
    FieldMetadataError,
    IssueTrackerError,
    MetadataMissingError,
    MetadataTypeMissingError,
    RemoteServiceError,
)


__version__ = "1.0.0"

__all__ = [
    "AuthenticationError",
    "ConnectorConfig",
    "FieldMetadataError",
    "FieldTypeDescriptor",
    "Issue",
    "IssueTrackerError",
    "Item",
    "JiraConnector",
    "MetadataMissingError",
    "MetadataTypeMissingError",
    "RemoteServiceError",
    "RequestsTransport",
    "__version__",
]
