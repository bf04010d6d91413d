"""
Core layer - domain model, constants and ports.

Has no dependency on HTTP libraries or configuration sources.
"""

from .domain import FieldTypeDescriptor, Issue, IssuePage, Item, OperationKind, ResponseKind
from .ports import (
    AuthenticationError,
    FieldMetadataError,
    IssueConnectorPort,
    IssueTrackerError,
    MetadataMissingError,
    MetadataTypeMissingError,
    RemoteServiceError,
    TransportPort,
    TransportResponse,
)


__all__ = [
    "AuthenticationError",
    "FieldMetadataError",
    "FieldTypeDescriptor",
    "Issue",
    "IssueConnectorPort",
    "IssuePage",
    "IssueTrackerError",
    "Item",
    "MetadataMissingError",
    "MetadataTypeMissingError",
    "OperationKind",
    "RemoteServiceError",
    "ResponseKind",
    "TransportPort",
    "TransportResponse",
]
