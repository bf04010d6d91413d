"""
Field metadata - look up a field's type descriptor in an issue's edit-metadata.
"""

from __future__ import annotations

from typing import Any

from ...core.constants import JiraField, JiraResource
from ...core.domain.entities import FieldTypeDescriptor
from ...core.domain.enums import OperationKind
from ...core.ports.issue_tracker import MetadataMissingError, MetadataTypeMissingError
from ...core.ports.transport import TransportPort
from .classifier import decode_body, decoding, ensure_success


class FieldMetadataResolver:
    """
    Resolves field type descriptors from ``issue/{key}/editmeta``.

    The edit-metadata document is keyed by arbitrary field ids, so it is kept
    as a plain mapping and only the requested entry is decoded. Nothing is
    cached: every resolve call fetches the document again.
    """

    def __init__(self, transport: TransportPort):
        self._transport = transport

    def get_edit_metadata(self, issue_key: str) -> dict[str, Any]:
        response = self._transport.execute(
            "GET",
            JiraResource.EDIT_META,
            segments={JiraResource.ISSUE_SEGMENT: issue_key},
        )
        ensure_success(response, OperationKind.READ, issue_key=issue_key)
        return decode_body(response, issue_key=issue_key)

    def resolve(self, issue_key: str, field_name: str) -> FieldTypeDescriptor:
        """
        Resolve the type descriptor of one field.

        Raises:
            MetadataMissingError: If the field is not in the edit-metadata
            MetadataTypeMissingError: If the field schema has no type
        """
        metadata = self.get_edit_metadata(issue_key)
        with decoding("edit-metadata", issue_key):
            return descriptor_from_metadata(metadata, field_name, issue_key)


def descriptor_from_metadata(
    metadata: dict[str, Any],
    field_name: str,
    issue_key: str | None = None,
) -> FieldTypeDescriptor:
    """Extract a field's descriptor from an already decoded edit-metadata document."""
    field_meta = (metadata.get(JiraField.FIELDS) or {}).get(field_name)
    if field_meta is None:
        raise MetadataMissingError(
            f"Field metadata is missing for '{field_name}'",
            field_name=field_name,
            issue_key=issue_key,
        )

    schema = field_meta.get(JiraField.SCHEMA) or {}
    field_type = schema.get(JiraField.TYPE)
    if field_type is None:
        raise MetadataTypeMissingError(
            f"Field metadata for '{field_name}' is missing a type",
            field_name=field_name,
            issue_key=issue_key,
        )

    return FieldTypeDescriptor(type=str(field_type), custom=schema.get(JiraField.CUSTOM))
