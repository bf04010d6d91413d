"""
Update bodies - the three payload shapes used to set a single issue field.

Jira's "array" fields need an update-operation envelope instead of direct
assignment, and multiselect custom fields additionally wrap each value as an
option object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...core.constants import JiraField
from ...core.domain.entities import FieldTypeDescriptor


@dataclass(frozen=True)
class FieldAssignment:
    """``{"fields": {name: value}}``: direct replacement of a scalar field."""

    field_name: str
    value: str

    def to_json(self) -> dict[str, Any]:
        return {JiraField.FIELDS: {self.field_name: self.value}}


@dataclass(frozen=True)
class ValueSetOperation:
    """``{"update": {name: [{"set": [value]}]}}``: array field of bare values."""

    field_name: str
    value: str

    def to_json(self) -> dict[str, Any]:
        return {JiraField.UPDATE: {self.field_name: [{JiraField.SET: [self.value]}]}}


@dataclass(frozen=True)
class OptionSetOperation:
    """``{"update": {name: [{"set": [{"value": value}]}]}}``: multiselect options."""

    field_name: str
    value: str

    def to_json(self) -> dict[str, Any]:
        return {
            JiraField.UPDATE: {
                self.field_name: [{JiraField.SET: [{JiraField.VALUE: self.value}]}]
            }
        }


UpdateBody = FieldAssignment | ValueSetOperation | OptionSetOperation


def build_update_body(
    field_name: str,
    descriptor: FieldTypeDescriptor,
    value: str,
) -> UpdateBody:
    """Pick the payload shape for a field from its type descriptor."""
    if not descriptor.is_array:
        return FieldAssignment(field_name, value)
    if descriptor.is_multiselect:
        return OptionSetOperation(field_name, value)
    return ValueSetOperation(field_name, value)
