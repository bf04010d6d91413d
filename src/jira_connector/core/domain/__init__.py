"""
Domain layer - entities and enums shared by ports and adapters.
"""

from .entities import FieldTypeDescriptor, Issue, IssuePage, Item
from .enums import OperationKind, ResponseKind


__all__ = [
    "FieldTypeDescriptor",
    "Issue",
    "IssuePage",
    "Item",
    "OperationKind",
    "ResponseKind",
]
