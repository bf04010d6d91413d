"""
Domain enums - response classification and operation kinds.
"""

from __future__ import annotations

from enum import Enum, auto
from http import HTTPStatus


class ResponseKind(Enum):
    """Outcome of a single request/response round-trip."""

    SUCCESS = auto()
    AUTH_FAILURE = auto()
    OTHER_FAILURE = auto()


class OperationKind(Enum):
    """
    Kind of remote operation.

    Each kind recognises exactly one status code as success.
    """

    READ = HTTPStatus.OK
    CREATE = HTTPStatus.CREATED
    UPDATE = HTTPStatus.NO_CONTENT

    @property
    def success_status(self) -> int:
        """The single HTTP status code treated as success."""
        return int(self.value)
