"""
Transport Port - Abstract HTTP request/response interface.

The connector never talks to an HTTP library directly; it builds requests
against this port so tests can script responses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TransportResponse:
    """Status line and raw body of one HTTP response."""

    status_code: int
    status_description: str = ""
    body: str = ""


class TransportPort(ABC):
    """Issues HTTP requests against a fixed base URL."""

    @abstractmethod
    def execute(
        self,
        method: str,
        resource: str,
        params: dict[str, Any] | None = None,
        segments: dict[str, str] | None = None,
        json: Any = None,
    ) -> TransportResponse:
        """
        Perform one request.

        Args:
            method: HTTP method (GET, POST, PUT)
            resource: Resource path, may contain ``{name}`` placeholders
            params: Query parameters
            segments: Values substituted for the placeholders in ``resource``
            json: Body to send as JSON

        Returns:
            The response status and raw body
        """
        ...

    def close(self) -> None:
        """Release any resources held by the transport."""
