"""
Requests Transport - HTTP implementation of the TransportPort.

Handles base URL composition, resource templating, basic auth and JSON
encoding. It performs exactly one round-trip per call: status handling and
retries are left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from ...core.constants import DEFAULT_API_PATH
from ...core.ports.config_provider import ConnectorConfig
from ...core.ports.issue_tracker import IssueTrackerError
from ...core.ports.transport import TransportPort, TransportResponse


class RequestsTransport(TransportPort):
    """
    Synchronous transport backed by a ``requests.Session``.

    The session is created once per transport and reused for every request.
    Basic auth is attached only when both username and password are given.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        api_path: str = DEFAULT_API_PATH,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Jira instance URL (e.g., https://jira.example.com)
            username: Basic auth user name
            password: Basic auth password or API token
            api_path: REST API root relative to the instance URL
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}/{api_path.strip('/')}"
        self.timeout = timeout
        self.logger = logging.getLogger("RequestsTransport")

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )
        if username and password:
            self._session.auth = HTTPBasicAuth(username, password)

    @classmethod
    def from_config(cls, config: ConnectorConfig) -> RequestsTransport:
        return cls(
            base_url=config.url,
            username=config.username,
            password=config.password,
            api_path=config.api_path,
            timeout=config.timeout,
        )

    def execute(
        self,
        method: str,
        resource: str,
        params: dict[str, Any] | None = None,
        segments: dict[str, str] | None = None,
        json: Any = None,
    ) -> TransportResponse:
        url = self.build_url(resource, segments)
        self.logger.debug(f"{method} {url} params={params}")

        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise IssueTrackerError(f"Request {method} {url} failed: {e}", cause=e) from e

        self.logger.debug(f"{method} {url} -> {response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            status_description=response.reason or "",
            body=response.text or "",
        )

    def build_url(self, resource: str, segments: dict[str, str] | None = None) -> str:
        """Substitute ``{name}`` placeholders with URL-quoted segment values."""
        path = resource
        for name, value in (segments or {}).items():
            path = path.replace(f"{{{name}}}", quote(str(value), safe=""))
        return f"{self.api_url}/{path}"

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
