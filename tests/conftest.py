"""
Shared pytest fixtures for the jira-connector test suite.

Builders for Jira JSON documents live in factories.py.
"""

from __future__ import annotations

import pytest
from factories import FakeTransport

from jira_connector.core.ports.config_provider import ConnectorConfig


@pytest.fixture
def transport() -> FakeTransport:
    """A scripted transport with no queued responses."""
    return FakeTransport()


@pytest.fixture
def connector_config() -> ConnectorConfig:
    return ConnectorConfig(
        url="https://jira.example.com",
        username="bot",
        password="secret",
    )
