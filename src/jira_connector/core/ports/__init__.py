"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .config_provider import (
    AppConfig,
    ConfigError,
    ConfigProviderPort,
    ConnectorConfig,
    LoggingConfig,
)
from .issue_tracker import (
    AuthenticationError,
    FieldMetadataError,
    IssueConnectorPort,
    IssueTrackerError,
    MetadataMissingError,
    MetadataTypeMissingError,
    RemoteServiceError,
)
from .transport import TransportPort, TransportResponse


__all__ = [
    # Ports
    "ConfigProviderPort",
    "IssueConnectorPort",
    "TransportPort",
    # Configuration
    "AppConfig",
    "ConfigError",
    "ConnectorConfig",
    "LoggingConfig",
    # Transport
    "TransportResponse",
    # Exceptions
    "AuthenticationError",
    "FieldMetadataError",
    "IssueTrackerError",
    "MetadataMissingError",
    "MetadataTypeMissingError",
    "RemoteServiceError",
]
