"""
Configuration Provider Port - Abstract interface for configuration.

Implementations:
- EnvironmentConfigProvider: Load from env vars and a YAML config file
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..constants import DEFAULT_API_PATH


class ConfigError(Exception):
    """Configuration could not be read."""


@dataclass
class ConnectorConfig:
    """Connection settings for a Jira instance."""

    url: str
    username: str = ""
    password: str = ""
    api_path: str = DEFAULT_API_PATH
    timeout: float = 30.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return bool(self.url)


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = "text"


@dataclass
class AppConfig:
    """Complete application configuration."""

    connector: ConnectorConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load configuration.

        Raises:
            ConfigError: If a configuration source is malformed
        """
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        ...
