"""
Environment Config Provider - Load configuration from a YAML file and env vars.

Sources, lowest to highest precedence:
1. YAML config file (explicit path, or .jira-connector.yaml in the cwd)
2. Environment variables (JIRA_URL, JIRA_USERNAME, JIRA_PASSWORD, ...)
3. CLI overrides passed by the caller
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ...core.constants import DEFAULT_API_PATH
from ...core.ports.config_provider import (
    AppConfig,
    ConfigError,
    ConfigProviderPort,
    ConnectorConfig,
    LoggingConfig,
)


DEFAULT_CONFIG_FILENAME = ".jira-connector.yaml"

CONNECTOR_KEYS = ("url", "username", "password", "api_path", "timeout")
LOGGING_KEYS = ("level", "format")


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that merges a YAML file, env vars and CLI values.
    """

    def __init__(
        self,
        config_file: Path | str | None = None,
        env_prefix: str = "JIRA_",
        cli_overrides: dict[str, Any] | None = None,
        environ: dict[str, str] | None = None,
    ):
        """
        Initialize the provider.

        Args:
            config_file: YAML file to read; defaults to .jira-connector.yaml in the cwd
            env_prefix: Prefix of connector environment variables
            cli_overrides: Values that win over every other source (None values ignored)
            environ: Environment mapping, defaults to os.environ
        """
        self.config_file = Path(config_file) if config_file else None
        self.env_prefix = env_prefix
        self.cli_overrides = cli_overrides or {}
        self._environ = environ if environ is not None else os.environ
        self.logger = logging.getLogger("EnvironmentConfigProvider")

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    def load(self) -> AppConfig:
        values: dict[str, Any] = {}
        log_values: dict[str, Any] = {}

        file_data = self._load_file()
        values.update(_pick(file_data.get("jira") or {}, CONNECTOR_KEYS))
        log_values.update(_pick(file_data.get("logging") or {}, LOGGING_KEYS))

        for key in CONNECTOR_KEYS:
            env_value = self._environ.get(f"{self.env_prefix}{key.upper()}")
            if env_value:
                values[key] = env_value
        for key in LOGGING_KEYS:
            env_value = self._environ.get(f"JIRA_CONNECTOR_LOG_{key.upper()}")
            if env_value:
                log_values[key] = env_value

        for key, value in self.cli_overrides.items():
            if value is None:
                continue
            if key in CONNECTOR_KEYS:
                values[key] = value
            elif key.startswith("log_") and key[4:] in LOGGING_KEYS:
                log_values[key[4:]] = value

        connector = ConnectorConfig(
            url=str(values.get("url") or ""),
            username=str(values.get("username") or ""),
            password=str(values.get("password") or ""),
            api_path=str(values.get("api_path") or DEFAULT_API_PATH),
            timeout=_parse_timeout(values.get("timeout")),
        )
        logging_config = LoggingConfig(**{k: str(v) for k, v in log_values.items()})
        return AppConfig(connector=connector, logging=logging_config)

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.config_file is not None and not self.config_file.exists():
            errors.append(f"Config file not found: {self.config_file}")
            return errors

        try:
            config = self.load()
        except ConfigError as e:
            return [str(e)]

        if not config.connector.is_valid():
            errors.append(f"Missing Jira URL (set {self.env_prefix}URL or jira.url)")
        if bool(config.connector.username) != bool(config.connector.password):
            errors.append("Username and password must be given together")
        if config.logging.format not in ("text", "json"):
            errors.append(f"Unknown log format: {config.logging.format}")
        if not isinstance(logging.getLevelName(config.logging.level.upper()), int):
            errors.append(f"Unknown log level: {config.logging.level}")

        return errors

    # -------------------------------------------------------------------------
    # File Loading
    # -------------------------------------------------------------------------

    def _resolve_file(self) -> Path | None:
        if self.config_file is not None:
            return self.config_file
        candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
        return candidate if candidate.is_file() else None

    def _load_file(self) -> dict[str, Any]:
        path = self._resolve_file()
        if path is None or not path.exists():
            return {}

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        self.logger.debug(f"Loaded config file {path}")
        return data


def _pick(data: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    return {k: data[k] for k in keys if data.get(k) is not None}


def _parse_timeout(value: Any) -> float:
    if value is None or value == "":
        return ConnectorConfig.timeout
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}") from e
