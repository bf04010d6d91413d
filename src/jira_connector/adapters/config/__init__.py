"""
Configuration adapters.
"""

from .environment import DEFAULT_CONFIG_FILENAME, EnvironmentConfigProvider


__all__ = ["DEFAULT_CONFIG_FILENAME", "EnvironmentConfigProvider"]
