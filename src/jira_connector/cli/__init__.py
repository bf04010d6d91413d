"""
CLI - Command line interface for jira-connector.
"""

from .app import main


__all__ = ["main"]
