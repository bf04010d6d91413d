"""
CLI Application - Command line front end for the Jira connector.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.jira import JiraConnector
from ..core.ports.config_provider import ConfigError
from ..core.ports.issue_tracker import (
    AuthenticationError,
    IssueTrackerError,
    RemoteServiceError,
)
from .output import Console


class ExitCode:
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    AUTH_ERROR = 3


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="jira-connector",
        description="Read and update Jira issues from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jira-connector validate
  jira-connector issues 10200
  jira-connector update PROJ-5 assignee alice
  jira-connector transition PROJ-5 21 --assignee bob

Connection settings come from --url/--username/--password, then JIRA_URL,
JIRA_USERNAME and JIRA_PASSWORD, then .jira-connector.yaml.
""",
    )

    parser.add_argument("--url", help="Jira instance URL")
    parser.add_argument("--username", help="Basic auth user name")
    parser.add_argument("--password", help="Basic auth password or API token")
    parser.add_argument("--config", "-c", help="Path to YAML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=None,
        help="Log output format (default: text)",
    )
    parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Result output format",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("validate", help="Check the configured credential")

    p = sub.add_parser("issues", help="List all issues of a saved filter")
    p.add_argument("filter_id", help="Saved filter id")

    p = sub.add_parser("issue", help="Show one issue")
    p.add_argument("issue_key")

    p = sub.add_parser("update", help="Set one field on an issue")
    p.add_argument("issue_key")
    p.add_argument("field", help="Field id as shown in edit-metadata (e.g. customfield_10100)")
    p.add_argument("value")

    p = sub.add_parser("comment", help="Add a comment to an issue")
    p.add_argument("issue_key")
    p.add_argument("text")

    p = sub.add_parser("transition", help="Run a workflow transition")
    p.add_argument("issue_key")
    p.add_argument("action", help="Transition id")
    p.add_argument("--assignee", help="Reassign the issue as part of the transition")

    p = sub.add_parser("actions", help="List available workflow transitions")
    p.add_argument("issue_key")

    sub.add_parser("custom-fields", help="List custom fields")
    sub.add_parser("priorities", help="List priorities")
    sub.add_parser("projects", help="List projects")

    return parser


def run_command(args: argparse.Namespace, connector: JiraConnector, console: Console) -> int:
    """Dispatch a parsed command to the connector."""
    if args.command == "validate":
        if connector.validate_credential():
            console.success(f"Credential for '{connector.username}' is valid")
            return ExitCode.SUCCESS
        console.error("Credential is not valid")
        return ExitCode.AUTH_ERROR

    if args.command == "issues":
        console.issues(connector.get_issues_by_filter(args.filter_id))
    elif args.command == "issue":
        console.issue(connector.get_issue(args.issue_key))
    elif args.command == "update":
        console.issue(connector.update_issue_field(args.issue_key, args.field, args.value))
    elif args.command == "comment":
        connector.add_comment(args.issue_key, args.text)
        console.success(f"Comment added to {args.issue_key}")
    elif args.command == "transition":
        connector.progress_workflow(args.issue_key, args.action, args.assignee)
        console.success(f"{args.issue_key} transitioned")
    else:
        listings: dict[str, Callable[[], list]] = {
            "actions": lambda: connector.list_available_actions(args.issue_key),
            "custom-fields": connector.list_custom_fields,
            "priorities": connector.list_priorities,
            "projects": connector.list_projects,
        }
        console.items(listings[args.command]())

    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Parses arguments, sets up logging, loads configuration and runs the
    requested command.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from .logging import setup_logging

    parser = create_parser()
    args = parser.parse_args(argv)
    console = Console(json_output=args.output == "json")

    provider = EnvironmentConfigProvider(
        config_file=args.config,
        cli_overrides={
            "url": args.url,
            "username": args.username,
            "password": args.password,
            "log_format": args.log_format,
        },
    )

    errors = provider.validate()
    if errors:
        for error in errors:
            console.error(error)
        return ExitCode.CONFIG_ERROR

    try:
        config = provider.load()
    except ConfigError as e:
        console.error(str(e))
        return ExitCode.CONFIG_ERROR

    if args.verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.logging.level.upper(), logging.INFO)
    setup_logging(level=level, log_format=config.logging.format)
    logger = logging.getLogger("cli")

    connector = JiraConnector.from_config(config.connector)
    try:
        return run_command(args, connector, console)
    except AuthenticationError as e:
        console.error(str(e))
        return ExitCode.AUTH_ERROR
    except RemoteServiceError as e:
        logger.debug(f"Response body: {e.body}")
        console.error(f"Jira returned {e}: {e.body[:500]}")
        return ExitCode.ERROR
    except IssueTrackerError as e:
        console.error(str(e))
        return ExitCode.ERROR
    finally:
        connector.close()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
