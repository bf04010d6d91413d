"""
Output - Console output formatting for connector results.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from ..core.domain.entities import Issue, Item


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


class Console:
    """
    Console output helper.

    Writes either colored text or JSON documents, depending on
    ``json_output``.
    """

    def __init__(
        self,
        color: bool = True,
        json_output: bool = False,
        stream: TextIO | None = None,
    ):
        self.stream = stream or sys.stdout
        self.color = color and not json_output and self.stream.isatty()
        self.json_output = json_output

    def _c(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream)

    def _json(self, data: Any) -> None:
        self._write(json.dumps(data, indent=2))

    def success(self, message: str) -> None:
        if self.json_output:
            self._json({"ok": True, "message": message})
            return
        self._write(self._c("OK ", Colors.GREEN, Colors.BOLD) + message)

    def error(self, message: str) -> None:
        if self.json_output:
            self._json({"ok": False, "error": message})
            return
        print(self._c("ERROR ", Colors.RED, Colors.BOLD) + message, file=sys.stderr)

    def issue(self, issue: Issue) -> None:
        if self.json_output:
            self._json(issue.to_dict())
            return
        self._write(self._format_issue(issue))

    def issues(self, issues: Sequence[Issue]) -> None:
        if self.json_output:
            self._json([i.to_dict() for i in issues])
            return
        for issue in issues:
            self._write(self._format_issue(issue))
        self._write(self._c(f"{len(issues)} issue(s)", Colors.DIM))

    def items(self, items: Sequence[Item]) -> None:
        if self.json_output:
            self._json([i.to_dict() for i in items])
            return
        width = max((len(i.id) for i in items), default=0)
        for item in items:
            self._write(f"{self._c(item.id.ljust(width), Colors.CYAN)}  {item.name}")

    def _format_issue(self, issue: Issue) -> str:
        key = self._c(issue.key, Colors.CYAN, Colors.BOLD)
        details = ", ".join(
            f"{label}: {value}"
            for label, value in (
                ("type", issue.issue_type),
                ("priority", issue.priority),
                ("assignee", issue.assignee),
            )
            if value
        )
        line = f"{key}  {issue.summary}"
        if details:
            line += self._c(f"  ({details})", Colors.DIM)
        return line
