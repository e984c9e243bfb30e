"""Console user interface: errors on stderr, yes/no prompts on stdin."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleUI:
    def __init__(
        self,
        stdin: TextIO | None = None,
        stderr: TextIO | None = None,
        interactive: bool | None = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stderr = stderr or sys.stderr
        self.interactive = interactive

    def show_error(self, message: str) -> None:
        print(f"privy: {message}", file=self.stderr)

    def prompt_yes_no(self, message: str) -> bool:
        """Ask a yes/no question. Answers No without a terminal or on EOF."""
        interactive = self.interactive
        if interactive is None:
            interactive = self.stdin.isatty()
        if not interactive:
            return False
        print(f"{message} [y/N] ", end="", file=self.stderr, flush=True)
        answer = self.stdin.readline()
        return answer.strip().lower() in ("y", "yes")
