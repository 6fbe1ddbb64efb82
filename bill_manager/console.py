"""
Console Input/Output

All prompting goes through here. An empty line at any prompt means
"go back", which is returned as None rather than raised, so every caller
has to check for it before continuing.

A stream that can't be read any more (closed, EOF) is not something the
user can fix by typing again. That raises InputStreamError and ends the
session.
"""

import sys
from typing import Optional, TextIO

import structlog

from bill_manager.audit import AuditLogger


logger = structlog.get_logger(__name__)


class InputStreamError(Exception):
    """The interactive input stream can no longer be read."""
    pass


class Console:
    """
    Line-oriented prompt/response over a pair of text streams.

    Defaults to stdin/stdout. Tests pass io.StringIO instances instead.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._audit_logger = audit_logger

    def write(self, text: str = "") -> None:
        """Print a full line."""
        print(text, file=self._stdout)

    def prompt(self, text: str) -> None:
        """Print a prompt without a newline and make sure it's shown."""
        print(text, end="", file=self._stdout)
        self._stdout.flush()

    def get_input(self) -> Optional[str]:
        """
        Read one line and strip it.

        Returns:
            The trimmed text, or None if the line was empty

        Raises:
            InputStreamError: If the stream is closed or reading fails
        """
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as e:
            # ValueError: I/O operation on closed file
            raise InputStreamError(f"Could not read input: {e}") from e

        if line == "":
            raise InputStreamError("Input stream closed")

        text = line.strip()
        return text or None

    def ask(self, text: str) -> Optional[str]:
        """Show a prompt and read the answer."""
        self.prompt(text)
        return self.get_input()

    def get_amount(self, text: str = "Amount: ") -> Optional[float]:
        """
        Prompt until a number is entered.

        Returns:
            The parsed amount, or None if the user entered an empty line
        """
        while True:
            raw = self.ask(text)
            if raw is None:
                return None
            try:
                return float(raw)
            except ValueError:
                logger.debug("invalid_amount", raw_input=raw)
                if self._audit_logger:
                    self._audit_logger.log_invalid_amount(raw)
                self.write(f"'{raw}' is not a valid amount. Please try again.")
