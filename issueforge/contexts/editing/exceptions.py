"""Custom exceptions for the editing context."""

from typing import Optional


class InvalidCommandError(ValueError):
    """
    Exception raised when an edit command line cannot be parsed.

    Attributes:
        message: Error description
        line: The command line that failed to parse
    """

    def __init__(self, message: str, line: Optional[str] = None):
        self.message = message
        self.line = line

        parts = [message]
        if line is not None:
            parts.append(f"Command: {line}")

        super().__init__("\n".join(parts))
