"""
dance/errors.py - Dance Error Taxonomy

ParseError: a program token is malformed. Recoverable at the CLI boundary.
PreconditionViolation: a move does not fit the line it is applied to.

Both derive from StopRule: a bad move invalidates the whole program, so
the run halts instead of producing a partial answer.
"""

from typing import Optional

from receipts import StopRule


class ParseError(StopRule, ValueError):
    """Raised when a move token cannot be parsed."""

    def __init__(self, message: str, token: str, index: Optional[int] = None):
        self.reason = message
        self.token = token
        self.index = index
        if index is not None:
            message = f"move {index} ({token!r}): {message}"
        else:
            message = f"{token!r}: {message}"
        super().__init__(message)


class PreconditionViolation(StopRule):
    """Raised when a move references a position or symbol the line lacks."""

    def __init__(self, message: str, move=None):
        self.move = move
        super().__init__(message)
