"""
dance/types_move.py - Move Dataclasses

The three dance moves. Frozen dataclasses, no behavior beyond rendering
back to the token they were parsed from.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .constants import (
    SPIN_PREFIX, EXCHANGE_PREFIX, PARTNER_PREFIX, OPERAND_SEPARATOR, MOVE_SEPARATOR
)


@dataclass(frozen=True)
class Spin:
    """Move the last `amount` symbols to the front, keeping their order."""
    amount: int

    def __str__(self) -> str:
        return f"{SPIN_PREFIX}{self.amount}"


@dataclass(frozen=True)
class Exchange:
    """Swap the symbols at two positions."""
    first: int
    second: int

    def __str__(self) -> str:
        return f"{EXCHANGE_PREFIX}{self.first}{OPERAND_SEPARATOR}{self.second}"


@dataclass(frozen=True)
class Partner:
    """Swap the positions of two named symbols."""
    first: str
    second: str

    def __str__(self) -> str:
        return f"{PARTNER_PREFIX}{self.first}{OPERAND_SEPARATOR}{self.second}"


Move = Union[Spin, Exchange, Partner]
Program = Tuple[Move, ...]


def render_program(program: Program) -> str:
    """Render a program back to its comma-separated token form."""
    return MOVE_SEPARATOR.join(str(move) for move in program)
