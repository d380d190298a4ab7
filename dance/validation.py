"""
dance/validation.py - Config and Program Validation

Checks run before the first round so a bad program fails with the index
and token of the offending move instead of partway through a dance.
"""

from .constants import ALPHABET, MIN_SIZE, MAX_SIZE
from .errors import PreconditionViolation
from .types_config import DanceConfig
from .types_move import Exchange, Partner, Program


def validate_config(config: DanceConfig) -> None:
    """
    Validate run parameters.

    Raises:
        ValueError: size outside MIN_SIZE..MAX_SIZE or negative rounds
    """
    if not MIN_SIZE <= config.size <= MAX_SIZE:
        raise ValueError(
            f"size must be in {MIN_SIZE}..{MAX_SIZE}, got {config.size}"
        )
    if config.rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {config.rounds}")


def validate_program(program: Program, size: int) -> None:
    """
    Check every move fits a line of `size` symbols.

    Spins always fit. Exchange positions must be < size; partner symbols
    must be among the first `size` letters.

    Args:
        program: Parsed moves
        size: Line length

    Raises:
        PreconditionViolation: naming the first move that does not fit
    """
    symbols = ALPHABET[:size]
    allowed = set(symbols)
    for index, move in enumerate(program):
        if isinstance(move, Exchange):
            bad = [pos for pos in (move.first, move.second) if pos >= size]
            if bad:
                raise PreconditionViolation(
                    f"move {index} ({move}): position {bad[0]} out of range "
                    f"for a line of {size}",
                    move,
                )
        elif isinstance(move, Partner):
            bad = [sym for sym in (move.first, move.second) if sym not in allowed]
            if bad:
                raise PreconditionViolation(
                    f"move {index} ({move}): symbol {bad[0]!r} not in {symbols!r}",
                    move,
                )
