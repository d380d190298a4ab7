"""
dance/engine.py - Transformation Engine

apply_move / dance_round / perform_rounds. Pure functions: the input state
is never modified, a new DanceState is returned.
"""

import numpy as np

from .errors import PreconditionViolation
from .types_move import Spin, Exchange, Partner, Move, Program
from .types_state import DanceState


def spin(state: DanceState, amount: int) -> DanceState:
    """Rotate so the last `amount % len(state)` symbols lead."""
    return DanceState.from_array(np.roll(state.symbols, amount % len(state)))


def exchange(state: DanceState, first: int, second: int) -> DanceState:
    """Swap the symbols at two positions."""
    size = len(state)
    for pos in (first, second):
        if not 0 <= pos < size:
            raise PreconditionViolation(
                f"exchange position {pos} out of range for a line of {size}",
                Exchange(first, second),
            )
    arr = state.symbols.copy()
    arr[[first, second]] = arr[[second, first]]
    return DanceState.from_array(arr)


def partner(state: DanceState, first: str, second: str) -> DanceState:
    """Swap the positions of two symbols."""
    positions = []
    for symbol in (first, second):
        pos = state.position_of(symbol)
        if pos < 0:
            raise PreconditionViolation(
                f"partner symbol {symbol!r} not in line {state}",
                Partner(first, second),
            )
        positions.append(pos)
    return exchange(state, *positions)


def apply_move(state: DanceState, move: Move) -> DanceState:
    """
    Apply one move.

    Args:
        state: Current line
        move: Spin, Exchange or Partner

    Returns:
        New DanceState

    Raises:
        PreconditionViolation: position out of range or symbol absent
    """
    if isinstance(move, Spin):
        return spin(state, move.amount)
    if isinstance(move, Exchange):
        return exchange(state, move.first, move.second)
    if isinstance(move, Partner):
        return partner(state, move.first, move.second)
    raise TypeError(f"not a dance move: {move!r}")


def dance_round(state: DanceState, program: Program) -> DanceState:
    """One round: every move of the program, left to right."""
    for move in program:
        state = apply_move(state, move)
    return state


def perform_rounds(state: DanceState, program: Program, n: int) -> DanceState:
    """Apply `n` rounds in a plain loop."""
    for _ in range(n):
        state = dance_round(state, program)
    return state
