"""
dance/cycle.py - Cycle-Accelerated Dance Loop

Main entry points: run_dance, run_config.
Pure functions with receipts.
"""

from typing import Dict, Optional

from receipts import dual_hash, emit_receipt

from .constants import DEFAULT_SIZE, TENANT_ID
from .engine import dance_round, perform_rounds
from .loader import load_program
from .types_config import DanceConfig
from .types_move import Program, render_program
from .types_result import DanceResult
from .types_state import DanceState
from .validation import validate_config, validate_program


def run_dance(program: Program, rounds: int, size: int = DEFAULT_SIZE,
              initial: Optional[DanceState] = None,
              tenant_id: str = TENANT_ID) -> DanceResult:
    """
    Line after exactly `rounds` rounds of `program`.

    Each round's line is recorded under its key with the zero-based round
    index. The first repeat at index i of a line seen at index j means the
    dance is periodic with length i - j from round j + 1 on, so only
    (rounds - 1 - i) % length further rounds are needed.

    Args:
        program: Parsed moves, replayed every round
        rounds: Number of rounds, >= 0
        size: Line length when no initial state is given
        initial: Starting line (default: first `size` letters)
        tenant_id: Tenant stamped on receipts

    Returns:
        DanceResult with final state, cycle data and receipts
    """
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")

    current = initial if initial is not None else DanceState.initial(size)
    receipts = []
    seen: Dict[str, int] = {}
    cycle_start = None
    cycle_length = None
    simulated = 0

    for i in range(rounds):
        current = dance_round(current, program)
        simulated += 1

        key = current.key()
        if key in seen:
            first = seen[key]
            cycle_start = first + 1
            cycle_length = i - first
            receipts.append(emit_receipt("cycle_detected", {
                "tenant_id": tenant_id,
                "cycle_start": cycle_start,
                "cycle_length": cycle_length,
                "detected_at_round": i + 1,
                "state": key,
            }))
            remaining = (rounds - 1 - i) % cycle_length
            current = perform_rounds(current, program, remaining)
            simulated += remaining
            break
        seen[key] = i

    receipts.append(emit_receipt("dance_complete", {
        "tenant_id": tenant_id,
        "size": len(current),
        "rounds": rounds,
        "rounds_simulated": simulated,
        "final_state": current.key(),
        "cycle_length": cycle_length,
        "program_hash": dual_hash(render_program(program)),
    }))

    return DanceResult(
        final_state=current,
        rounds=rounds,
        rounds_simulated=simulated,
        cycle_start=cycle_start,
        cycle_length=cycle_length,
        receipts=receipts,
    )


def run_config(config: DanceConfig) -> DanceResult:
    """
    Validate config, load and check the program, then dance.

    Args:
        config: DanceConfig with parameters

    Returns:
        DanceResult
    """
    validate_config(config)
    program = load_program(config.program_path)
    validate_program(program, config.size)
    return run_dance(program, config.rounds, size=config.size,
                     tenant_id=config.tenant_id)
