"""
dance/types_result.py - DanceResult Dataclass

Immutable dance result container.
Frozen dataclass.
"""

from dataclasses import dataclass
from typing import Optional

from .types_state import DanceState


@dataclass(frozen=True)
class DanceResult:
    """Immutable dance result.

    cycle_start is the round count after which the repeating line first
    appeared; cycle_length is the gap to its next appearance. Both are None
    when the run finished before any line repeated.
    """
    final_state: DanceState
    rounds: int
    rounds_simulated: int
    cycle_start: Optional[int]
    cycle_length: Optional[int]
    receipts: list

    @property
    def cycle_detected(self) -> bool:
        return self.cycle_length is not None
