"""
dance/types_config.py - DanceConfig Dataclass

Immutable configuration for one dance run.
Frozen dataclass, no behavior.
"""

from dataclasses import dataclass

from .constants import DEFAULT_SIZE, DEFAULT_PROGRAM, DEFAULT_ROUNDS, TENANT_ID


@dataclass(frozen=True)
class DanceConfig:
    """Dance run configuration (immutable)."""
    size: int = DEFAULT_SIZE
    program_path: str = DEFAULT_PROGRAM
    rounds: int = DEFAULT_ROUNDS
    tenant_id: str = TENANT_ID
