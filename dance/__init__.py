"""
dance - Permutation Dance Package

Public API for the cycle-accelerated dance simulator.
Flat, focused files. One file = one responsibility.
"""

# =============================================================================
# TYPES (Dataclasses)
# =============================================================================
from .types_move import Spin, Exchange, Partner, Move, Program, render_program
from .types_state import DanceState
from .types_config import DanceConfig
from .types_result import DanceResult

# =============================================================================
# CONSTANTS
# =============================================================================
from .constants import (
    ALPHABET,
    MIN_SIZE,
    MAX_SIZE,
    DEFAULT_SIZE,
    DEFAULT_PROGRAM,
    DEFAULT_ROUNDS,
    RECEIPT_SCHEMA,
)

# =============================================================================
# ERRORS
# =============================================================================
from .errors import ParseError, PreconditionViolation

# =============================================================================
# PARSING AND LOADING
# =============================================================================
from .parse import parse_move, parse_program
from .loader import load_program

# =============================================================================
# ENGINE
# =============================================================================
from .engine import apply_move, dance_round, perform_rounds

# =============================================================================
# CORE SIMULATION
# =============================================================================
from .cycle import run_dance, run_config

# =============================================================================
# VALIDATION
# =============================================================================
from .validation import validate_config, validate_program

# =============================================================================
# EXPORT
# =============================================================================
from .export import generate_report, export_json

__all__ = [
    # Types
    "Spin",
    "Exchange",
    "Partner",
    "Move",
    "Program",
    "render_program",
    "DanceState",
    "DanceConfig",
    "DanceResult",
    # Constants
    "ALPHABET",
    "MIN_SIZE",
    "MAX_SIZE",
    "DEFAULT_SIZE",
    "DEFAULT_PROGRAM",
    "DEFAULT_ROUNDS",
    "RECEIPT_SCHEMA",
    # Errors
    "ParseError",
    "PreconditionViolation",
    # Parsing
    "parse_move",
    "parse_program",
    "load_program",
    # Engine
    "apply_move",
    "dance_round",
    "perform_rounds",
    # Simulation
    "run_dance",
    "run_config",
    # Validation
    "validate_config",
    "validate_program",
    # Export
    "generate_report",
    "export_json",
]
