"""
dance/constants.py - Alphabet, Defaults and Receipt Types

All constants for the dance simulator. Centralized for tuning.
Pure data, no behavior.
"""

import string

from receipts import DEFAULT_TENANT

# =============================================================================
# ALPHABET
# =============================================================================

ALPHABET = string.ascii_lowercase  # symbol k is ALPHABET[k]
MIN_SIZE = 1
MAX_SIZE = len(ALPHABET)

# =============================================================================
# INVOCATION DEFAULTS
# =============================================================================

DEFAULT_SIZE = 5
DEFAULT_PROGRAM = "example"
DEFAULT_ROUNDS = 1
TENANT_ID = DEFAULT_TENANT

# =============================================================================
# MOVE TOKENS
# =============================================================================

SPIN_PREFIX = "s"
EXCHANGE_PREFIX = "x"
PARTNER_PREFIX = "p"
OPERAND_SEPARATOR = "/"
MOVE_SEPARATOR = ","

# =============================================================================
# RECEIPT TYPES
# =============================================================================

RECEIPT_SCHEMA = [
    "cycle_detected",
    "dance_complete",
]
