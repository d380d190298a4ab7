"""
dance/parse.py - Move Parser

Turns program text into Move values. Pure functions, no receipts.
"""

import re

from .constants import (
    SPIN_PREFIX, EXCHANGE_PREFIX, PARTNER_PREFIX, OPERAND_SEPARATOR, MOVE_SEPARATOR
)
from .errors import ParseError
from .types_move import Spin, Exchange, Partner, Move, Program

_UNSIGNED = re.compile(r"[0-9]+")


def _unsigned(text: str, token: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(f"expected a non-negative integer, got {text!r}", token)
    return int(text)


def parse_move(token: str) -> Move:
    """
    Parse one move token.

    Args:
        token: e.g. "s3", "x3/4", "pe/b"

    Returns:
        Spin, Exchange or Partner

    Raises:
        ParseError: empty token, unrecognized prefix, missing separator,
            non-numeric operand, or wrong partner arity
    """
    if not token:
        raise ParseError("empty operation", token)

    prefix, rest = token[0], token[1:]

    if prefix == SPIN_PREFIX:
        return Spin(_unsigned(rest, token))

    if prefix == EXCHANGE_PREFIX:
        first, sep, second = rest.partition(OPERAND_SEPARATOR)
        if not sep:
            raise ParseError(f"missing {OPERAND_SEPARATOR!r} separator", token)
        return Exchange(_unsigned(first, token), _unsigned(second, token))

    if prefix == PARTNER_PREFIX:
        if len(rest) != 3 or rest[1] != OPERAND_SEPARATOR:
            raise ParseError("expected two single symbols, e.g. 'pa/b'", token)
        return Partner(rest[0], rest[2])

    raise ParseError(f"unrecognized operation {prefix!r}", token)


def parse_program(text: str) -> Program:
    """
    Parse a comma-separated program.

    Surrounding whitespace (including a trailing newline) is ignored, both
    around the whole text and around each token.

    Args:
        text: Program source, e.g. "s1,x3/4,pe/b"

    Returns:
        Tuple of moves in program order

    Raises:
        ParseError: naming the first bad token and its index
    """
    moves = []
    for index, raw in enumerate(text.strip().split(MOVE_SEPARATOR)):
        token = raw.strip()
        try:
            moves.append(parse_move(token))
        except ParseError as exc:
            raise ParseError(exc.reason, token, index) from exc
    return tuple(moves)
