"""
dance/loader.py - Program Loader

Reads program text from disk and hands it to the parser.
"""

from pathlib import Path
from typing import Union

from .errors import ParseError
from .parse import parse_program
from .types_move import Program


def load_program(path: Union[str, Path]) -> Program:
    """
    Load and parse a program file.

    Args:
        path: UTF-8 text file holding one comma-separated program

    Returns:
        Tuple of moves

    Raises:
        FileNotFoundError: path does not exist
        OSError: path cannot be read (directory, permissions)
        ParseError: file is not UTF-8 text, or a token is malformed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"program file is not UTF-8 text (byte {exc.start}: {exc.reason})",
            str(path),
        ) from exc
    return parse_program(text)
