"""
dance/types_state.py - DanceState

The line of dancers. Backed by a read-only numpy array of single-letter
strings, so every transformation has to build a new state.
"""

from typing import Iterable, Iterator

import numpy as np

from .constants import ALPHABET, MIN_SIZE, MAX_SIZE


class DanceState:
    """Ordered line of unique symbols with value semantics."""

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Iterable[str]):
        items = list(symbols)
        if not items:
            raise ValueError("a line needs at least one symbol")
        for item in items:
            if not isinstance(item, str) or len(item) != 1:
                raise ValueError(f"symbols must be single characters, got {item!r}")
        if len(set(items)) != len(items):
            dupes = sorted({s for s in items if items.count(s) > 1})
            raise ValueError(f"symbols must be unique, repeated: {''.join(dupes)}")
        arr = np.array(items, dtype="<U1")
        arr.setflags(write=False)
        self._symbols = arr

    @classmethod
    def initial(cls, size: int) -> "DanceState":
        """
        First `size` letters of the alphabet in natural order.

        Args:
            size: Number of symbols, MIN_SIZE..MAX_SIZE

        Returns:
            DanceState, e.g. size=5 -> "abcde"
        """
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"size must be in {MIN_SIZE}..{MAX_SIZE}, got {size}")
        return cls(ALPHABET[:size])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "DanceState":
        """Wrap an array the caller will not touch again."""
        state = cls.__new__(cls)
        arr.setflags(write=False)
        state._symbols = arr
        return state

    @property
    def symbols(self) -> np.ndarray:
        """Read-only view of the backing array."""
        return self._symbols

    def key(self) -> str:
        """Canonical string form, used as the observation table key."""
        return "".join(self._symbols.tolist())

    def position_of(self, symbol: str) -> int:
        """Index of symbol in the line, or -1 when absent."""
        hits = np.flatnonzero(self._symbols == symbol)
        return int(hits[0]) if hits.size else -1

    def __len__(self) -> int:
        return int(self._symbols.size)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, DanceState):
            return NotImplemented
        return bool(np.array_equal(self._symbols, other._symbols))

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        return self.key()

    def __repr__(self) -> str:
        return f"DanceState({self.key()!r})"
