"""Fixed-size bit sets."""

from __future__ import annotations

from typing import Optional

__all__ = ["Bitmap"]


class Bitmap:
    """A fixed number of bits, all clear at first."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("bitmap size must not be negative")
        self.size = size
        self._bits = 0

    def _check(self, bit: int) -> None:
        if not 0 <= bit < self.size:
            raise IndexError(f"bit {bit} out of range for bitmap of size {self.size}")

    def set(self, bit: int) -> None:
        self._check(bit)
        self._bits |= 1 << bit

    def clear(self, bit: int) -> None:
        self._check(bit)
        self._bits &= ~(1 << bit)

    def test(self, bit: int) -> bool:
        self._check(bit)
        return bool(self._bits >> bit & 1)

    def find_first_clear(self) -> Optional[int]:
        """Index of the lowest clear bit, or None when every bit is set."""
        return self.next_clear(0)

    def next_set(self, start: int) -> Optional[int]:
        """Index of the first set bit at or after ``start``, or None."""
        if start < 0:
            raise ValueError("start must not be negative")
        if start >= self.size:
            return None
        word = self._bits >> start
        if word == 0:
            return None
        index = start + ((word & -word).bit_length() - 1)
        return index if index < self.size else None

    def next_clear(self, start: int) -> Optional[int]:
        """Index of the first clear bit at or after ``start``, or None."""
        if start < 0:
            raise ValueError("start must not be negative")
        if start >= self.size:
            return None
        inverted = ~self._bits >> start
        index = start + ((inverted & -inverted).bit_length() - 1)
        return index if index < self.size else None