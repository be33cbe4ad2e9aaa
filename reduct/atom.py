"""Atoms, the textual values of the language, and the table that interns them."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple, Union

from .numeric import format_float, format_int, normalize_escapes, parse_number

__all__ = ["Atom", "AtomTable"]

Number = Union[int, float]

_UNCHECKED = object()


class Atom:
    """A piece of text; numbers are atoms whose text parses as one.

    Atoms compare by identity, which is what interning relies on.
    """

    __slots__ = ("text", "quoted", "_number")

    def __init__(self, text: str = "", quoted: bool = False) -> None:
        self.text = text
        self.quoted = quoted
        self._number: object = _UNCHECKED

    @classmethod
    def from_int(cls, value: int) -> "Atom":
        """An atom holding a 64-bit integer and its decimal text."""
        atom = cls(format_int(value))
        atom._number = int(value)
        return atom

    @classmethod
    def from_float(cls, value: float) -> "Atom":
        """An atom holding a float; its text is rounded to six decimals."""
        atom = cls(format_float(value))
        atom._number = float(value)
        return atom

    def number(self) -> Optional[Number]:
        """The integer or float the atom stands for, or None."""
        if self._number is _UNCHECKED:
            self._number = parse_number(self.text)
        return self._number  # type: ignore[return-value]

    def is_int(self) -> bool:
        return isinstance(self.number(), int)

    def is_float(self) -> bool:
        return isinstance(self.number(), float)

    def is_number(self) -> bool:
        return self.number() is not None

    def is_falsy(self) -> bool:
        """Empty atoms and numbers equal to zero are falsy."""
        if not self.text:
            return True
        value = self.number()
        return value is not None and value == 0

    def substr(self, start: int, length: int) -> "Atom":
        """The atom made of ``length`` characters from ``start``."""
        if length == 0:
            return Atom("")
        if start == 0 and length == len(self.text):
            return self
        if start < 0 or length < 0 or start + length > len(self.text):
            raise IndexError(
                f"substring {start}+{length} out of range for atom of length {len(self.text)}"
            )
        return Atom(self.text[start:start + length])

    def superstr(self, length: int) -> "Atom":
        """A longer atom starting with this one's text, the rest filled with NUL."""
        if length <= len(self.text):
            raise ValueError("superstring must be longer than the atom")
        return Atom(self.text + "\0" * (length - len(self.text)))

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        prefix = "quoted " if self.quoted else ""
        return f"<Atom {prefix}{self.text!r}>"


class AtomTable:
    """Interned atoms, one per text and quoting."""

    def __init__(self) -> None:
        self._map: Dict[Tuple[str, bool], Atom] = {}

    def lookup(self, text: str, quoted: bool = False) -> Atom:
        """The interned atom for ``text``, created when missing.

        Quoted text has its escapes decoded before it is stored.
        """
        if quoted:
            text = normalize_escapes(text)
        key = (text, quoted)
        atom = self._map.get(key)
        if atom is None:
            atom = Atom(text, quoted)
            self._map[key] = atom
        return atom

    def intern(self, atom: Atom) -> None:
        """Add an atom built elsewhere; another atom with its text is an error."""
        key = (atom.text, atom.quoted)
        existing = self._map.get(key)
        if existing is atom:
            return
        if existing is not None:
            raise ValueError(f"atom {atom.text!r} already interned")
        self._map[key] = atom

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, atom: object) -> bool:
        if not isinstance(atom, Atom):
            return False
        return self._map.get((atom.text, atom.quoted)) is atom

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._map.values())