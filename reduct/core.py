"""The interpreter state: interned atoms, global constants and source inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .atom import Atom, AtomTable

__all__ = ["CONSTANTS_MAX", "Input", "Reduct"]

CONSTANTS_MAX = 256


@dataclass
class Input:
    """A source text that items were parsed from."""

    id: int
    buffer: str
    path: str
    ast: Any = None


class Reduct:
    """State shared by the parser, compiler and evaluator."""

    def __init__(self) -> None:
        self.atoms = AtomTable()
        self._constants: List[Tuple[Atom, Any]] = []
        self._inputs: List[Input] = []
        self._next_input_id = 0
        self.args: List[str] = []

        self.true_item = Atom.from_int(1)
        self.false_item = Atom.from_int(0)
        self.nil_item: Tuple[()] = ()
        self.pi_item = Atom.from_float(math.pi)
        self.e_item = Atom.from_float(math.e)

        self.register_constant("true", self.true_item)
        self.register_constant("false", self.false_item)
        self.register_constant("nil", self.nil_item)
        self.register_constant("pi", self.pi_item)
        self.register_constant("e", self.e_item)

    @property
    def constants(self) -> Tuple[Tuple[Atom, Any], ...]:
        """Registered constants as (name atom, item) pairs, oldest first."""
        return tuple(self._constants)

    def register_constant(self, name: str, item: Any) -> Atom:
        """Bind ``name`` to ``item`` for every program; return the name's atom."""
        if len(self._constants) >= CONSTANTS_MAX:
            raise OverflowError(f"too many constants, limit is {CONSTANTS_MAX}")
        atom = self.atoms.lookup(name)
        self._constants.append((atom, item))
        return atom

    def constant(self, name: str) -> Any:
        """The item first registered under ``name``."""
        for atom, item in self._constants:
            if atom.text == name and not atom.quoted:
                return item
        raise KeyError(name)

    def add_input(self, buffer: str, path: str) -> Input:
        """Record a source text and give it a fresh id."""
        source = Input(self._next_input_id, buffer, path)
        self._next_input_id += 1
        self._inputs.append(source)
        return source

    def find_input(self, input_id: int) -> Optional[Input]:
        """The input with ``input_id``, or None."""
        for source in reversed(self._inputs):
            if source.id == input_id:
                return source
        return None

    def set_args(self, args: Sequence[str]) -> None:
        """Set the program arguments scripts can read."""
        self.args = list(args)