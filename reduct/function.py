"""Compiled functions, their instructions and constant slots, and closures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List

__all__ = [
    "REGISTER_MAX",
    "CONSTANT_MAX",
    "Opcode",
    "Mode",
    "Instruction",
    "ConstKind",
    "ConstSlot",
    "Function",
    "Closure",
]

REGISTER_MAX = 256
CONSTANT_MAX = 1 << 16


class Opcode(enum.IntEnum):
    NONE = 0
    LIST = enum.auto()
    JMP = enum.auto()
    JMPF = enum.auto()
    JMPT = enum.auto()
    CALL = enum.auto()
    MOV = enum.auto()
    RET = enum.auto()
    APPEND = enum.auto()
    EQ = enum.auto()
    NEQ = enum.auto()
    SEQ = enum.auto()
    SNEQ = enum.auto()
    LT = enum.auto()
    LE = enum.auto()
    GT = enum.auto()
    GE = enum.auto()
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()
    BAND = enum.auto()
    BOR = enum.auto()
    BXOR = enum.auto()
    BNOT = enum.auto()
    SHL = enum.auto()
    SHR = enum.auto()
    CLOSURE = enum.auto()
    CAPTURE = enum.auto()
    TAILCALL = enum.auto()


class Mode(enum.IntEnum):
    """Where an expression's value lives."""

    NONE = 0
    REG = 1
    CONST = 2
    TARGET = 3


@dataclass(frozen=True)
class Instruction:
    """One bytecode instruction; ``mode`` says whether ``c`` names a register or a constant."""

    op: Opcode
    a: int = 0
    b: int = 0
    c: int = 0
    sbx: int = 0
    mode: Mode = Mode.REG

    def __post_init__(self) -> None:
        if self.mode not in (Mode.REG, Mode.CONST):
            raise ValueError(f"instruction operand mode must be REG or CONST, got {self.mode.name}")
        if min(self.a, self.b, self.c) < 0:
            raise ValueError("instruction operands must not be negative")

    @property
    def is_const(self) -> bool:
        return self.mode is Mode.CONST


class ConstKind(enum.IntEnum):
    NONE = 0
    ITEM = 1
    CAPTURE = 2


@dataclass(frozen=True, eq=False)
class ConstSlot:
    """A function constant: an item, or the name of a variable to capture."""

    kind: ConstKind
    value: Any = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstSlot):
            return NotImplemented
        return self.kind == other.kind and self.value is other.value

    def __hash__(self) -> int:
        return hash((self.kind, id(self.value)))


class Function:
    """A compiled function prototype."""

    def __init__(self, arity: int = 0) -> None:
        self.arity = arity
        self.insts: List[Instruction] = []
        self.positions: List[int] = []
        self.constants: List[ConstSlot] = []
        self.register_count = 0

    def emit(self, inst: Instruction, position: int = 0) -> int:
        """Append an instruction with its source position; return its index."""
        self.insts.append(inst)
        self.positions.append(position)
        return len(self.insts) - 1

    def lookup_constant(self, slot: ConstSlot) -> int:
        """Index of ``slot`` among the constants, adding it if it is new."""
        for index, existing in enumerate(self.constants):
            if existing == slot:
                return index
        if len(self.constants) >= CONSTANT_MAX:
            raise OverflowError("too many constants in function")
        self.constants.append(slot)
        return len(self.constants) - 1


@dataclass(eq=False)
class Closure:
    """A function instance holding its own copy of the constant values."""

    function: Function
    constants: List[Any] = field(init=False)

    def __init__(self, function: Function) -> None:
        self.function = function
        self.constants = [self._resolve(slot) for slot in function.constants]

    @staticmethod
    def _resolve(slot: ConstSlot) -> Any:
        if slot.kind is not ConstKind.ITEM:
            return None
        item = slot.value
        number = getattr(item, "number", None)
        if callable(number):
            value = number()
            if value is not None:
                return value
        return item