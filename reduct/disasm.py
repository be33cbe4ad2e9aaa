"""Human-readable listings of compiled functions."""

from __future__ import annotations

from typing import Any, List

from .atom import Atom
from .function import ConstKind, ConstSlot, Function, Instruction, Mode, Opcode

__all__ = ["disassemble"]

_DOUBLE_RULE = "=" * 80
_RULE = "-" * 80


def _address(obj: Any) -> str:
    return f"0x{id(obj):x}"


def _op_name(op: Opcode) -> str:
    return "UNKNOWN" if op is Opcode.NONE else op.name


def _operands(inst: Instruction) -> str:
    k = "K" if inst.mode is Mode.CONST else "R"
    a, b, c, sbx = inst.a, inst.b, inst.c, inst.sbx
    blank = " " * 6
    op = inst.op
    if op is Opcode.LIST:
        return f"R{a:<5} {blank} {blank}"
    if op is Opcode.JMP:
        return f"{sbx:<6} {blank} {blank}"
    if op in (Opcode.JMPF, Opcode.JMPT):
        return f"R{a:<5} {sbx:<6} {blank}"
    if op in (Opcode.TAILCALL, Opcode.CALL, Opcode.CAPTURE):
        return f"R{a:<5} {b:<6} {k}{c:<5}"
    if op is Opcode.RET:
        return f"{k}{c:<5} {blank} {blank}"
    if op in (Opcode.APPEND, Opcode.MOV, Opcode.BNOT):
        return f"R{a:<5} {blank} {k}{c:<5}"
    if op is Opcode.CLOSURE:
        return f"R{a:<5} {blank} K{c:<5}"
    return f"R{a:<5} R{b:<5} {k}{c:<5}"


def _describe(slot: ConstSlot, unknown: str) -> str:
    if slot.kind is ConstKind.ITEM:
        item = slot.value
        if isinstance(item, Atom):
            return f'"{item.text}"'
        if isinstance(item, (list, tuple)):
            return f"(list of {len(item)} handles)"
        if isinstance(item, Function):
            return f"(function {_address(item)})"
        return unknown
    if slot.kind is ConstKind.CAPTURE:
        return f"(capture {slot.value})"
    return "(none)"


def _listing(function: Function, out: List[str]) -> None:
    out.append(_DOUBLE_RULE)
    out.append(f"Function: {_address(function)}")
    out.append(f"Arity: {function.arity}")
    out.append(f"Instruction count: {len(function.insts)}")
    out.append(f"Constant count: {len(function.constants)}")
    out.append(_RULE)

    for index, inst in enumerate(function.insts):
        line = f"[{index:04d}] {_op_name(inst.op):<12} {_operands(inst)}"
        if inst.op in (Opcode.JMP, Opcode.JMPF, Opcode.JMPT):
            line += f" ; -> [{index + 1 + inst.sbx:04d}]"
        elif (inst.op is Opcode.CLOSURE or inst.mode is Mode.CONST) and inst.c < len(function.constants):
            line += " ; " + _describe(function.constants[inst.c], "(unknown item)")
        out.append(line)

    if function.constants:
        out.append(_RULE)
        for index, slot in enumerate(function.constants):
            out.append(f"[K{index:03d}] {_describe(slot, '(unknown type)')}")

    out.append(_DOUBLE_RULE)

    for slot in function.constants:
        if slot.kind is ConstKind.ITEM and isinstance(slot.value, Function):
            _listing(slot.value, out)


def disassemble(function: Function) -> str:
    """Listing of a function's instructions and constants, then of each nested function."""
    out: List[str] = []
    _listing(function, out)
    return "\n".join(out) + "\n"