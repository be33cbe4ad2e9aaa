import pytest

import reduct.function as function_module
from reduct.function import (
    Closure,
    ConstKind,
    ConstSlot,
    Function,
    Instruction,
    Mode,
    Opcode,
)


class _NumberItem:
    def __init__(self, value):
        self.value = value

    def number(self):
        return self.value


def test_emit_records_instruction_and_position():
    fn = Function()
    first = fn.emit(Instruction(Opcode.LIST, a=1), 4)
    second = fn.emit(Instruction(Opcode.RET, c=1), 9)
    assert (first, second) == (0, 1)
    assert [i.op for i in fn.insts] == [Opcode.LIST, Opcode.RET]
    assert fn.positions == [4, 9]


def test_instruction_mode():
    inst = Instruction(Opcode.MOV, a=1, c=2)
    assert inst.mode == Mode.REG
    assert not inst.is_const
    assert Instruction(Opcode.MOV, a=1, c=2, mode=Mode.CONST).is_const


def test_instruction_rejects_bad_operands():
    with pytest.raises(ValueError):
        Instruction(Opcode.MOV, mode=Mode.TARGET)
    with pytest.raises(ValueError):
        Instruction(Opcode.MOV, a=-1)


def test_lookup_constant_deduplicates_by_identity():
    fn = Function()
    first, second = [1], [1]
    i1 = fn.lookup_constant(ConstSlot(ConstKind.ITEM, first))
    i2 = fn.lookup_constant(ConstSlot(ConstKind.ITEM, second))
    i3 = fn.lookup_constant(ConstSlot(ConstKind.ITEM, first))
    assert i1 == i3
    assert i1 != i2
    assert len(fn.constants) == 2


def test_lookup_constant_distinguishes_kind():
    fn = Function()
    name = object()
    a = fn.lookup_constant(ConstSlot(ConstKind.ITEM, name))
    b = fn.lookup_constant(ConstSlot(ConstKind.CAPTURE, name))
    assert a != b
    assert fn.constants[b].kind == ConstKind.CAPTURE


def test_lookup_constant_limit(monkeypatch):
    monkeypatch.setattr(function_module, "CONSTANT_MAX", 3)
    fn = Function()
    for _ in range(3):
        fn.lookup_constant(ConstSlot(ConstKind.ITEM, object()))
    with pytest.raises(OverflowError):
        fn.lookup_constant(ConstSlot(ConstKind.ITEM, object()))
    assert len(fn.constants) == 3


def test_closure_resolves_constants():
    fn = Function(arity=2)
    plain = object()
    fn.lookup_constant(ConstSlot(ConstKind.NONE))
    fn.lookup_constant(ConstSlot(ConstKind.CAPTURE, object()))
    fn.lookup_constant(ConstSlot(ConstKind.ITEM, _NumberItem(7)))
    fn.lookup_constant(ConstSlot(ConstKind.ITEM, _NumberItem(2.5)))
    fn.lookup_constant(ConstSlot(ConstKind.ITEM, plain))
    not_number = _NumberItem(None)
    fn.lookup_constant(ConstSlot(ConstKind.ITEM, not_number))
    closure = Closure(fn)
    assert closure.function is fn
    assert closure.constants[:4] == [None, None, 7, 2.5]
    assert closure.constants[4] is plain
    assert closure.constants[5] is not_number


def test_closures_have_independent_constants():
    fn = Function()
    fn.lookup_constant(ConstSlot(ConstKind.CAPTURE, object()))
    one, two = Closure(fn), Closure(fn)
    one.constants[0] = 42
    assert two.constants[0] is None