# reduct

Building blocks for Reduct, a functional, S-expression based configuration
and scripting language with a register-based bytecode. The package provides:

- `reduct.chars`: the character table. `char_info` returns a `CharInfo`
  (flags, upper and lower case, escape letters, digit value); helpers such as
  `is_whitespace`, `is_symbol`, `is_digit`, `is_hex_digit`, `is_letter`,
  `to_lower`, `to_upper`, `digit_value`, `decode_escape` and `encode_escape`
  answer single questions.
- `reduct.bitmap`: `Bitmap`, a fixed-size bit set with `set`, `clear`, `test`,
  `find_first_clear`, `next_set` and `next_clear`.
- `reduct.numeric`: `format_int`, `format_float`, `parse_number` and
  `normalize_escapes`, which follow the language's rules for number literals
  (signs, `inf`/`nan`, `0x`/`0o`/`0b` prefixes, `_` separators, exponents,
  64-bit integer range) and string escapes (`\n`, `\t`, `\e`, `\xHH`, ...).
- `reduct.atom`: `Atom`, a piece of text that may stand for a number, and
  `AtomTable`, which interns atoms so that equal text gives the same object.
- `reduct.function`: `Opcode`, `Mode`, `Instruction`, `ConstKind`,
  `ConstSlot`, `Function` (instructions, source positions, deduplicated
  constants) and `Closure` (a function with its own constant values).
- `reduct.core`: `Reduct`, the shared state, holding the atom table, the
  built-in constants `true`, `false`, `nil`, `pi` and `e`, the source
  `Input`s and the program arguments.
- `reduct.disasm`: `disassemble`, which renders a function, and every function
  among its constants, as a text listing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Numbers and escapes:

```python
from reduct.numeric import parse_number, format_float, normalize_escapes

parse_number("1_000")      # 1000
parse_number("0x_ff")      # None: an underscore must follow a digit
parse_number("-1.5e2")     # -150.0
format_float(2.5)          # "2.5"
normalize_escapes(r"a\tb") # "a\tb"
```

Atoms and the runtime state:

```python
from reduct.core import Reduct

reduct = Reduct()
name = reduct.atoms.lookup("answer")
assert reduct.atoms.lookup("answer") is name

true = reduct.constant("true")
true.text, true.number()   # ("1", 1)
reduct.constant("false").is_falsy()  # True
```

Building a function by hand and listing it:

```python
from reduct.atom import Atom
from reduct.disasm import disassemble
from reduct.function import (
    Closure, ConstKind, ConstSlot, Function, Instruction, Mode, Opcode,
)

function = Function(0)
k = function.lookup_constant(ConstSlot(ConstKind.ITEM, Atom.from_int(42)))
function.emit(Instruction(Opcode.MOV, a=0, c=k, mode=Mode.CONST))
function.emit(Instruction(Opcode.RET, c=0, mode=Mode.REG))

Closure(function).constants  # [42]
print(disassemble(function))
```

## What this package does not do

There is no reader that turns source text into items, no compiler from
expressions to bytecode, no evaluator that runs a `Function` or `Closure`,
no standard library of native functions and no command-line tool. Functions
are built by emitting `Instruction`s directly, and `disassemble` is the only
way to look at what they contain.