"""Reduct building blocks: character table, number rules, interned atoms, bytecode functions, closures, runtime state and disassembly."""

__version__ = "2.0.2"

__all__ = [
    "atom",
    "bitmap",
    "chars",
    "core",
    "disasm",
    "function",
    "numeric",
]