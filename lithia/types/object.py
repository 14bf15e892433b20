"""Atomic object variants for lithia.

Every lithia value is an instance of an Object subclass. The variants are
closed: Nil, T, Pair, Symbol, Number, Character, Quoted, LispFunc,
NativeFunc and Opaque. This module holds the base class and the simple
atoms; the singletons, pairs and functions live in sibling modules.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class Object:
    """Base class of the tagged union."""

    __slots__ = ()


class Number(Object):
    """Single precision float; the only numeric type of the language."""

    __slots__ = ("value",)

    def __init__(self, value: float | np.floating):
        self.value: np.float32 = np.float32(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash(float(self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self):
        return f"Number({self})"

    def __str__(self):
        # numpy prints the shortest text that reads back to the same float32
        return str(self.value)


# Escapes understood by the reader inside string literals, and their inverse
# used when a character list is printed back as a string.
STRING_ESCAPES: dict[str, str] = {
    "\\": "\\",
    '"': '"',
    "t": "\t",
    "r": "\r",
    "n": "\n",
    "0": "\0",
}
PRINT_ESCAPES: dict[str, str] = {v: "\\" + k for k, v in STRING_ESCAPES.items()}


class Character(Object):
    __slots__ = ("char",)

    def __init__(self, char: str):
        if len(char) != 1:
            raise ValueError(f"Character requires a single character, got {char!r}")
        self.char = char

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Character) and self.char == other.char

    def __hash__(self) -> int:
        return hash(self.char)

    def __repr__(self):
        return f"Character({self.char!r})"

    def __str__(self):
        return "\\" + self.char


class Quoted(Object):
    """A datum that evaluates to itself without evaluating its contents."""

    __slots__ = ("inner",)

    def __init__(self, inner: Object):
        self.inner = inner

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quoted) and self.inner == other.inner

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"Quoted({self.inner!r})"

    def __str__(self):
        return "'" + str(self.inner)


class Opaque(Object):
    """Host payload carried through the interpreter untouched."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Opaque) and self.value is other.value

    def __hash__(self) -> int:
        return id(self.value)

    def __repr__(self):
        return f"Opaque({self.value!r})"

    def __str__(self):
        return f"<opaque {self.value!r}>"
