"""Cons cells and list helpers.

Pairs are ordinary Python objects, so any number of lists may share a tail.
Only the reader mutates a tail in place, and only on cells it has just built.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from lithia.errors import ArgumentsError, InvalidArguments
from lithia.types.object import Object, Character, PRINT_ESCAPES
from lithia.types.nil import Nil


class Pair(Object):
    __slots__ = ("head", "tail")

    def __init__(self, head: Object, tail: Object = Nil):
        self.head = head
        self.tail = tail

    @classmethod
    def from_iterable(cls, items: Iterable[Object], tail: Object = Nil) -> Object:
        """Build a list from `items`, ending in `tail` (Nil for a proper list)."""
        items = list(items)
        result = tail
        for item in reversed(items):
            result = cls(item, result)
        return result

    def __eq__(self, other: object) -> bool:
        a: object = self
        b: object = other
        # Walk the spine iteratively so long lists do not recurse on the tail
        while isinstance(a, Pair):
            if not isinstance(b, Pair) or a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a == b

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Object]:
        return iter_list(self)

    def __repr__(self):
        return f"Pair({self.head!r}, {self.tail!r})"

    def __str__(self):
        if is_string(self):
            return '"' + list_to_string(self).translate(_PRINT_TABLE) + '"'
        with StringIO() as buffer:
            buffer.write("(")
            cur: Object = self
            first = True
            while isinstance(cur, Pair):
                if not first:
                    buffer.write(" ")
                buffer.write(str(cur.head))
                first = False
                cur = cur.tail
            if cur is not Nil:
                buffer.write(" . ")
                buffer.write(str(cur))
            buffer.write(")")
            return buffer.getvalue()


_PRINT_TABLE = str.maketrans(PRINT_ESCAPES)


def iter_list(obj: Object) -> Iterator[Object]:
    """Yield the heads of a proper list.

    Raises InvalidArguments(DOTTED_PAIR) when the spine ends in anything but
    Nil, after yielding the elements before the offending tail.
    """
    while isinstance(obj, Pair):
        yield obj.head
        obj = obj.tail
    if obj is not Nil:
        raise InvalidArguments(ArgumentsError.DOTTED_PAIR)


def is_string(obj: Object) -> bool:
    """True for a non-empty proper list made only of Characters."""
    if not isinstance(obj, Pair):
        return False
    while isinstance(obj, Pair):
        if not isinstance(obj.head, Character):
            return False
        obj = obj.tail
    return obj is Nil


def string_to_list(text: str) -> Object:
    return Pair.from_iterable(Character(c) for c in text)


def list_to_string(obj: Object) -> str:
    """Inverse of string_to_list; Nil is the empty string."""
    if obj is not Nil and not is_string(obj):
        raise ValueError(f"Not a character list: {obj}")
    chars = []
    while isinstance(obj, Pair):
        chars.append(obj.head.char)
        obj = obj.tail
    return "".join(chars)

