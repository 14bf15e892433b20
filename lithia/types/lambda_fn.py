"""Interpreted function representation for lithia."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from lithia.types.object import Object


class LispFunc(Object):
    """A function written in lisp: positional parameter names and a body.

    There is no captured environment. Calls bind the parameters in a fresh
    frame whose parent is the global table.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: Sequence[str], body: Sequence[Object]):
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[Object, ...] = tuple(body)

    # Functions are never equal, not even to themselves.
    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = Object.__hash__

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<function (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"LispFunc({list(self.params)!r}, {list(self.body)!r})"
