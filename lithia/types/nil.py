from __future__ import annotations

from lithia.types.object import Object


class NilType(Object):
    """The empty list, and the only false value."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TrueType(Object):
    """The canonical truth value."""

    __slots__ = ()
    _instance: TrueType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "True"
    def __str__(self): return "t"

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash(TrueType)


Nil = NilType()
T = TrueType()


def truth(flag: bool) -> Object:
    return T if flag else Nil
