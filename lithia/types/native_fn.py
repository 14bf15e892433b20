from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from lithia.types.object import Object

if TYPE_CHECKING:
    from lithia.types.environment import Environment

# A builtin receives the environment and the raw, unevaluated argument list.
NativeFn = Callable[["Environment", Object], Object]


class NativeFunc(Object):
    """Host builtin with fexpr semantics."""

    __slots__ = ("fn",)

    def __init__(self, fn: NativeFn):
        if not callable(fn):
            raise TypeError(f"NativeFunc requires a callable, got {fn!r}")
        self.fn = fn

    def __call__(self, env: Environment, args: Object) -> Object:
        return self.fn(env, args)

    # Function identity is not comparable.
    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = Object.__hash__

    def __str__(self):
        return f"<native function {getattr(self.fn, '__name__', '?')}>"

    def __repr__(self):
        return f"NativeFunc({getattr(self.fn, '__qualname__', self.fn)!r})"
