"""Runtime environment for lithia.

An Environment is one evaluator's view of the bindings: a stack of local
frames (innermost last) in front of a global table. The global table is a
plain dict shared by reference between every Environment spawned from the
same interpreter, so included files and function calls observe and extend
the same globals. Globals are write-once per name; locals may shadow freely.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from lithia.errors import GlobalExists, UnknownSymbol, eval_error
from lithia.types.object import Object
from lithia.types.nil import Nil

logger = logging.getLogger(__name__)

GlobalTable = dict[str, Object]


class Environment:
    """Local scope frames plus a shared global table."""

    __slots__ = ("frames", "globals")

    def __init__(self, globals: Optional[GlobalTable] = None):
        self.frames: list[dict[str, Object]] = [{}]
        # Shared, never copied
        self.globals: GlobalTable = globals if globals is not None else {}

    def spawn(self) -> Environment:
        """Return a nested evaluator environment sharing this global table."""
        logger.debug("spawning evaluator over %d globals", len(self.globals))
        return Environment(self.globals)

    # --- Scope frames ---
    def push_scope(self) -> None:
        self.frames.append({})

    def pop_scope(self) -> None:
        self.frames.pop()

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Evaluate a block in a fresh local frame, dropped on exit."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    # --- Bindings ---
    def bind(self, name: str, value: Object, is_global: bool = False) -> None:
        """Create a binding.

        A global binding fails with GlobalExists if the name is already
        defined globally. A local binding goes into the innermost frame and
        always succeeds, shadowing anything further out.
        """
        if is_global:
            if name in self.globals:
                raise eval_error(GlobalExists(name))
            self.globals[name] = value
        else:
            self.frames[-1][name] = value

    def assign(self, name: str, value: Object) -> None:
        """Mutate the nearest existing binding of `name`.

        Searches locals innermost first, then globals. When no binding
        exists anywhere the value is bound locally in the innermost frame.
        """
        for frame in reversed(self.frames):
            if name in frame:
                frame[name] = value
                return
        if name in self.globals:
            self.globals[name] = value
            return
        self.frames[-1][name] = value

    def lookup(self, name: str) -> Object:
        """Resolve `name`; the empty name is the reader's "no object" and is Nil."""
        if not name:
            return Nil
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        try:
            return self.globals[name]
        except KeyError:
            raise eval_error(UnknownSymbol(name)) from None

    def is_bound(self, name: str) -> bool:
        return any(name in frame for frame in self.frames) or name in self.globals

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(" -> ".join(
                "{" + ", ".join(frame) + "}" for frame in reversed(self.frames)
            ))
            buffer.write(f" -> <{len(self.globals)} globals>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
