from __future__ import annotations

import logging
from typing import Iterable

from lithia.types.object import Object
from lithia.types.native_fn import NativeFunc, NativeFn
from lithia.types.environment import Environment, GlobalTable
from lithia.reader.parser import read
from lithia.evaluation.evaluator import evaluate, evaluate_sequence
from lithia.builtin.env_builtin import register as register_std
from lithia.builtin.maths_builtin import register as register_maths
from lithia.builtin.sys_builtin import register as register_sys

logger = logging.getLogger(__name__)


class Lisp:
    """
    Host-facing interpreter: owns an Environment and evaluates source text.

    Builder methods return self, so a host can write

        Lisp(defaults=False).add_env_std().add_func("beep", beep).eval(code)
    """

    def __init__(self, defaults: bool = True, globals: GlobalTable | None = None):
        self.env: Environment = Environment(globals)
        if defaults:
            self.add_default_envs()

    # --- Registration ---
    def add_env_std(self) -> Lisp:
        register_std(self.env)
        return self

    def add_env_maths(self) -> Lisp:
        register_maths(self.env)
        return self

    def add_env_sys(self) -> Lisp:
        register_sys(self.env)
        return self

    def add_default_envs(self) -> Lisp:
        logger.debug("registering default environments")
        return self.add_env_std().add_env_maths().add_env_sys()

    def add_var(self, name: str, obj: Object, is_global: bool = True) -> Lisp:
        self.env.bind(name, obj, is_global=is_global)
        return self

    def add_func(self, name: str, fn: NativeFn, is_global: bool = True) -> Lisp:
        logger.debug("registering builtin %s", name)
        return self.add_var(name, NativeFunc(fn), is_global)

    # --- Evaluation ---
    def read(self, code: str) -> list[Object]:
        return read(code)

    def evaluate(self, obj: Object) -> Object:
        return evaluate(obj, self.env)

    def eval_objects(self, objects: Iterable[Object]) -> Object:
        return evaluate_sequence(objects, self.env)

    def eval(self, code: str) -> Object:
        """Read every form in `code`, evaluate them in order and return the last value."""
        return self.eval_objects(read(code))
