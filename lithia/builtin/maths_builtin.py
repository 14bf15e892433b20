from __future__ import annotations

import numpy as np

from lithia.types.object import Object, Number
from lithia.types.native_fn import NativeFunc
from lithia.types.environment import Environment
from lithia.builtin.args import split_args, eval_number


def sqrt(env: Environment, args: Object) -> Number:
    (x,) = split_args(args, 1)
    with np.errstate(invalid="ignore"):
        return Number(np.sqrt(eval_number(x, env)))


def exp(env: Environment, args: Object) -> Number:
    (x,) = split_args(args, 1)
    with np.errstate(over="ignore"):
        return Number(np.exp(eval_number(x, env)))


def power(env: Environment, args: Object) -> Number:
    """(pow base exponent)"""
    base, exponent = split_args(args, 2)
    base_value = eval_number(base, env)
    exponent_value = eval_number(exponent, env)
    with np.errstate(all="ignore"):
        return Number(np.power(base_value, exponent_value))


FUNCTIONS = {
    "sqrt": sqrt,
    "exp": exp,
    "pow": power,
    "^": power,
}


def register(env: Environment) -> None:
    for name, fn in FUNCTIONS.items():
        env.bind(name, NativeFunc(fn), is_global=True)
