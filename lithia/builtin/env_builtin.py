"""Standard builtins for the lithia runtime environment.

Arithmetic, equality and list primitives, plus the constant bindings
`t`, `f`, `nil` and `pi`. Every function evaluates its own arguments.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

import numpy as np

from lithia.errors import ArgumentsError, InvalidArguments
from lithia.types.object import Object, Number
from lithia.types.nil import Nil, T, truth
from lithia.types.pair import Pair, iter_list
from lithia.types.native_fn import NativeFunc
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate
from lithia.evaluation.special_forms import register as register_forms
from lithia.builtin.args import split_args, eval_number, wrong_type

BinaryOp = Callable[[np.float32, np.float32], np.float32]


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(env: Environment, args: Object, op: BinaryOp) -> Number:
    """Left fold `op` over one or more numeric arguments, evaluated left to right."""
    values = (eval_number(a, env) for a in iter_list(args))
    first = next(values, None)
    if first is None:
        raise InvalidArguments(ArgumentsError.NOT_ENOUGH)
    # float32 follows IEEE rules: x/0 is inf, 0/0 is nan
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return Number(reduce(op, values, first))


def add(env: Environment, args: Object) -> Number:
    """(+ a b ...)"""
    return _fold(env, args, operator.add)


def sub(env: Environment, args: Object) -> Number:
    """(- a b ...) subtracts each later argument from the first."""
    return _fold(env, args, operator.sub)


def mul(env: Environment, args: Object) -> Number:
    return _fold(env, args, operator.mul)


def div(env: Environment, args: Object) -> Number:
    return _fold(env, args, operator.truediv)


def mod(env: Environment, args: Object) -> Number:
    """Remainder with the sign of the dividend."""
    return _fold(env, args, np.fmod)


# -------------------------------
# Equality
# -------------------------------
def equal(env: Environment, args: Object) -> Object:
    """T if both arguments are structurally equal, else Nil."""
    a, b = split_args(args, 2)
    return truth(evaluate(a, env) == evaluate(b, env))


def not_equal(env: Environment, args: Object) -> Object:
    a, b = split_args(args, 2)
    return truth(evaluate(a, env) != evaluate(b, env))


# -------------------------------
# List operations
# -------------------------------
def car(env: Environment, args: Object) -> Object:
    (expr,) = split_args(args, 1)
    value = evaluate(expr, env)
    if not isinstance(value, Pair):
        raise wrong_type()
    return value.head


def cdr(env: Environment, args: Object) -> Object:
    (expr,) = split_args(args, 1)
    value = evaluate(expr, env)
    if not isinstance(value, Pair):
        raise wrong_type()
    return value.tail


def cons(env: Environment, args: Object) -> Pair:
    head, tail = split_args(args, 2)
    return Pair(evaluate(head, env), evaluate(tail, env))


# -------------------------------
# Registration
# -------------------------------
VARIABLES: dict[str, Object] = {
    "t": T,
    "f": Nil,
    "nil": Nil,
    "pi": Number(np.pi),
}

FUNCTIONS = {
    "car": car,
    "first": car,
    "cdr": cdr,
    "next": cdr,
    "cons": cons,
    "+": add,
    "add": add,
    "-": sub,
    "sub": sub,
    "*": mul,
    "mul": mul,
    "/": div,
    "div": div,
    "%": mod,
    "mod": mod,
    "==": equal,
    "eq": equal,
    "!=": not_equal,
    "ne": not_equal,
}


def register(env: Environment) -> None:
    for name, value in VARIABLES.items():
        env.bind(name, value, is_global=True)
    register_forms(env)
    for name, fn in FUNCTIONS.items():
        env.bind(name, NativeFunc(fn), is_global=True)
