"""Argument list helpers shared by every builtin.

Builtins receive the raw argument list. These helpers check its shape in a
fixed order: a dotted spine is DOTTED_PAIR, then too few elements is
NOT_ENOUGH, then too many is TOO_MANY. Type checks on evaluated values give
WRONG_TYPE.
"""

from __future__ import annotations

import numpy as np

from lithia.errors import ArgumentsError, InvalidArguments
from lithia.types.object import Object, Number
from lithia.types.symbol import Symbol
from lithia.types.pair import iter_list
from lithia.types.environment import Environment
from lithia.evaluation.evaluator import evaluate


def split_args(args: Object, required: int, optional: int = 0) -> list[Object]:
    """Return the unevaluated arguments as a list of length required..required+optional."""
    items = list(iter_list(args))
    if len(items) < required:
        raise InvalidArguments(ArgumentsError.NOT_ENOUGH)
    if len(items) > required + optional:
        raise InvalidArguments(ArgumentsError.TOO_MANY)
    return items


def split_rest(args: Object, required: int) -> list[Object]:
    """Like split_args, but any number of arguments past `required` is accepted."""
    items = list(iter_list(args))
    if len(items) < required:
        raise InvalidArguments(ArgumentsError.NOT_ENOUGH)
    return items


def wrong_type() -> InvalidArguments:
    return InvalidArguments(ArgumentsError.WRONG_TYPE)


def symbol_name(obj: Object) -> str:
    if not isinstance(obj, Symbol):
        raise wrong_type()
    return obj.name


def eval_number(expr: Object, env: Environment) -> np.float32:
    value = evaluate(expr, env)
    if not isinstance(value, Number):
        raise wrong_type()
    return value.value
