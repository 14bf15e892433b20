"""Application engine for lithia.

Two kinds of callee exist:
- NativeFunc: called with the environment and the raw argument list. Any
  error escaping the builtin is reported as LispError(NATIVE_FUNC, ...).
- LispFunc: arguments are evaluated left to right in the caller's
  environment and bound positionally in a fresh evaluator whose only frame
  sits directly on the global table. Surplus arguments are evaluated and
  ignored; missing ones are NOT_ENOUGH.
"""

from __future__ import annotations

from typing import Callable

from lithia.errors import (
    ArgumentsError,
    InvalidArguments,
    LispError,
    LispErrorKind,
    NativeFuncError,
)
from lithia.types.object import Object
from lithia.types.nil import Nil
from lithia.types.pair import Pair
from lithia.types.lambda_fn import LispFunc
from lithia.types.native_fn import NativeFunc
from lithia.types.environment import Environment

EvaluatorFn = Callable[[Object, Environment], Object]


def native_error(cause: NativeFuncError) -> LispError:
    return LispError(LispErrorKind.NATIVE_FUNC, cause)


def apply_native(fn: NativeFunc, args: Object, env: Environment) -> Object:
    try:
        return fn(env, args)
    except NativeFuncError as e:
        raise native_error(e) from e
    except LispError as e:
        raise native_error(NativeFuncError(e)) from e


def apply_lisp_func(
    fn: LispFunc,
    args: Object,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """Call an interpreted function.

    Parameters:
    - fn: the LispFunc being applied.
    - args: the unevaluated argument list following the call head.
    - env: the caller's environment, used only to evaluate the arguments.
    - evaluate_fn: the evaluator, passed in to avoid a circular import.
    """
    values: list[Object] = []
    cur = args
    while isinstance(cur, Pair):
        values.append(evaluate_fn(cur.head, env))
        cur = cur.tail
    if cur is not Nil:
        raise native_error(InvalidArguments(ArgumentsError.DOTTED_PAIR))

    if len(values) < len(fn.params):
        raise native_error(InvalidArguments(ArgumentsError.NOT_ENOUGH))

    # No closure: the callee sees its parameters and the globals only
    scope = env.spawn()
    for name, value in zip(fn.params, values):
        scope.bind(name, value)

    result: Object = Nil
    for form in fn.body:
        result = evaluate_fn(form, scope)
    return result
