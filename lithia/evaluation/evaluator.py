"""Core evaluator for the lithia interpreter.

Plain recursive evaluation, no trampoline: every sub-evaluation is an
ordinary Python call, so deeply recursive lisp programs are bounded by the
interpreter's recursion limit.

There is no special-form table. Forms such as `if`, `while` and `quote` are
NativeFunc builtins that receive their arguments unevaluated.
"""

from __future__ import annotations

from typing import Iterable

from lithia.errors import NonFunction, eval_error
from lithia.types.object import Object, Character, Quoted
from lithia.types.nil import Nil
from lithia.types.symbol import Symbol
from lithia.types.pair import Pair
from lithia.types.lambda_fn import LispFunc
from lithia.types.native_fn import NativeFunc
from lithia.types.environment import Environment
from lithia.evaluation.apply import apply_native, apply_lisp_func


def evaluate(expr: Object, env: Environment) -> Object:
    """Evaluate a single object in `env`."""
    match expr:
        case Symbol(name=name):
            return env.lookup(name)

        case Quoted(inner=inner):
            return inner

        case Pair(head=callee_expr, tail=args):
            callee = evaluate(callee_expr, env)
            match callee:
                case NativeFunc():
                    return apply_native(callee, args, env)
                case LispFunc():
                    return apply_lisp_func(callee, args, env, evaluate)
                case Character():
                    # Literal forms such as (\a . \b) evaluate to themselves
                    return expr
            raise eval_error(NonFunction(callee))

    # --- Atoms and functions return as-is ---
    return expr


def evaluate_sequence(exprs: Iterable[Object], env: Environment) -> Object:
    """Evaluate `exprs` in order and return the last value (Nil if empty)."""
    result: Object = Nil
    for expr in exprs:
        result = evaluate(expr, env)
    return result
