"""System builtins: console I/O, file inclusion and process exit."""

from __future__ import annotations

import logging
import sys

import numpy as np

from lithia import config
from lithia.types.object import Object, Character
from lithia.types.nil import Nil
from lithia.types.pair import is_string, list_to_string
from lithia.types.native_fn import NativeFunc
from lithia.types.environment import Environment
from lithia.reader.parser import read
from lithia.evaluation.evaluator import evaluate, evaluate_sequence
from lithia.builtin.args import split_args, eval_number, wrong_type

logger = logging.getLogger(__name__)

PROMPT_VAR = "PROMPT"


def print_form(env: Environment, args: Object) -> Object:
    """(print x) writes the printed form of x and a newline."""
    (expr,) = split_args(args, 1)
    print(evaluate(expr, env))
    return Nil


def print_raw(env: Environment, args: Object) -> Object:
    """(print-raw x) writes the internal structure of x."""
    (expr,) = split_args(args, 1)
    print(repr(evaluate(expr, env)))
    return Nil


def _prompt_text(prompt: Object) -> str:
    if isinstance(prompt, Character):
        return f"{prompt.char} "
    if prompt is Nil:
        return config.get_prompt()
    if is_string(prompt):
        return list_to_string(prompt)
    raise wrong_type()


def read_form(env: Environment, args: Object) -> Object:
    """
    (read [prompt])
    Reads one line from stdin and returns the first object on it, or Nil.
    Without an argument the global PROMPT is used when it is bound.
    EOFError from stdin propagates to the host.
    """
    items = split_args(args, 0, 1)
    if items:
        prompt = evaluate(items[0], env)
    elif env.is_bound(PROMPT_VAR):
        prompt = env.lookup(PROMPT_VAR)
    else:
        prompt = Nil

    line = input(_prompt_text(prompt))
    objects = read(line)
    # Only one object is returned, even if the line held more
    return objects[0] if objects else Nil


def include(env: Environment, args: Object) -> Object:
    """
    (include "file")
    Evaluates a file in a nested evaluator sharing this global table and
    returns the value of its last top-level form.
    """
    (expr,) = split_args(args, 1)
    name = evaluate(expr, env)
    if not is_string(name):
        raise wrong_type()

    path = config.resolve_include(list_to_string(name))
    logger.debug("including %s", path)
    source = path.read_text()
    return evaluate_sequence(read(source), env.spawn())


_STATUS_RANGE = np.iinfo(np.int32)


def _exit_status(value: np.float32) -> int:
    """Truncate to a 32 bit status, saturating at the bounds; NaN is 0."""
    if np.isnan(value):
        return 0
    return int(max(_STATUS_RANGE.min, min(_STATUS_RANGE.max, float(value))))


def exit_form(env: Environment, args: Object) -> Object:
    """(exit [code]) terminates the process."""
    items = split_args(args, 0, 1)
    code = _exit_status(eval_number(items[0], env)) if items else 0
    logger.debug("exit requested with status %d", code)
    sys.exit(code)


FUNCTIONS = {
    "include": include,
    "read": read_form,
    "exit": exit_form,
    "print": print_form,
    "print-raw": print_raw,
}


def register(env: Environment) -> None:
    for name, fn in FUNCTIONS.items():
        env.bind(name, NativeFunc(fn), is_global=True)
