# lithia: an embeddable lisp interpreter.
#
# Every value is an instance of one of the Object variants in lithia.types.
# Strings are lists of Characters; there is no dedicated string type.
#
# Naming guidance:
# - read(text) turns source into Objects (lithia.reader).
# - evaluate(obj, env) / evaluate_sequence(objs, env) run them (lithia.evaluation).
# - Lisp is the host-facing wrapper that registers builtins and evaluates code.

from lithia.errors import (
    LithiaError,
    LispError,
    LispErrorKind,
    ArgumentsError,
    NativeFuncError,
    InvalidArguments,
)
from lithia.types import (
    Object,
    Nil,
    T,
    Pair,
    Symbol,
    Number,
    Character,
    Quoted,
    LispFunc,
    NativeFunc,
    Opaque,
    Environment,
)
from lithia.reader import read
from lithia.evaluation import evaluate, evaluate_sequence
from lithia.interpreter import Lisp

__all__ = [
    "LithiaError",
    "LispError",
    "LispErrorKind",
    "ArgumentsError",
    "NativeFuncError",
    "InvalidArguments",
    "Object",
    "Nil",
    "T",
    "Pair",
    "Symbol",
    "Number",
    "Character",
    "Quoted",
    "LispFunc",
    "NativeFunc",
    "Opaque",
    "Environment",
    "read",
    "evaluate",
    "evaluate_sequence",
    "Lisp",
]
