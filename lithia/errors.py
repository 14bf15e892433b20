"""Error taxonomy for lithia.

Every failure the interpreter reports is a LispError carrying one of three
kinds (parser, eval, native function) and the specific sub-error as its
cause. Builtins raise NativeFuncError (usually InvalidArguments); the
evaluator wraps whatever escapes a builtin into LispError(NATIVE_FUNC, ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class LithiaError(Exception):
    """ Base class for all lithia errors"""
    pass


# -------------------------------
# Parser errors
# -------------------------------
class ParserError(LithiaError):
    """ Raised by the reader when the source text is malformed"""


class UnmatchedToken(ParserError):
    """ Raised on end of input inside an open list or string"""

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Unmatched token: '{self.token}'"


class InvalidToken(ParserError):
    """ Raised on a token that cannot appear where it was found"""

    def __init__(self, text: str):
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"Invalid token: '{self.text}'"


class UnparsableAtom(ParserError):
    """ Raised when an atom is neither number, character, string nor symbol"""

    def __init__(self, text: str):
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"Unparsable atom: {self.text}"


class EmptyQuote(ParserError):
    """ Raised when a quote is not followed by a datum"""

    def __str__(self) -> str:
        return "Empty quote"


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(LithiaError):
    """ Raised by the evaluator and the environment"""


class UnknownSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown symbol: {self.name}"


class GlobalExists(EvalError):
    """ Raised when a global name is defined a second time"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Global already exists: {self.name}"


class NonFunction(EvalError):
    """ Raised when the head of a form does not evaluate to a function"""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Attempt to call non-function: {self.value}"


# -------------------------------
# Native function errors
# -------------------------------
class ArgumentsError(Enum):
    TOO_MANY = "Too many arguments"
    NOT_ENOUGH = "Not enough arguments"
    WRONG_TYPE = "Arguments of wrong type"
    DOTTED_PAIR = "Dotted-pair arguments not accepted"

    def __str__(self) -> str:
        return self.value


class NativeFuncError(LithiaError):
    """ Raised by a builtin; wraps either an ArgumentsError or a nested LispError"""

    def __init__(self, cause: ArgumentsError | LispError):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return str(self.cause)


class InvalidArguments(NativeFuncError):
    """ Raised when a builtin receives a malformed argument list"""

    def __init__(self, error: ArgumentsError):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Error running function: Invalid arguments: {self.error}"


# -------------------------------
# Top level error
# -------------------------------
class LispErrorKind(Enum):
    PARSER = "parser"
    EVAL = "eval"
    NATIVE_FUNC = "native_func"


class LispError(LithiaError):
    """The single error type propagated out of read and evaluate."""

    def __init__(self, kind: LispErrorKind, cause: LithiaError):
        super().__init__(kind, cause)
        self.kind = kind
        self.cause = cause

    @property
    def root_cause(self) -> LithiaError:
        """Innermost sub-error, unwrapping builtins that re-raised a nested LispError."""
        cause = self.cause
        while True:
            if isinstance(cause, LispError):
                cause = cause.cause
            elif type(cause) is NativeFuncError and isinstance(cause.cause, LispError):
                cause = cause.cause
            else:
                return cause

    def __str__(self) -> str:
        if self.kind is LispErrorKind.PARSER:
            return f"Error parsing code: {self.cause}"
        if self.kind is LispErrorKind.EVAL:
            return f"Error evaluating object: {self.cause}"
        return str(self.cause)

    def __repr__(self) -> str:
        return f"LispError({self.kind.name}, {self.cause!r})"


def parser_error(cause: ParserError) -> LispError:
    return LispError(LispErrorKind.PARSER, cause)


def eval_error(cause: EvalError) -> LispError:
    return LispError(LispErrorKind.EVAL, cause)
