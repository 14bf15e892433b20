"""
  Lisp Reader, Lexer and Parser

- Lazy lexing: `lex` yields (token_type, token_value) pairs
- `TokenStream` builds Object trees by recursive descent:

    - ()            -> Nil
    - (a b c)       -> Pair chain ending in Nil
    - (a b . c)     -> Pair chain ending in c
    - 'x            -> Quoted(x)
    - 1.5, -2, inf  -> Number (float32)
    - \\c           -> Character
    - "text"        -> proper list of Characters
    - anything else -> Symbol

All failures are raised as LispError(PARSER, ...).
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lithia.errors import (
    EmptyQuote,
    InvalidToken,
    ParserError,
    UnmatchedToken,
    UnparsableAtom,
    parser_error,
)
from lithia.types.object import Object, Number, Character, Quoted, STRING_ESCAPES
from lithia.types.nil import Nil
from lithia.types.symbol import Symbol
from lithia.types.pair import Pair, string_to_list


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>"(?:\\.|[^\\"])*)'  # string running into end of input
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>(?:\\.|[^\s()\\])+|\\)",  # fallback: a backslash keeps the next char
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s*")


def _fail(cause: ParserError):
    return parser_error(cause)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            break

        m = TOKEN_RE.match(source, pos)
        # every non-whitespace char starts some token, so m cannot be None
        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        if kind == "open_string":
            raise _fail(UnmatchedToken('"'))
        yield kind, m.group(kind)


def unescape(body: str) -> str:
    """Expand the backslash escapes of a string literal body."""
    out = []
    chars = iter(body)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        esc = next(chars, None)
        if esc not in STRING_ESCAPES:
            raise ValueError(f"Unknown escape: \\{esc or ''}")
        out.append(STRING_ESCAPES[esc])
    return "".join(out)


def parse_atom(token: str) -> Object:
    """Turn a single atom token into a Number, Character, string list or Symbol."""
    if not token:
        raise _fail(UnparsableAtom(token))
    if "_" not in token:
        try:
            return Number(float(token))
        except ValueError:
            pass
    if len(token) == 2 and token[0] == "\\":
        return Character(token[1])
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        try:
            return string_to_list(unescape(token[1:-1]))
        except ValueError:
            raise _fail(UnparsableAtom(token)) from None
    if not token.startswith(";"):
        return Symbol(token)
    raise _fail(UnparsableAtom(token))


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Object]:
        """Parse one datum; None once the input is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] in (None, "rparen"):
                raise _fail(EmptyQuote())
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            self.advance()
            return self.parse_list()

        if tok_type == "rparen":
            raise _fail(InvalidToken(tok_val))

        # atom or string
        self.advance()
        return parse_atom(tok_val)

    def parse_list(self) -> Object:
        """Parse list elements after '(' up to and including the matching ')'."""
        head: Object = Nil
        last: Optional[Pair] = None
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise _fail(UnmatchedToken("("))
            if tok_type == "rparen":
                self.advance()
                return head
            if tok_type == "atom" and tok_val == ".":
                if last is None:
                    raise _fail(InvalidToken(tok_val))
                self.advance()
                last.tail = self.parse_dotted_tail()
                return head

            cell = Pair(self.parse_expr())
            # `last` was built here and is not yet shared, so its tail may be set
            if last is None:
                head = cell
            else:
                last.tail = cell
            last = cell

    def parse_dotted_tail(self) -> Object:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise _fail(UnmatchedToken("("))
        if tok_type not in ("atom", "string", "lparen") or tok_val == ".":
            raise _fail(InvalidToken(tok_val))
        tail = self.parse_expr()

        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise _fail(UnmatchedToken("("))
        if tok_type != "rparen":
            raise _fail(InvalidToken(tok_val))
        self.advance()
        return tail

    def parse_all(self) -> Iterator[Object]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(text: str) -> list[Object]:
    """Read every top-level datum in `text`."""
    return list(TokenStream(lex(text)).parse_all())
