import pytest
from hypothesis import given, strategies as st

from lithia.errors import (
    LispError,
    LispErrorKind,
    EmptyQuote,
    InvalidToken,
    UnmatchedToken,
    UnparsableAtom,
)
from lithia.types import Nil, Pair, Symbol, Number, Character, Quoted, string_to_list
from lithia.reader.parser import lex, read, TokenStream


def _list(*items, tail=Nil):
    return Pair.from_iterable(items, tail)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(a . b)", [("lparen", "("), ("atom", "a"), ("atom", "."), ("atom", "b"), ("rparen", ")")]),
        ('"hello world"', [("string", '"hello world"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a ; trailing", [("atom", "a")]),
        ("\\( x", [("atom", "\\("), ("atom", "x")]),
        ("(\\a)", [("lparen", "("), ("atom", "\\a"), ("rparen", ")")]),
        ("1.5e3", [("atom", "1.5e3")]),
        ("a'b", [("atom", "a'b")]),
        ("   ", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("()", Nil),
        ("123", Number(123)),
        ("-45", Number(-45)),
        ("3.25", Number(3.25)),
        ("+7", Number(7)),
        ("foo", Symbol("foo")),
        ("-", Symbol("-")),
        ("1_000", Symbol("1_000")),
        ("\\a", Character("a")),
        ("\\(", Character("(")),
        ("\\abc", Symbol("\\abc")),
        ("'a", Quoted(Symbol("a"))),
        ("''a", Quoted(Quoted(Symbol("a")))),
        ("(a b c)", _list(Symbol("a"), Symbol("b"), Symbol("c"))),
        ("(a . b)", Pair(Symbol("a"), Symbol("b"))),
        ("(a b . c)", _list(Symbol("a"), Symbol("b"), tail=Symbol("c"))),
        ("(1 . (2 3))", _list(Number(1), Number(2), Number(3))),
        ("(a . ())", _list(Symbol("a"))),
        ('(a . "b")', Pair(Symbol("a"), string_to_list("b"))),
        ('"hello"', string_to_list("hello")),
        ('""', Nil),
        ('"a\\tb\\n\\\\\\"\\0\\r"', string_to_list('a\tb\n\\"\0\r')),
        ("'(1 2)", Quoted(_list(Number(1), Number(2)))),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected     # Parser yields one expression


def test_nested_lists():
    source = "((a b) (c d))"
    expected = _list(_list(Symbol("a"), Symbol("b")), _list(Symbol("c"), Symbol("d")))
    assert read(source) == [expected]


def test_read_returns_every_top_level_form():
    assert read("1 foo ; ignored\n (bar)") == [Number(1), Symbol("foo"), _list(Symbol("bar"))]


def test_read_empty_input():
    assert read("") == []
    assert read("  ; only a comment") == []


def test_parse_expr_returns_none_at_end():
    stream = TokenStream(lex("x"))
    assert stream.parse_expr() == Symbol("x")
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source,error,attr,value",
    [
        ("(a b", UnmatchedToken, "token", "("),
        ("((a)", UnmatchedToken, "token", "("),
        ("(a .", UnmatchedToken, "token", "("),
        ("(a . b", UnmatchedToken, "token", "("),
        ('"abc', UnmatchedToken, "token", '"'),
        (")", InvalidToken, "text", ")"),
        ("a)", InvalidToken, "text", ")"),
        ("(. a)", InvalidToken, "text", "."),
        ("(a . b c)", InvalidToken, "text", "c"),
        ("(a . )", InvalidToken, "text", ")"),
        ("(a . . b)", InvalidToken, "text", "."),
        ("(a . 'b)", InvalidToken, "text", "'"),
        ('"\\q"', UnparsableAtom, "text", '"\\q"'),
    ]
)
def test_parser_errors(source, error, attr, value):
    with pytest.raises(LispError) as excinfo:
        read(source)
    assert excinfo.value.kind is LispErrorKind.PARSER
    assert isinstance(excinfo.value.cause, error)
    assert getattr(excinfo.value.cause, attr) == value


@pytest.mark.parametrize("source", ["'", "(')", "(a ')", "x '"])
def test_empty_quote(source):
    with pytest.raises(LispError) as excinfo:
        read(source)
    assert isinstance(excinfo.value.cause, EmptyQuote)


def test_parser_error_message():
    with pytest.raises(LispError) as excinfo:
        read("(a b")
    assert str(excinfo.value) == "Error parsing code: Unmatched token: '('"


# -------------------------------
# Round trip: print then read
# -------------------------------
def _is_number(text):
    try:
        float(text)
    except ValueError:
        return False
    return "_" not in text


symbols = st.from_regex(r"[a-z+*/<>=!?-][a-z0-9+*/<>=!?-]{0,6}", fullmatch=True).filter(
    lambda s: not _is_number(s)
).map(Symbol)
numbers = st.floats(width=32, allow_nan=False, allow_infinity=False).map(Number)
characters = st.characters(blacklist_categories=("Cs",)).map(Character)
atoms = st.one_of(symbols, numbers, characters, st.just(Nil))
dotted_tails = st.one_of(symbols, numbers, characters)


def _extend(children):
    return st.one_of(
        st.lists(children, max_size=4).map(Pair.from_iterable),
        st.tuples(st.lists(children, min_size=1, max_size=3), dotted_tails).map(
            lambda t: Pair.from_iterable(t[0], t[1])
        ),
        children.map(Quoted),
        st.text(max_size=5).map(string_to_list),
    )


trees = st.recursive(atoms, _extend, max_leaves=12)


@given(trees)
def test_print_read_round_trip(tree):
    assert read(str(tree)) == [tree]


def test_string_round_trip():
    [parsed] = read('"ab"')
    assert parsed == _list(Character("a"), Character("b"))
    assert str(parsed) == '"ab"'


@pytest.mark.parametrize("source", ['(a . " ")', '(1 . "x y")', '(a . "\\n")', '(a . "\\t")'])
def test_dotted_string_tail_round_trip(source):
    [parsed] = read(source)
    assert read(str(parsed)) == [parsed]


@pytest.mark.parametrize("char", [" ", "\n", "\t", "\x00", ";", '"'])
def test_character_round_trip(char):
    assert read(str(Character(char))) == [Character(char)]
    tree = _list(Symbol("a"), Character(char), Number(1))
    assert read(str(tree)) == [tree]
