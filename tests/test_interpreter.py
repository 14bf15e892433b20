import pytest

from lithia import Lisp
from lithia.errors import GlobalExists, LispError, LispErrorKind, UnknownSymbol
from lithia.types import Nil, T, Number, Opaque, iter_list
from lithia.builtin.args import eval_number


def test_eval_returns_last_value(lisp):
    assert lisp.eval("1 2 (+ 1 2)") == Number(3)


def test_eval_empty_program(lisp):
    assert lisp.eval("") is Nil


def test_read_then_evaluate(lisp):
    objects = lisp.read("(def x 2) (* x x)")
    assert len(objects) == 2
    assert lisp.evaluate(objects[0]) is Nil
    assert lisp.evaluate(objects[1]) == Number(4)


def test_eval_objects(lisp):
    assert lisp.eval_objects(lisp.read("1 2")) == Number(2)


def test_add_var_and_func_chain():
    def total(env, args):
        return Number(sum(eval_number(a, env) for a in iter_list(args)))

    lisp = Lisp().add_var("answer", Number(42)).add_func("total", total)
    assert lisp.eval("answer") == Number(42)
    assert lisp.eval("(total answer 1 2)") == Number(45)


def test_add_var_duplicate_global():
    lisp = Lisp().add_var("x", Number(1))
    with pytest.raises(LispError) as excinfo:
        lisp.add_var("x", Number(2))
    assert excinfo.value.kind is LispErrorKind.EVAL
    assert isinstance(excinfo.value.cause, GlobalExists)


def test_add_func_duplicate_builtin():
    with pytest.raises(LispError) as excinfo:
        Lisp().add_func("car", lambda env, args: Nil)
    assert isinstance(excinfo.value.cause, GlobalExists)


def test_add_local_var():
    lisp = Lisp().add_var("x", Number(1), is_global=False)
    lisp.add_var("x", Number(2), is_global=False)
    assert lisp.eval("x") == Number(2)
    assert "x" not in lisp.env.globals


def test_no_defaults():
    lisp = Lisp(defaults=False)
    assert lisp.env.globals == {}
    with pytest.raises(LispError) as excinfo:
        lisp.eval("t")
    assert isinstance(excinfo.value.cause, UnknownSymbol)
    assert lisp.add_env_std().eval("t") is T


def test_environments_cannot_be_added_twice():
    lisp = Lisp()
    with pytest.raises(LispError):
        lisp.add_env_maths()


def test_shared_global_table():
    table = {}
    a = Lisp(globals=table)
    b = Lisp(defaults=False, globals=table)
    a.eval("(def shared 5)")
    assert b.eval("(+ shared 1)") == Number(6)


def test_interpreters_are_independent():
    a, b = Lisp(), Lisp()
    a.eval("(def only-a 1)")
    assert not b.env.is_bound("only-a")


def test_opaque_round_trips_through_lisp():
    handle = object()
    lisp = Lisp().add_var("handle", Opaque(handle))
    result = lisp.eval("handle")
    assert isinstance(result, Opaque)
    assert result.value is handle
    assert lisp.eval("(== handle handle)") is T
