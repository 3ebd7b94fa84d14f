import pytest
from hypothesis import given, strategies as st

from minilisp.types import Nil, NilType, Symbol, Cons, LispError, Subr, Expr, Tag, tag_of
from minilisp.types.factory import make_num, make_sym, make_cons, make_subr, make_expr, make_error
from minilisp.types.lists import safe_car, safe_cdr, nreverse, pairlis, iter_list, make_list


def test_nil_is_a_falsy_singleton():
    assert NilType() is Nil
    assert not Nil
    assert repr(Nil) == "nil"


def test_make_sym_interns():
    assert make_sym("foo") is make_sym("foo")
    assert make_sym("foo") is not make_sym("bar")
    assert isinstance(make_sym("foo"), Symbol)


def test_make_sym_nil_is_nil_singleton():
    assert make_sym("nil") is Nil


@given(st.text(min_size=1).filter(lambda s: s != "nil"))
def test_make_sym_returns_same_object_for_any_name(name):
    assert make_sym(name) is make_sym(name)
    assert make_sym(name).name == name


def test_make_expr_splits_params_and_body():
    params = make_list([make_sym("x")])
    body = make_list([make_sym("x"), make_num(1)])
    env = make_cons(Nil, Nil)
    fn = make_expr(make_cons(params, body), env)
    assert isinstance(fn, Expr)
    assert fn.params is params
    assert fn.body is body
    assert fn.env is env


@pytest.mark.parametrize(
    "value, tag",
    [
        (Nil, Tag.NIL),
        (make_num(3), Tag.NUM),
        (make_sym("a"), Tag.SYM),
        (make_error("boom"), Tag.ERROR),
        (make_cons(1, 2), Tag.CONS),
        (make_subr(lambda env, args: Nil), Tag.SUBR),
        (make_expr(Nil, Nil), Tag.EXPR),
    ],
)
def test_tag_of(value, tag):
    assert tag_of(value) is tag


@pytest.mark.parametrize("value", [True, False, "text", 1.5, None, [1, 2]])
def test_tag_of_rejects_foreign_objects(value):
    with pytest.raises(TypeError):
        tag_of(value)


@pytest.mark.parametrize("value", [Nil, 0, 42, make_sym("a"), make_error("x")])
def test_safe_car_and_cdr_on_atoms(value):
    assert safe_car(value) is Nil
    assert safe_cdr(value) is Nil


def test_safe_car_and_cdr_on_cons():
    cell = make_cons(1, 2)
    assert safe_car(cell) == 1
    assert safe_cdr(cell) == 2


def test_nreverse_empty():
    assert nreverse(Nil) is Nil


def test_nreverse_reuses_cells():
    lst = make_list([1, 2, 3])
    cells = [lst, lst.cdr, lst.cdr.cdr]
    rev = nreverse(lst)
    assert list(iter_list(rev)) == [3, 2, 1]
    assert rev is cells[2]
    assert cells[0].cdr is Nil


@given(st.lists(st.integers()))
def test_nreverse_twice_preserves_elements(items):
    lst = make_list(items)
    assert list(iter_list(nreverse(nreverse(lst)))) == items


def test_pairlis_keeps_order():
    a, b = make_sym("a"), make_sym("b")
    alist = pairlis(make_list([a, b]), make_list([1, 2]))
    pairs = [(p.car, p.cdr) for p in iter_list(alist)]
    assert pairs == [(a, 1), (b, 2)]


@pytest.mark.parametrize("keys, values, n", [([1, 2, 3], [4], 1), ([1], [4, 5, 6], 1), ([], [1], 0)])
def test_pairlis_ignores_extra_tail(keys, values, n):
    alist = pairlis(make_list(keys), make_list(values))
    assert len(list(iter_list(alist))) == n


def test_make_list_with_tail():
    lst = make_list([1, 2], tail=3)
    assert lst.car == 1
    assert lst.cdr.car == 2
    assert lst.cdr.cdr == 3
    assert make_list([], tail=3) == 3


def test_subr_calls_wrapped_function():
    subr = make_subr(lambda env, args: safe_car(args), "first")
    assert isinstance(subr, Subr)
    assert subr(Nil, make_list([7])) == 7
    assert subr.name == "first"


def test_error_value_carries_message():
    err = make_error("boom")
    assert isinstance(err, LispError)
    assert err.message == "boom"
    assert str(err) == "<error: boom>"


def test_cons_fields_are_mutable():
    cell = Cons(1, Nil)
    cell.car = 2
    cell.cdr = make_list([3])
    assert list(iter_list(cell)) == [2, 3]
