import pytest
from hypothesis import given, strategies as st

from minilisp.printer import print_form
from minilisp.types import Nil
from minilisp.types.factory import make_num, make_sym, make_cons, make_subr, make_expr, make_error
from minilisp.types.lists import make_list


@pytest.mark.parametrize(
    "value, expected",
    [
        (Nil, "nil"),
        (make_num(42), "42"),
        (make_num(-7), "-7"),
        (make_sym("foo"), "foo"),
        (make_error("foo has no value"), "<error: foo has no value>"),
        (make_subr(lambda env, args: Nil), "<subr>"),
        (make_expr(Nil, Nil), "<expr>"),
        (make_list([1, 2, 3]), "(1 2 3)"),
        (make_cons(1, 2), "(1 . 2)"),
        (make_list([1, 2], tail=3), "(1 2 . 3)"),
        (make_list([make_list([make_sym("a")]), Nil]), "((a) nil)"),
        (make_cons(make_sym("quote"), make_cons(make_sym("x"), Nil)), "(quote x)"),
    ],
)
def test_print_form(value, expected):
    assert print_form(value) == expected


def test_str_matches_print_form():
    lst = make_list([make_sym("a"), make_cons(1, 2)])
    assert str(lst) == "(a (1 . 2))"
    assert str(make_expr(Nil, Nil)) == "<expr>"


@given(st.integers())
def test_numbers_print_in_decimal(n):
    assert print_form(make_num(n)) == str(n)
