"""Constructors for every kind of value.

Everything that builds values (reader, evaluator, primitives) goes through
these helpers so that symbols are always interned and `nil` is always the
Nil singleton.
"""

from __future__ import annotations

from typing import Callable

from minilisp import LispValue, SExpression
from minilisp.types.nil import Nil
from minilisp.types.symbol import intern
from minilisp.types.cons import Cons
from minilisp.types.error import LispError
from minilisp.types.subr import Subr
from minilisp.types.expr import Expr
from minilisp.types.lists import safe_car, safe_cdr


def make_num(i: int) -> int:
    return int(i)


def make_sym(name: str) -> LispValue:
    """Return Nil for "nil", otherwise the interned Symbol for `name`."""
    if name == "nil":
        return Nil
    return intern(name)


def make_cons(a: LispValue, d: LispValue) -> Cons:
    return Cons(a, d)


def make_subr(fn: Callable[[LispValue, LispValue], LispValue], name: str | None = None) -> Subr:
    return Subr(fn, name)


def make_expr(params_and_body: SExpression, env: LispValue) -> Expr:
    """Build a closure from `(params . body)` capturing `env`."""
    return Expr(safe_car(params_and_body), safe_cdr(params_and_body), env)


def make_error(msg: str) -> LispError:
    return LispError(msg)
