"""Built-in functions for the minilisp global environment.

Every primitive takes the caller's environment and the evaluated argument
list (a proper list). Arity is not checked: a missing argument reads as nil
and extra arguments are ignored. Type errors are returned as LispError
values, never raised.
"""
from __future__ import annotations

from minilisp import LispValue
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol
from minilisp.types.cons import Cons
from minilisp.types.environment import add_to_env, make_env
from minilisp.types.factory import make_cons, make_error, make_subr, make_sym
from minilisp.types.lists import iter_list, safe_car, safe_cdr


def _t() -> Symbol:
    return make_sym("t")


def _is_num(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _two_args(args: LispValue) -> tuple[LispValue, LispValue]:
    return safe_car(args), safe_car(safe_cdr(args))


# -------------------------------
# List processing and predicates
# -------------------------------
def car(env: LispValue, args: LispValue) -> LispValue:
    return safe_car(safe_car(args))


def cdr(env: LispValue, args: LispValue) -> LispValue:
    return safe_cdr(safe_car(args))


def cons(env: LispValue, args: LispValue) -> LispValue:
    return make_cons(*_two_args(args))


def eq(env: LispValue, args: LispValue) -> LispValue:
    """t if both are numbers with the same value, or the very same object."""
    x, y = _two_args(args)
    if _is_num(x) and _is_num(y):
        return _t() if x == y else Nil
    return _t() if x is y else Nil


def atom(env: LispValue, args: LispValue) -> LispValue:
    return Nil if isinstance(safe_car(args), Cons) else _t()


def numberp(env: LispValue, args: LispValue) -> LispValue:
    return _t() if _is_num(safe_car(args)) else Nil


def symbolp(env: LispValue, args: LispValue) -> LispValue:
    return _t() if isinstance(safe_car(args), Symbol) else Nil


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: LispValue, args: LispValue) -> LispValue:
    """Sum of all arguments; 0 with none."""
    result = 0
    for x in iter_list(args):
        if not _is_num(x):
            return make_error("wrong type")
        result += x
    return result


def mul(env: LispValue, args: LispValue) -> LispValue:
    """Product of all arguments; 1 with none."""
    result = 1
    for x in iter_list(args):
        if not _is_num(x):
            return make_error("wrong type")
        result *= x
    return result


def sub(env: LispValue, args: LispValue) -> LispValue:
    x, y = _two_args(args)
    if not (_is_num(x) and _is_num(y)):
        return make_error("wrong type")
    return x - y


def _trunc_div(x: int, y: int) -> int:
    # Raises ZeroDivisionError for y == 0; left to the host.
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def div(env: LispValue, args: LispValue) -> LispValue:
    """Integer division rounding toward zero."""
    x, y = _two_args(args)
    if not (_is_num(x) and _is_num(y)):
        return make_error("wrong type")
    return _trunc_div(x, y)


def mod(env: LispValue, args: LispValue) -> LispValue:
    """Remainder with the sign of the dividend: (mod -7 2) => -1."""
    x, y = _two_args(args)
    if not (_is_num(x) and _is_num(y)):
        return make_error("wrong type")
    return x - y * _trunc_div(x, y)


BUILTINS = {
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq": eq,
    "atom": atom,
    "numberp": numberp,
    "symbolp": symbolp,
    "+": add,
    "*": mul,
    "-": sub,
    "/": div,
    "mod": mod,
}


def register(env: Cons) -> None:
    """Register all builtin functions and constants into the first frame of `env`."""
    for name, fn in BUILTINS.items():
        add_to_env(make_sym(name), make_subr(fn, name), env)
    add_to_env(_t(), _t(), env)


def make_global_env() -> Cons:
    """Return a new global environment holding the initial bindings."""
    env = make_env()
    register(env)
    return env
