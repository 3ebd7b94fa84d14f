"""Core evaluator for minilisp.

Walks a value under an environment, dispatching on its type: atoms evaluate
to themselves, symbols are looked up, and lists are either special forms
(looked up by head symbol) or function applications. There is no tail-call
elimination; recursion uses the Python stack.
"""

from __future__ import annotations

from minilisp import LispValue, SExpression
from minilisp.types.nil import Nil, NilType
from minilisp.types.symbol import Symbol
from minilisp.types.cons import Cons
from minilisp.types.error import LispError
from minilisp.types.environment import find_var
from minilisp.types.factory import make_error
from minilisp.types.lists import nreverse
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.printer import print_form


def evaluate(obj: SExpression, env: LispValue) -> LispValue:
    """Evaluate `obj` in `env`. Errors come back as LispError values."""
    match obj:
        case NilType() | int() | LispError():
            return obj
        case Symbol():
            bind = find_var(obj, env)
            if bind is Nil:
                return make_error(f"{obj.name} has no value")
            return bind.cdr
        case Cons(car=op, cdr=args):
            if isinstance(op, Symbol):
                form = SPECIAL_FORMS.get(op)
                if form is not None:
                    return form(args, env, evaluate)
            return apply(evaluate(op, env), evlis(args, env), env)
    return make_error(f"{print_form(obj)} is not evaluable")


def evlis(lst: SExpression, env: LispValue) -> LispValue:
    """Evaluate each element of `lst` in order.

    Returns the list of results, or the first LispError encountered.
    """
    ret = Nil
    while isinstance(lst, Cons):
        elm = evaluate(lst.car, env)
        if isinstance(elm, LispError):
            return elm
        ret = Cons(elm, ret)
        lst = lst.cdr
    return nreverse(ret)
