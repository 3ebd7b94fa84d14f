"""Application engine for minilisp.

Applies a primitive (Subr) or a user closure (Expr) to an already-evaluated
argument list. A LispError in either the function or the arguments is
returned unchanged.
"""

from __future__ import annotations

from minilisp import LispValue, SExpression
from minilisp.types.nil import Nil
from minilisp.types.cons import Cons
from minilisp.types.error import LispError
from minilisp.types.subr import Subr
from minilisp.types.expr import Expr
from minilisp.types.environment import extend_env
from minilisp.types.factory import make_error
from minilisp.types.lists import pairlis
from minilisp.printer import print_form


def progn(body: SExpression, env: LispValue) -> LispValue:
    """Evaluate the forms of `body` in sequence and return the last result."""
    from minilisp.evaluation.evaluator import evaluate

    ret = Nil
    while isinstance(body, Cons):
        ret = evaluate(body.car, env)
        body = body.cdr
    return ret


def apply_expr(fn: Expr, args: LispValue) -> LispValue:
    """Run a closure body with its parameters bound in a fresh frame."""
    return progn(fn.body, extend_env(pairlis(fn.params, args), fn.env))


def apply(fn: LispValue, args: LispValue, env: LispValue) -> LispValue:
    """Apply `fn` to `args`.

    - LispError in `fn` or `args` is propagated as-is.
    - Subr is called with the caller env and the argument list.
    - Expr is applied via apply_expr.
    - Anything else is an error value.
    """
    if isinstance(fn, LispError):
        return fn
    if isinstance(args, LispError):
        return args
    if isinstance(fn, Subr):
        return fn(env, args)
    if isinstance(fn, Expr):
        return apply_expr(fn, args)
    return make_error(f"{print_form(fn)} is not function")
