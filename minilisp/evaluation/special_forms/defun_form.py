import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import add_to_env, global_env_of
from minilisp.types.factory import make_expr
from minilisp.types.lists import safe_car, safe_cdr

logger = logging.getLogger(__name__)


def defun_form(
    args: SExpression,
    env: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body...)
    The closure captures the current environment but the binding always goes
    to the global frame, even when defun runs inside a function body.
    """
    name = safe_car(args)
    expr = make_expr(safe_cdr(args), env)
    add_to_env(name, expr, global_env_of(env))
    logger.debug("defun %s", name)
    return name
