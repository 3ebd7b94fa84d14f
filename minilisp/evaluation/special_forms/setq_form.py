import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import add_to_env, global_env_of, update_var
from minilisp.types.lists import safe_car, safe_cdr

logger = logging.getLogger(__name__)


def setq_form(
    args: SExpression,
    env: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (setq name value)
    Rewrites the nearest existing binding of name; an unbound name is
    defined in the global frame. Returns the new value.
    """
    val = evaluate_fn(safe_car(safe_cdr(args)), env)
    name = safe_car(args)
    if not update_var(name, val, env):
        logger.debug("setq defines global %s", name)
        add_to_env(name, val, global_env_of(env))
    return val
