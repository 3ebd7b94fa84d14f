import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.factory import make_expr

logger = logging.getLogger(__name__)


def lambda_form(
    args: SExpression,
    env: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params...) body...) closes over the current environment."""
    expr = make_expr(args, env)
    logger.debug("Closure created: params=%s", expr.params)
    return expr
