from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.lists import safe_car


def quote_form(
    args: SExpression,
    env: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    return safe_car(args)
