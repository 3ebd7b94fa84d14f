from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.nil import Nil
from minilisp.types.lists import safe_car, safe_cdr


def if_form(
    args: SExpression,
    env: LispValue,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Only nil is false; a missing arm evaluates as nil.
    cond = evaluate_fn(safe_car(args), env)
    if cond is Nil:
        return evaluate_fn(safe_car(safe_cdr(safe_cdr(args))), env)
    return evaluate_fn(safe_car(safe_cdr(args)), env)
