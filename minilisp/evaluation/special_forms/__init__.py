"""Registry of special forms for the minilisp evaluator.

Maps interned Symbols to handler functions that implement non-standard
evaluation rules. Each handler receives the unevaluated argument list, the
current environment and the evaluator function. The evaluator consults this
table before ordinary function application.
"""

from minilisp.types.factory import make_sym
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.defun_form import defun_form
from minilisp.evaluation.special_forms.setq_form import setq_form

SPECIAL_FORMS = {
    make_sym("quote"): quote_form,
    make_sym("if"): if_form,
    make_sym("lambda"): lambda_form,
    make_sym("defun"): defun_form,
    make_sym("setq"): setq_form,
}
