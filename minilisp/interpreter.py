from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.reader.parser import read
from minilisp.evaluation.evaluator import evaluate
from minilisp.builtin.env_builtin import make_global_env
from minilisp.printer import print_form

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Holds one global environment and evaluates source lines against it.
    Definitions made with defun/setq persist across calls.
    """

    def __init__(self):
        self.env = make_global_env()
        logger.debug("global environment initialised")

    def eval(self, line: str) -> LispValue:
        """Read the first expression of `line` and evaluate it; the rest of the line is ignored."""
        expr, _ = read(line)
        return evaluate(expr, self.env)

    def eval_print(self, line: str) -> str:
        return print_form(self.eval(line))
