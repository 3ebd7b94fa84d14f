import pytest

from minilisp.builtin.env_builtin import make_global_env
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import read
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import print_form


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate source lines in order against one env; return printed results."""
    def _run(*lines):
        results = []
        for line in lines:
            expr, _ = read(line)
            results.append(print_form(evaluate(expr, env)))
        return results
    return _run
