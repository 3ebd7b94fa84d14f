# Core type aliases for the minilisp data model.
# Values are represented by a handful of small classes (Nil, Symbol, Cons,
# LispError, Subr, Expr) plus plain Python ints for numbers. The same objects
# serve as code (forms produced by the reader) and as runtime values.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms
EvaluatorFn = Callable[[LispValue, LispValue], LispValue]
