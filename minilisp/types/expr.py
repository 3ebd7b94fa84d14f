"""User-defined closure representation."""

from __future__ import annotations

from minilisp import LispValue, SExpression


class Expr:
    """A closure: parameter list, body forms and the captured environment.

    `params` is a proper list of symbols, `body` a proper list of forms that
    are evaluated in sequence, and `env` the environment (list of frames)
    captured by reference when the closure was created.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: LispValue):
        self.params = params
        self.body = body
        self.env = env

    def __str__(self) -> str:
        return "<expr>"

    def __repr__(self) -> str:
        from minilisp.printer import print_form
        return f"Expr(params={print_form(self.params)}, body={print_form(self.body)})"
