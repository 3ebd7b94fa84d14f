from __future__ import annotations

from typing import Callable

from minilisp import LispValue


class Subr:
    """A primitive function implemented in Python.

    The wrapped callable receives the caller's environment and the evaluated
    argument list (a proper list of values) and returns a value.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[[LispValue, LispValue], LispValue], name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "subr")

    def __call__(self, env: LispValue, args: LispValue) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return "<subr>"

    def __repr__(self) -> str:
        return f"Subr({self.name})"
