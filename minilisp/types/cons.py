from __future__ import annotations

from minilisp import LispValue


class Cons:
    """A mutable pair. Proper lists are chains of Cons cells ending in Nil."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __str__(self) -> str:
        from minilisp.printer import print_form
        return print_form(self)

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"
