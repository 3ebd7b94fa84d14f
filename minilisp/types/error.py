from __future__ import annotations


class LispError:
    """First-class error value.

    Errors are returned through the normal value channel; the evaluator
    propagates them unchanged instead of raising.
    """

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __str__(self) -> str:
        return f"<error: {self.message}>"

    def __repr__(self) -> str:
        return f"LispError({self.message!r})"
