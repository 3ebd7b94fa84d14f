from __future__ import annotations


class Symbol:
    """An interned name. Two symbols are equal only if they are the same object.

    Do not instantiate directly; use `intern` (or `make_sym`, which also maps
    the name "nil" to Nil).
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


# Grows monotonically; symbols are never removed.
_symbol_table: dict[str, Symbol] = {}


def intern(name: str) -> Symbol:
    """Return the unique Symbol for `name`, creating it on first request."""
    sym = _symbol_table.get(name)
    if sym is None:
        sym = _symbol_table[name] = Symbol(name)
    return sym
