"""List utilities over Cons cells."""

from __future__ import annotations

from typing import Iterable, Iterator

from minilisp import LispValue
from minilisp.types.nil import Nil
from minilisp.types.cons import Cons


def safe_car(obj: LispValue) -> LispValue:
    """car of a Cons; Nil for anything else."""
    if isinstance(obj, Cons):
        return obj.car
    return Nil


def safe_cdr(obj: LispValue) -> LispValue:
    """cdr of a Cons; Nil for anything else."""
    if isinstance(obj, Cons):
        return obj.cdr
    return Nil


def nreverse(lst: LispValue) -> LispValue:
    """Reverse a proper list in place by rewriting cdr pointers."""
    ret = Nil
    while isinstance(lst, Cons):
        tmp = lst.cdr
        lst.cdr = ret
        ret = lst
        lst = tmp
    return ret


def pairlis(keys: LispValue, values: LispValue) -> LispValue:
    """Zip two lists into an a-list ((k1 . v1) (k2 . v2) ...).

    Stops at the shorter list; the remaining tail of the other is ignored.
    """
    ret = Nil
    while isinstance(keys, Cons) and isinstance(values, Cons):
        ret = Cons(Cons(keys.car, values.car), ret)
        keys = keys.cdr
        values = values.cdr
    return nreverse(ret)


def iter_list(lst: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a list, stopping at the first non-Cons tail."""
    while isinstance(lst, Cons):
        yield lst.car
        lst = lst.cdr


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from Python items, terminated by `tail`."""
    ret = Nil
    for item in items:
        ret = Cons(item, ret)
    head = nreverse(ret)
    if tail is not Nil:
        if head is Nil:
            return tail
        last = head
        while isinstance(last.cdr, Cons):
            last = last.cdr
        last.cdr = tail
    return head
