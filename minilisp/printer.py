"""Printed form of values: the only output format of the interpreter."""

from __future__ import annotations

from io import StringIO

from minilisp import LispValue
from minilisp.types.nil import Nil
from minilisp.types.cons import Cons
from minilisp.types.tag import Tag, tag_of


def print_form(obj: LispValue) -> str:
    match tag_of(obj):
        case Tag.NIL:
            return "nil"
        case Tag.NUM:
            return str(obj)
        case Tag.SYM:
            return obj.name
        case Tag.ERROR:
            return f"<error: {obj.message}>"
        case Tag.CONS:
            return _list_to_string(obj)
        case Tag.SUBR:
            return "<subr>"
        case Tag.EXPR:
            return "<expr>"


def _list_to_string(obj: Cons) -> str:
    with StringIO() as buffer:
        buffer.write("(")
        first = True
        while isinstance(obj, Cons):
            if not first:
                buffer.write(" ")
            buffer.write(print_form(obj.car))
            first = False
            obj = obj.cdr
        if obj is not Nil:
            # improper tail
            buffer.write(" . ")
            buffer.write(print_form(obj))
        buffer.write(")")
        return buffer.getvalue()
