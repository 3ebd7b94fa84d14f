from __future__ import annotations

from enum import Enum

from minilisp import LispValue
from minilisp.types.nil import NilType
from minilisp.types.symbol import Symbol
from minilisp.types.cons import Cons
from minilisp.types.error import LispError
from minilisp.types.subr import Subr
from minilisp.types.expr import Expr


class Tag(Enum):
    NIL = "nil"
    NUM = "num"
    SYM = "sym"
    ERROR = "error"
    CONS = "cons"
    SUBR = "subr"
    EXPR = "expr"


def tag_of(obj: LispValue) -> Tag:
    """Return the tag of a value. Raises TypeError for non-Lisp objects."""
    match obj:
        case NilType():
            return Tag.NIL
        case int() if not isinstance(obj, bool):
            return Tag.NUM
        case Symbol():
            return Tag.SYM
        case LispError():
            return Tag.ERROR
        case Cons():
            return Tag.CONS
        case Subr():
            return Tag.SUBR
        case Expr():
            return Tag.EXPR
    raise TypeError(f"Not a Lisp value: {obj!r}")
