"""Value model: the tagged LObj representation and its helpers."""

from minilisp.types.nil import Nil, NilType
from minilisp.types.symbol import Symbol
from minilisp.types.cons import Cons
from minilisp.types.error import LispError
from minilisp.types.subr import Subr
from minilisp.types.expr import Expr
from minilisp.types.tag import Tag, tag_of

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "Cons",
    "LispError",
    "Subr",
    "Expr",
    "Tag",
    "tag_of",
]
