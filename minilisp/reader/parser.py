"""
  Lisp Reader

- One expression per call, returned with the unconsumed text:

    read(text) -> (obj, rest)

- Builds Cons cells directly:

    - integers -> int
    - nil -> Nil
    - other atoms -> interned Symbol
    - (a b c) -> proper list
    - 'x -> (quote x)

- There is no dotted-pair syntax; "." reads as a symbol.
- On failure obj is a LispError and rest is the empty string.
"""

from __future__ import annotations

import logging
import re

from minilisp import SExpression
from minilisp.types.nil import Nil
from minilisp.types.error import LispError
from minilisp.types.lists import nreverse
from minilisp.types.factory import make_cons, make_error, make_num, make_sym

logger = logging.getLogger(__name__)

LPAR = "("
RPAR = ")"
QUOTE = "'"
SPACES = "\t\r\n "

# An atom is a maximal run of non-delimiters.
ATOM_RE = re.compile(r"[^()'\t\r\n ]+")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

ReadResult = tuple[SExpression, str]


def skip_spaces(text: str) -> str:
    return text.lstrip(SPACES)


def parse_error(msg: str) -> ReadResult:
    logger.debug("read error: %s", msg)
    return make_error(msg), ""


def make_num_or_sym(token: str) -> SExpression:
    if INTEGER_RE.fullmatch(token):
        try:
            return make_num(int(token))
        except ValueError:
            # exceeds the host's int string conversion limit
            pass
    return make_sym(token)


def read_atom(text: str) -> ReadResult:
    m = ATOM_RE.match(text)
    return make_num_or_sym(m.group()), text[m.end():]


def read(text: str) -> ReadResult:
    """Read one expression from the front of `text`."""
    text = skip_spaces(text)
    if not text:
        return parse_error("empty input")
    head = text[0]
    if head == RPAR:
        return parse_error(f"invalid syntax: {text}")
    if head == LPAR:
        return read_list(text[1:])
    if head == QUOTE:
        obj, rest = read(text[1:])
        return make_cons(make_sym("quote"), make_cons(obj, Nil)), rest
    return read_atom(text)


def read_list(text: str) -> ReadResult:
    """Read list elements up to the matching ')'; `text` follows the '('."""
    ret = Nil
    while True:
        text = skip_spaces(text)
        if not text:
            return parse_error("unfinished parenthesis")
        if text[0] == RPAR:
            break
        obj, rest = read(text)
        if isinstance(obj, LispError):
            return obj, rest
        ret = make_cons(obj, ret)
        text = rest
    return nreverse(ret), text[1:]
