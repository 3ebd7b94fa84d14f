"""Runtime environment for minilisp.

An environment is a proper list of frames, innermost first; each frame is an
a-list of (symbol . value) pairs. The last frame is the global frame and is
shared by every environment derived from it. Lookups scan frames front to
back and, within a frame, return the first matching pair.
"""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.nil import Nil
from minilisp.types.cons import Cons


def make_env(frame: LispValue = Nil) -> Cons:
    """Return a fresh one-frame environment."""
    return Cons(frame, Nil)


def extend_env(frame: LispValue, env: LispValue) -> Cons:
    """Prepend `frame` to `env` without touching the frames of `env`."""
    return Cons(frame, env)


def find_var(sym: LispValue, env: LispValue) -> LispValue:
    """Return the binding pair for `sym`, or Nil when it is unbound."""
    while isinstance(env, Cons):
        alist = env.car
        while isinstance(alist, Cons):
            pair = alist.car
            if isinstance(pair, Cons) and pair.car is sym:
                return pair
            alist = alist.cdr
        env = env.cdr
    return Nil


def add_to_env(sym: LispValue, val: LispValue, env: Cons) -> None:
    """Push a new (sym . val) binding onto the first frame of `env`."""
    env.car = Cons(Cons(sym, val), env.car)


def update_var(sym: LispValue, val: LispValue, env: LispValue) -> bool:
    """Rewrite an existing binding of `sym`. Returns False if there is none."""
    bind = find_var(sym, env)
    if bind is Nil:
        return False
    bind.cdr = val
    return True


def global_env_of(env: Cons) -> Cons:
    """Return the last cell of the frame chain; its car is the global frame."""
    while isinstance(env.cdr, Cons):
        env = env.cdr
    return env
