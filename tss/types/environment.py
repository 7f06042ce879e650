"""Runtime environment for tss.

The Environment holds all mutable interpreter state: one global mapping, a
stack of local scopes of which only the top one is ever consulted, the name
of the `define` currently in progress, and the output sink used by `write`.

Scoping is deliberately two-tier. While a closure runs, its local scope is
the only one visible besides the globals; an enclosing closure's locals are
not reachable except through whatever the inner closure captured when it was
created.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from tss import LispValue
from tss.types.errors import TssNameError


OutputSink = Callable[[str], None]


def default_globals() -> dict[str, LispValue]:
    return {"PI": math.pi, "E": math.e}


class Environment:
    """Two-tier mapping from names to values, plus evaluation state."""

    __slots__ = ("globals", "locals", "defining", "output")

    def __init__(self, output: OutputSink | None = None):
        self.globals: dict[str, LispValue] = default_globals()
        self.locals: list[dict[str, LispValue]] = []
        # Name bound by the define currently being evaluated, if any
        self.defining: Optional[str] = None
        self.output: OutputSink = output if output is not None else print

    @property
    def has_local_scope(self) -> bool:
        return bool(self.locals)

    def peek(self) -> dict[str, LispValue]:
        """Return the active scope: the top local scope if any, else the globals."""
        return self.locals[-1] if self.locals else self.globals

    def has(self, name: str) -> bool:
        """True if `name` is bound in the active scope (no fall-through)."""
        return name in self.peek()

    def is_bound(self, name: str) -> bool:
        """True if `name` resolves through the local-then-global lookup."""
        return (bool(self.locals) and name in self.locals[-1]) or name in self.globals

    def lookup(self, name: str) -> LispValue:
        """Look up `name` in the active local scope, falling back to the globals.

        Callers check `is_bound` first; unbound names read as None.
        """
        if self.locals and name in self.locals[-1]:
            return self.locals[-1][name]
        return self.globals.get(name)

    def set(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` in the active scope and return `value`."""
        self.peek()[name] = value
        return value

    @contextmanager
    def scope(self, bindings: dict[str, LispValue]) -> Iterator[dict[str, LispValue]]:
        """Push a fresh local scope for the duration of the block.

        The scope is popped on every exit path, including errors.
        """
        frame = dict(bindings)
        self.locals.append(frame)
        try:
            yield frame
        finally:
            self.locals.pop()

    @contextmanager
    def begin_define(self, name: str) -> Iterator[None]:
        """Mark `name` as the define in progress; nested defines are refused.

        The marker is cleared on every exit path, including errors.
        """
        if self.defining is not None:
            raise TssNameError(
                f"Nested defines are not permitted, already defining {self.defining}"
            )
        self.defining = name
        try:
            yield
        finally:
            self.defining = None
