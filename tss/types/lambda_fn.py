"""Closure representation for user-defined functions."""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Mapping, Optional

from tss import SyntaxTree, LispValue


class Closure:
    """A first-class lambda with formal parameters, a body and a captured scope.

    `captured` is a read-only snapshot of the scope that was active when the
    lambda was created. It is copied, not linked, so later bindings in the
    defining scope are not seen through it. `self_name` is the name that was
    being defined at creation time; the closure binds it to itself on every
    call so a function can recurse before its `define` has finished.
    """

    __slots__ = ("formals", "body", "captured", "self_name")

    def __init__(
        self,
        formals: list[str],
        body: SyntaxTree,
        captured: Mapping[str, LispValue] | None = None,
        self_name: Optional[str] = None,
    ):
        self.formals: list[str] = formals
        self.body: SyntaxTree = body
        self.captured: Mapping[str, LispValue] = MappingProxyType(dict(captured or {}))
        self.self_name: Optional[str] = self_name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda")
            if self.self_name:
                buffer.write(f" {self.self_name}")
            buffer.write(" (")
            buffer.write(" ".join(self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bindings(self, args: list[LispValue]) -> dict[str, LispValue]:
        """
        Build the local scope for one call: the captured snapshot, the
        closure itself under `self_name`, then the formals bound positionally.
        Formals beyond the supplied arguments bind to None; extra arguments
        are ignored.
        """
        scope = dict(self.captured)
        if self.self_name is not None:
            scope[self.self_name] = self
        for index, name in enumerate(self.formals):
            scope[name] = args[index] if index < len(args) else None
        return scope
