"""Built-in primitive operations.

Primitives are a closed set of operations. Each one is either eager (it receives
evaluated argument values) or lazy (it receives the raw argument trees and
decides what to evaluate). STDLIB maps every reserved name, aliases included,
to its primitive; none of these names can be rebound by user code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "="
    WRITE = "write"
    BLOCK = "block"
    LAMBDA = "lambda"
    DEFINE = "define"
    SET = "set"
    IF = "if"


@dataclass(frozen=True)
class EagerPrimitive:
    op: Op

    def __str__(self) -> str:
        return f"<primitive {self.op.value}>"


@dataclass(frozen=True)
class LazyPrimitive:
    op: Op

    def __str__(self) -> str:
        return f"<primitive {self.op.value}>"


Primitive = Union[EagerPrimitive, LazyPrimitive]


_EAGER_OPS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.EQ, Op.WRITE, Op.BLOCK)
_LAZY_OPS = (Op.LAMBDA, Op.DEFINE, Op.SET, Op.IF)

STDLIB: dict[str, Primitive] = {
    **{op.value: EagerPrimitive(op) for op in _EAGER_OPS},
    **{op.value: LazyPrimitive(op) for op in _LAZY_OPS},
}
STDLIB["\\"] = STDLIB["lambda"]
STDLIB["λ"] = STDLIB["lambda"]
STDLIB["$"] = STDLIB["define"]


def is_reserved(name: str) -> bool:
    return name in STDLIB
