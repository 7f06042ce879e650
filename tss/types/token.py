from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from tss.printer import format_number


class TokenType(Enum):
    LEFT_PAREN = "LeftParenthesis"
    RIGHT_PAREN = "RightParenthesis"
    IDENTIFIER = "Identifier"
    SYMBOL = "Symbol"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"


VALUE_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER, TokenType.BOOLEAN})
NAME_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.SYMBOL})


@dataclass(frozen=True)
class Token:
    """A scanned token and the 0-based source line it came from.

    `value` is the name for identifiers and symbols, the literal for strings,
    numbers and booleans, and None for parentheses.
    """

    type: TokenType
    line: int
    value: Union[str, float, bool, None] = None

    @property
    def name(self) -> str:
        if self.type not in NAME_TYPES:
            raise AttributeError(f"{self.type.value} token has no name")
        return self.value

    def __str__(self) -> str:
        if self.type is TokenType.LEFT_PAREN:
            return "("
        if self.type is TokenType.RIGHT_PAREN:
            return ")"
        if self.type is TokenType.STRING:
            return f'"{self.value}"'
        if self.type is TokenType.BOOLEAN:
            return "#t" if self.value else "#f"
        if self.type is TokenType.NUMBER:
            return format_number(self.value)
        return str(self.value)


def is_value_token(tree) -> bool:
    return isinstance(tree, Token) and tree.type in VALUE_TYPES


def is_name_token(tree) -> bool:
    return isinstance(tree, Token) and tree.type in NAME_TYPES


def is_identifier(tree) -> bool:
    return isinstance(tree, Token) and tree.type is TokenType.IDENTIFIER


def first_line(tree) -> int | None:
    """Line of the first token in `tree`, or None for an empty list."""
    while isinstance(tree, list):
        if not tree:
            return None
        tree = tree[0]
    return tree.line


def to_source(tree) -> str:
    """Render a syntax tree back to source text, for error messages."""
    if isinstance(tree, list):
        return "(" + " ".join(to_source(t) for t in tree) + ")"
    return str(tree)
