"""
  S-expression parser

Reads one form at a time from a Tokenizer using its peek/next protocol:

    - atoms -> the Token itself
    - ( ... ) -> Python list of nested forms

Parenthesis tokens never appear in the returned tree.
"""

from __future__ import annotations

from typing import Iterator

from tss import SyntaxTree
from tss.reader.line_source import LineSource
from tss.reader.tokenizer import Tokenizer
from tss.types.errors import TssSyntaxError
from tss.types.token import TokenType


def read(tokenizer: Tokenizer) -> SyntaxTree:
    """Read exactly one form from the tokenizer."""
    if tokenizer.eof():
        raise TssSyntaxError("Unexpected end of stream")

    token = tokenizer.next()
    if token is None:
        raise TssSyntaxError("Unexpected end of stream")

    if token.type is TokenType.LEFT_PAREN:
        items: list[SyntaxTree] = []
        while True:
            upcoming = tokenizer.peek()
            if upcoming is None:
                raise TssSyntaxError(
                    f"Unexpected end of stream parsing statement starting on line {token.line}"
                )
            if upcoming.type is TokenType.RIGHT_PAREN:
                tokenizer.next()  # consume the closing paren
                return items
            items.append(read(tokenizer))

    if token.type is TokenType.RIGHT_PAREN:
        raise TssSyntaxError(f"Unexpected right parenthesis on line {token.line}")

    return token


def read_all(tokenizer: Tokenizer) -> Iterator[SyntaxTree]:
    """Yield top-level forms until the tokenizer is exhausted."""
    while tokenizer.peek() is not None:
        yield read(tokenizer)


def parse(text: str) -> list[SyntaxTree]:
    return list(read_all(Tokenizer(LineSource.from_string(text))))
