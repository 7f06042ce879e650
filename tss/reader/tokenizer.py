"""
  Line-buffered tokenizer

- Pulls one line at a time from a LineSource and scans it into a FIFO cache
- Blank lines are skipped but still counted, so every token carries the
  0-based line it was scanned on
- Whitespace and commas separate tokens; `;` starts a comment that runs to
  the end of the line
- Strings are delimited by double quotes on a single line, with no escapes
"""

from __future__ import annotations

import logging
import re
from collections import deque
from typing import Optional

from tss.reader.line_source import LineSource
from tss.types.errors import TssScanError
from tss.types.token import Token, TokenType

logger = logging.getLogger(__name__)

COMMENT = ";"
SEPARATOR = ","
QUOTE = '"'
PARENS = {"(": TokenType.LEFT_PAREN, ")": TokenType.RIGHT_PAREN}

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
SYMBOL_RE = re.compile(r"[!@$%&/.\-\\λ=?+|*^]+")
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Tokenizer:
    def __init__(self, source: LineSource):
        self.source = source
        self.line = 0  # number of physical lines consumed so far
        self.cache: deque[Token] = deque()

    def eof(self) -> bool:
        return self.source.eof() and not self.cache

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at end of input."""
        while not self.cache:
            if self.eof():
                return None
            self._cache_tokens()
        return self.cache[0]

    def next(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.cache.popleft()
        return token

    def __iter__(self):
        while (token := self.next()) is not None:
            yield token

    # --- Scanning ---
    def _read_row(self) -> tuple[int, str] | None:
        """Return the next non-blank line and its number, or None when exhausted."""
        while (row := self.source.read_line()) is not None:
            line_no = self.line
            self.line += 1
            if row.strip():
                return line_no, row
        return None

    def _cache_tokens(self) -> None:
        found = self._read_row()
        if found is None:
            return
        line_no, row = found
        logger.debug("scanning line %d: %r", line_no, row)

        buffer: list[str] = []

        def flush() -> None:
            if buffer:
                self.cache.append(create_token("".join(buffer), line_no))
                buffer.clear()

        pos, n = 0, len(row)
        while pos < n:
            ch = row[pos]
            pos += 1
            if ch.isspace() or ch == SEPARATOR:
                flush()
            elif ch == COMMENT:
                break
            elif ch in PARENS:
                flush()
                self.cache.append(Token(PARENS[ch], line_no))
            elif ch == QUOTE:
                flush()
                end = row.find(QUOTE, pos)
                if end < 0:
                    raise TssScanError("Unexpected end-of-line reading string", line_no)
                buffer.append(row[pos - 1:end + 1])
                pos = end + 1
                flush()
            else:
                buffer.append(ch)
        flush()


def create_token(value: str, line: int) -> Token:
    """Classify a flushed buffer. The first matching rule wins."""
    if value in PARENS:
        return Token(PARENS[value], line)
    if value.startswith(QUOTE):
        return Token(TokenType.STRING, line, value[1:-1])
    if value.startswith("#"):
        if value not in ("#t", "#f"):
            raise TssScanError(
                f"{value} is not a valid boolean constant, expected #t or #f", line
            )
        return Token(TokenType.BOOLEAN, line, value == "#t")
    if IDENTIFIER_RE.fullmatch(value):
        return Token(TokenType.IDENTIFIER, line, value)
    if SYMBOL_RE.fullmatch(value):
        return Token(TokenType.SYMBOL, line, value)
    if NUMBER_RE.fullmatch(value):
        return Token(TokenType.NUMBER, line, float(value))
    raise TssScanError(f"Unable to parse token {value}", line)


def tokenize(text: str) -> list[Token]:
    """Scan a whole string into a list of tokens."""
    return list(Tokenizer(LineSource.from_string(text)))
