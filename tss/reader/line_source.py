from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


class LineSource:
    """Supplies source text one line at a time."""

    def __init__(self, lines: Iterable[str]):
        self._lines: list[str] = list(lines)
        self._index = 0

    @classmethod
    def from_string(cls, text: str) -> LineSource:
        return cls(_LINE_BREAK_RE.split(text))

    @classmethod
    def from_file(cls, path: str | Path) -> LineSource:
        # Read the whole file up front and split on any line break convention
        return cls.from_string(Path(path).read_text(encoding="utf-8"))

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once every line has been read."""
        if self.eof():
            return None
        line = self._lines[self._index]
        self._index += 1
        return line

    def eof(self) -> bool:
        return self._index >= len(self._lines)
