from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator

_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    """Python recursion limit for running programs (TSS_RECURSION_LIMIT)."""
    return max(int_from_env("TSS_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT), 100)


@contextmanager
def recursion_limit(limit: int | None = None) -> Iterator[int]:
    """Run the body with the interpreter recursion limit, restoring the old one after."""
    previous = sys.getrecursionlimit()
    limit = get_recursion_limit() if limit is None else limit
    sys.setrecursionlimit(limit)
    try:
        yield limit
    finally:
        sys.setrecursionlimit(previous)


def get_log_level() -> int:
    """Logging level name from TSS_LOG_LEVEL, e.g. DEBUG or INFO."""
    raw = os.environ.get("TSS_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    return logging.getLevelNamesMapping().get(raw, logging.WARNING)
