from __future__ import annotations

import math
from decimal import Decimal

from tss import LispValue


def format_number(value: float) -> str:
    """Shortest round-trip digits; fixed notation for magnitudes in [1e-6, 1e21)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def to_display(value: LispValue) -> str:
    """Render a runtime value the way `write` and the driver print it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(to_display(v) for v in value)
    # Closures and primitives
    return str(value)
