"""Number parsing and formatting shared by the scene formats."""

import math

import numpy as np


def format_number(value: float) -> str:
    """Format a number as a plain decimal with the shortest round-trip digits.

    Integral values are written without a fractional part and no exponent is
    ever used, so ``0.0`` is shown as ``"0"``, ``10.0`` as ``"10"`` and
    ``1e-05`` as ``"0.00001"``.

    Examples:
        >>> format_number(1.5)
        '1.5'
        >>> format_number(10.0)
        '10'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim="-")


def parse_number(text: str) -> float:
    """Parse a finite decimal field.

    Raises:
        ValueError: Empty field, not a number, or NaN / infinity
    """
    stripped = text.strip()
    if not stripped:
        raise ValueError("empty numeric field")
    value = float(stripped)
    if not math.isfinite(value):
        raise ValueError(f"non-finite numeric value {stripped!r}")
    return value
