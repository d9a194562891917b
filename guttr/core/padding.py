"""Padding builder: turns a gutter, a unit and side multipliers into a CSS padding value.

This is the only place a padding string is formatted. Sides are always
rendered top, right, bottom, left, each value immediately followed by its
unit, e.g. ``8px 8px 8px 16px``.
"""

import math
from collections.abc import Mapping
from decimal import Decimal

from guttr.core.types import DEFAULT_GUTTER, DEFAULT_MULTIPLIER, DEFAULT_UNIT, SIDES


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` and without exponent notation for everyday magnitudes."""
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    text = repr(value)
    if value.is_integer() and abs(value) < 1e21:
        if abs(value) >= 2**53:
            # shortest round-trip digits, zero padded
            return format(Decimal(text), 'f')
        # int() also folds -0.0 into 0
        return str(int(value))
    mantissa, sep, exponent = text.partition('e')
    if not sep:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), 'f')
    return f'{mantissa}e{int(exponent):+d}'


def build_padding(
    gutter: float | None = None,
    unit: str | None = None,
    multipliers: Mapping[str, float] | None = None,
) -> str:
    """Build a CSS padding shorthand.

    Each side is ``gutter * multiplier``; a side missing from `multipliers`
    (or set to None) uses 0.5. No rounding or validation is applied.
    """
    if gutter is None:
        gutter = DEFAULT_GUTTER
    if unit is None:
        unit = DEFAULT_UNIT
    if multipliers is None:
        multipliers = {}

    values = []
    for side in SIDES:
        multiplier = multipliers.get(side)
        if multiplier is None:
            multiplier = DEFAULT_MULTIPLIER
        values.append(f'{format_number(gutter * multiplier)}{unit}')
    return ' '.join(values)
