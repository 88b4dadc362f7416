"""
Number casting for block arguments.

Mirrors loose dynamic-language casting: values are read as double-precision
numbers, anything that does not read as a finite number becomes 0, and the
result is written the way a JavaScript number prints. Nothing here raises.
"""

import math
import numbers
from decimal import Decimal
from typing import Any, Union

Number = Union[int, float]

# Ints at or past this magnitude print in exponent form, as doubles do
EXPONENT_THRESHOLD = 10 ** 21


def to_number(value: Any) -> Number:
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        if abs(value) < EXPONENT_THRESHOLD:
            return value
        return _to_float(value)
    if isinstance(value, str):
        return _parse_number(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return _to_float(value)
    return 0


def _to_float(value: Any) -> float:
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


def _parse_number(text: str) -> Number:
    text = text.strip()
    if not text or "_" in text:
        return 0
    try:
        return to_number(int(text))
    except ValueError:
        pass
    # float() accepts "nan", "inf", "infinity"; _to_float maps them to 0
    return _to_float(text)


def number_to_string(number: Number) -> str:
    """
    Integral values render without a decimal point. Magnitudes from 1e-7 up
    to 1e21 print in fixed notation, everything else as "1.5e+300".
    """
    if isinstance(number, int):
        if abs(number) < EXPONENT_THRESHOLD:
            return str(number)
        number = _to_float(number)
    if number == 0:
        return "0"
    if number.is_integer() and abs(number) < EXPONENT_THRESHOLD:
        return str(int(number))

    # repr gives the shortest digits that round-trip
    digits = Decimal(repr(number)).normalize()
    if 1e-7 <= abs(number) < EXPONENT_THRESHOLD:
        return format(digits, 'f')
    return format(digits, 'e')


def to_command_arg(value: Any) -> str:
    """Canonical string form of a block argument."""
    return number_to_string(to_number(value))
