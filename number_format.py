"""Decimal rendering of the language's single numeric type.

Numbers print the way a double is shown to a user: integral values without a
fractional part, other values as the shortest decimal that round-trips, never
in exponent notation.

Examples:
    format_number(20.0)    -> "20"
    format_number(0.5)     -> "0.5"
    format_number(1e-07)   -> "0.0000001"
    format_number(1 / 0.0) -> "inf"
"""

import math
from decimal import Decimal


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() is the shortest round-tripping spelling; Decimal expands any
    # exponent into positional digits.
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
