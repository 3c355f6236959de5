# progressview/helpers/_format.py

# SECTION: MODULE DOCSTRING
"""Number formatting for stats and gas reports.

Percentages never raise on a zero denominator. They degrade to the texts
`NaN` (0/0) and `Infinity` (n/0), which is what ends up on screen.
"""

# SECTION: IMPORTS
import math

NAN_TEXT = "NaN"
INFINITY_TEXT = "Infinity"


# FUNC: format_number
def format_number(value: int | float) -> str:
    """Groups thousands with commas: 1234567 -> '1,234,567'."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


# FUNC: format_fixed
def format_fixed(value: float, digits: int = 1) -> str:
    """Fixed-point text for a number, with NaN/Infinity spelled out."""
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INFINITY_TEXT if value > 0 else f"-{INFINITY_TEXT}"
    return f"{value:.{digits}f}"


# FUNC: percentage
def percentage(part: int | float, whole: int | float) -> float:
    """Returns part/whole*100 without raising on a zero denominator."""
    if whole == 0:
        if part == 0:
            return math.nan
        return math.copysign(math.inf, part)
    return part / whole * 100


# FUNC: format_percentage
def format_percentage(part: int | float, whole: int | float, digits: int = 1) -> str:
    return format_fixed(percentage(part, whole), digits)


__all__ = ["format_number", "format_fixed", "percentage", "format_percentage", "NAN_TEXT", "INFINITY_TEXT"]
