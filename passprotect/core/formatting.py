import math
from typing import Any

MAX_FRACTION_DIGITS = 7


def format_number(
    number: Any,
    fraction_digits: int = 0,
    thousand_separator: str = ",",
    fraction_separator: str = ".",
) -> Any:
    """
    Format a number with thousands grouping, e.g. 1234567 -> "1,234,567".

    Values that are not finite numbers are returned unchanged.
    """
    if number is None or isinstance(number, bool):
        return number
    if not isinstance(number, (int, float)):
        return number
    if isinstance(number, float) and not math.isfinite(number):
        return number

    if not isinstance(fraction_digits, (int, float)) or not math.isfinite(fraction_digits):
        fraction_digits = 0
    digits = min(max(int(fraction_digits), 0), MAX_FRACTION_DIGITS)
    rendered = f"{number:,.{digits}f}"

    whole, _, fraction = rendered.partition(".")
    whole = whole.replace(",", thousand_separator)
    if digits > 0:
        return f"{whole}{fraction_separator}{fraction}"
    return whole
