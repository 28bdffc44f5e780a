import json
import math
from decimal import Decimal
from typing import Any, Iterable


def format_number(number: float) -> str:
    """
    Render a number the way it reads in SDL and in JavaScript output.

    `5.0` prints as `5`, `10.1` as is, and exponents drop the padding Python
    adds: `1e-07` prints as `1e-7`, `1e+21` stays `1e+21`. Plain notation is
    used for decimal point positions from -6 to 21, as `Number.prototype.toString` does.
    """
    if isinstance(number, int):
        return str(number)
    if number == 0:
        return "0"
    if not math.isfinite(number):
        return str(number)

    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    prefix = "-" if sign else ""
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def join_numbers(numbers: Iterable[float]) -> str:
    return ", ".join(format_number(n) for n in numbers)


def join_quoted(values: Iterable[str]) -> str:
    return ", ".join(f"'{v}'" for v in values)


def canonical_json(value: Any) -> str:
    """Stable encoding used to compare input values for equality."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
