"""
Four-function integer arithmetic.

**Conceptual**: These are the only arithmetic primitives in the project. Every
other component (element-wise versions, self-checks, the CLI) is defined in
terms of the results these functions return, so they are kept pure, stateless,
and total over the integers.

**Functionally**:
- Inputs must be integers (any ``numbers.Integral`` except ``bool``).
  Floats, strings, and booleans raise ``TypeError``.
- Results are always plain Python ``int``, even for numpy integer inputs.
- Python integers are unbounded, so there is no overflow to handle.

**Division policy**: ``divide`` truncates toward zero (``divide(-7, 2) == -3``),
not toward negative infinity like Python's ``//``. A zero divisor returns 0
instead of raising. This is a fixed rule of the calculator, not an error path.
"""

import numbers
from typing import Callable, Dict


IntOperation = Callable[[int, int], int]


def _require_int(value, name: str) -> int:
    """Return value as a plain int, or raise TypeError if it is not an integer."""
    # bool is an Integral subclass but True + True == 2 is never what a caller means
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )
    return int(value)


def add(a: int, b: int) -> int:
    """Return a + b."""
    return _require_int(a, "a") + _require_int(b, "b")


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return _require_int(a, "a") - _require_int(b, "b")


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return _require_int(a, "a") * _require_int(b, "b")


def divide(a: int, b: int) -> int:
    """
    Integer division of a by b, truncated toward zero.

    **Mathematical**: q = sign(a) * sign(b) * floor(|a| / |b|), so the remainder
    always carries the sign of the dividend. Examples:
        divide(7, 3)   ->  2
        divide(-7, 3)  -> -2   (Python's -7 // 3 would give -3)
        divide(7, -3)  -> -2

    **Edge cases**:
    - b == 0 returns 0 for every a. No exception is raised.

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        Truncated quotient, or 0 when b is zero.

    Raises:
        TypeError: If a or b is not an integer.
    """
    a = _require_int(a, "a")
    b = _require_int(b, "b")

    if b == 0:
        return 0

    quotient = abs(a) // abs(b)
    # Opposite signs -> negative quotient
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


OPERATIONS: Dict[str, IntOperation] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}

SYMBOLS: Dict[str, str] = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "x": "multiply",
    "/": "divide",
}


def get_operation(name_or_symbol: str) -> IntOperation:
    """
    Look up an arithmetic function by name ("add") or symbol ("+").

    Lookup is case-insensitive for names.

    Raises:
        ValueError: If the key matches neither a name nor a symbol.
    """
    key = name_or_symbol.strip()
    name = SYMBOLS.get(key, key.lower())

    if name not in OPERATIONS:
        valid = sorted(OPERATIONS) + sorted(SYMBOLS)
        raise ValueError(
            f"Unknown operation: {name_or_symbol!r}. "
            f"Valid choices: {', '.join(valid)}"
        )
    return OPERATIONS[name]
