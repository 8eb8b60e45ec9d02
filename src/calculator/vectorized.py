"""
Element-wise integer arithmetic over pandas Series.

**Conceptual**: Same four operations as ``src.calculator.operations``, applied
pairwise to two equally long columns of integers. The self-check uses these to
evaluate hundreds of random pairs at once and compares them against the scalar
functions, so the two implementations keep each other honest.

**Functionally**:
- Both inputs must have an integer dtype that fits int64 (int8..int64,
  uint8..uint32, or the nullable Int*/UInt* equivalents without missing
  values). uint64 is rejected because values of 2**63 and above would wrap
  to negative numbers; missing values are rejected because the calculator
  has no "no result" value.
- Both inputs must have the same length. Pairing is positional, not by index
  label; the result carries the left operand's index.
- Results are int64 Series.
- A zero divisor yields 0 in that position, matching the scalar ``divide``.
- int64 overflow wraps silently (numpy behavior). Overflow is out of scope.
"""

import numpy as np
import pandas as pd


def _as_int_arrays(left: pd.Series, right: pd.Series):
    """Validate a pair of Series and return them as int64 numpy arrays."""
    for name, series in (("left", left), ("right", right)):
        if not pd.api.types.is_integer_dtype(series):
            raise TypeError(
                f"{name} must have an integer dtype, got: {series.dtype}"
            )
        if str(series.dtype).lower() == "uint64":
            raise TypeError(
                f"{name} has dtype {series.dtype}, which does not fit in int64"
            )
        if series.isna().any():
            raise TypeError(
                f"{name} contains missing values; only complete integer columns are supported"
            )

    if len(left) != len(right):
        raise ValueError(
            f"Series lengths differ: left has {len(left)}, right has {len(right)}"
        )

    return left.to_numpy(dtype=np.int64), right.to_numpy(dtype=np.int64)


def add_series(left: pd.Series, right: pd.Series) -> pd.Series:
    """Element-wise left + right."""
    a, b = _as_int_arrays(left, right)
    return pd.Series(a + b, index=left.index, dtype=np.int64)


def subtract_series(left: pd.Series, right: pd.Series) -> pd.Series:
    """Element-wise left - right."""
    a, b = _as_int_arrays(left, right)
    return pd.Series(a - b, index=left.index, dtype=np.int64)


def multiply_series(left: pd.Series, right: pd.Series) -> pd.Series:
    """Element-wise left * right."""
    a, b = _as_int_arrays(left, right)
    return pd.Series(a * b, index=left.index, dtype=np.int64)


def divide_series(left: pd.Series, right: pd.Series) -> pd.Series:
    """
    Element-wise integer division, truncated toward zero, 0 where right == 0.

    **Mathematical**: numpy's ``//`` floors, so we divide magnitudes and then
    reapply the sign:
        q_i = sign_i * (|a_i| // |b_i|)
    where sign_i is -1 when a_i and b_i have opposite signs.

    Args:
        left: Dividends (integer dtype).
        right: Divisors (integer dtype), same length as left.

    Returns:
        int64 Series of truncated quotients, indexed like left.
    """
    a, b = _as_int_arrays(left, right)

    zero_divisor = b == 0
    # Swap zeros for ones so numpy never sees a zero divisor; masked out below
    safe_b = np.where(zero_divisor, 1, b)

    quotient = np.abs(a) // np.abs(safe_b)
    negative = (a < 0) != (safe_b < 0)
    quotient = np.where(negative, -quotient, quotient)

    result = np.where(zero_divisor, 0, quotient)
    return pd.Series(result, index=left.index, dtype=np.int64)


SERIES_OPERATIONS = {
    "add": add_series,
    "subtract": subtract_series,
    "multiply": multiply_series,
    "divide": divide_series,
}
