"""
Tests for src/calculator/vectorized.py

Small hand-built Series where every expected value is easy to verify by eye.
"""

import numpy as np
import pandas as pd
import pytest

from src.calculator.vectorized import (
    SERIES_OPERATIONS,
    add_series,
    subtract_series,
    multiply_series,
    divide_series,
)


def test_add_series_known_values():
    """Test element-wise addition."""
    left = pd.Series([2, -1, 0])
    right = pd.Series([3, 1, 0])

    result = add_series(left, right)

    assert result.tolist() == [5, 0, 0]
    assert result.dtype == np.int64


def test_subtract_series_known_values():
    """Test element-wise subtraction."""
    result = subtract_series(pd.Series([5, 0, 10]), pd.Series([3, 5, 10]))
    assert result.tolist() == [2, -5, 0]


def test_multiply_series_known_values():
    """Test element-wise multiplication."""
    result = multiply_series(pd.Series([3, -2, 0]), pd.Series([4, 3, 5]))
    assert result.tolist() == [12, -6, 0]


def test_divide_series_known_values():
    """Test element-wise division, including truncation and zero divisors."""
    left = pd.Series([10, 7, 5, -7, 7, -7])
    right = pd.Series([2, 3, 0, 2, -2, -2])

    result = divide_series(left, right)

    # 10/2, 7/3 truncated, 5/0 policy, then signs truncated toward zero
    assert result.tolist() == [5, 2, 0, -3, -3, 3]


def test_divide_series_all_zero_divisors():
    """Test that a column of zero divisors yields all zeros."""
    result = divide_series(pd.Series([1, -1, 0]), pd.Series([0, 0, 0]))
    assert result.tolist() == [0, 0, 0]


def test_result_keeps_left_index():
    """Test that results are labelled with the left operand's index."""
    left = pd.Series([1, 2], index=["x", "y"])
    right = pd.Series([10, 20], index=[5, 6])

    result = add_series(left, right)

    assert list(result.index) == ["x", "y"]
    assert result.tolist() == [11, 22]


def test_mixed_integer_dtypes_accepted():
    """Test that narrower integer dtypes are widened to int64."""
    result = multiply_series(pd.Series([3], dtype=np.int8), pd.Series([4], dtype=np.uint16))
    assert result.tolist() == [12]
    assert result.dtype == np.int64


def test_float_series_rejected():
    """Test that float dtype raises TypeError."""
    with pytest.raises(TypeError, match="integer dtype"):
        add_series(pd.Series([1.0, 2.0]), pd.Series([1, 2]))


def test_length_mismatch_rejected():
    """Test that Series of different lengths raise ValueError."""
    with pytest.raises(ValueError, match="lengths differ"):
        divide_series(pd.Series([1, 2, 3]), pd.Series([1, 2]))


def test_empty_series():
    """Test that empty inputs give an empty int64 result."""
    empty = pd.Series([], dtype=np.int64)
    result = divide_series(empty, empty)
    assert len(result) == 0
    assert result.dtype == np.int64


def test_series_operations_registry():
    """Test that the registry covers all four operations."""
    assert SERIES_OPERATIONS == {
        "add": add_series,
        "subtract": subtract_series,
        "multiply": multiply_series,
        "divide": divide_series,
    }


def test_uint64_series_rejected():
    """Test that uint64 is rejected instead of wrapping large values negative."""
    big = pd.Series([2**63 + 10], dtype=np.uint64)

    with pytest.raises(TypeError, match="does not fit in int64"):
        divide_series(big, pd.Series([2]))


def test_nullable_series_with_missing_values_rejected():
    """Test that pd.NA in a nullable integer column raises TypeError."""
    left = pd.Series([1, pd.NA, 3], dtype="Int64")

    with pytest.raises(TypeError, match="missing values"):
        add_series(left, pd.Series([1, 2, 3]))


def test_nullable_series_without_missing_values_accepted():
    """Test that a complete nullable Int64 column works like int64."""
    left = pd.Series([7, -7], dtype="Int64")

    result = divide_series(left, pd.Series([2, 2]))

    assert result.tolist() == [3, -3]
    assert result.dtype == np.int64
