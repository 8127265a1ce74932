#!/usr/bin/env python3
"""Tests for lossless allocation."""

import pytest

from expenses.core.allocation import allocate, allocate_evenly
from expenses.core.arithmetic import DivisionByZeroError


class TestAllocateEvenly:
    """Test even splits with front-loaded remainders."""

    @pytest.mark.allocation
    @pytest.mark.parametrize(
        "amount,parts,expected",
        [
            (1000, 3, [334, 333, 333]),
            (1000, 4, [250, 250, 250, 250]),
            (1001, 3, [334, 334, 333]),
            (2, 5, [1, 1, 0, 0, 0]),
            (0, 3, [0, 0, 0]),
            (1999, 1, [1999]),
        ],
    )
    def test_allocate_evenly(self, amount, parts, expected):
        """Test concrete splits."""
        assert allocate_evenly(amount, parts) == expected

    @pytest.mark.allocation
    def test_negative_amount(self):
        """Test negative amounts still sum exactly and differ by at most one."""
        result = allocate_evenly(-1000, 3)
        assert sum(result) == -1000
        assert max(result) - min(result) <= 1

    @pytest.mark.allocation
    @pytest.mark.parametrize("parts", [0, -1])
    def test_non_positive_parts_raise(self, parts):
        """Test zero or negative part counts are rejected."""
        with pytest.raises(ValueError, match="Parts must be a positive integer"):
            allocate_evenly(1000, parts)

    @pytest.mark.allocation
    def test_sum_and_spread_hold_for_many_inputs(self):
        """Test parts always sum to the amount and differ by at most one."""
        for amount in (0, 1, 7, 99, 100, 1001, 123457, -5, -1001):
            for parts in range(1, 12):
                result = allocate_evenly(amount, parts)
                assert len(result) == parts
                assert sum(result) == amount
                assert max(result) - min(result) <= 1
                # Larger parts come first
                assert result == sorted(result, reverse=True)


class TestAllocate:
    """Test weighted allocation."""

    @pytest.mark.allocation
    @pytest.mark.parametrize(
        "amount,weights,expected",
        [
            (1000, [1, 1, 2], [250, 250, 500]),
            (1000, [1, 2], [333, 667]),
            (1000, [1, 1, 1], [333, 333, 334]),
            (100, [0.7, 0.3], [70, 30]),
            (1000, ["0.5", "0.25", "0.25"], [500, 250, 250]),
            (1000, [0, 1], [0, 1000]),
        ],
    )
    def test_allocate(self, amount, weights, expected):
        """Test proportional shares with the remainder on the last bucket."""
        assert allocate(amount, weights) == expected

    @pytest.mark.allocation
    def test_empty_and_single_weight(self):
        """Test degenerate weight lists."""
        assert allocate(1000, []) == []
        assert allocate(1000, [5]) == [1000]
        # A single weight never divides, even when it is zero
        assert allocate(1000, [0]) == [1000]

    @pytest.mark.allocation
    def test_zero_weights_raise(self):
        """Test weights summing to zero cannot be allocated."""
        with pytest.raises(DivisionByZeroError, match="Weights must sum to a non-zero number"):
            allocate(1000, [0, 0])
        with pytest.raises(ZeroDivisionError):
            allocate(1000, [1, -1])

    @pytest.mark.allocation
    def test_negative_weight_total(self):
        """Test a negative but non-zero weight total still allocates exactly."""
        result = allocate(1000, [-1, -1])
        assert result == [500, 500]

    @pytest.mark.allocation
    def test_negative_amount(self):
        """Test negative amounts allocate symmetrically."""
        assert allocate(-1000, [1, 2]) == [-333, -667]
        assert sum(allocate(-1001, [3, 3, 4])) == -1001

    @pytest.mark.allocation
    def test_sum_holds_for_many_inputs(self):
        """Test allocations always sum exactly to the amount."""
        weight_sets = [[1, 1, 1], [1, 2, 3, 4], [0.1, 0.2, 0.7], [7, 13], [1, 1, 1, 1, 1, 1, 1]]
        for amount in (0, 1, 2, 99, 1000, 1001, 99999, -1234):
            for weights in weight_sets:
                result = allocate(amount, weights)
                assert len(result) == len(weights)
                assert sum(result) == amount
