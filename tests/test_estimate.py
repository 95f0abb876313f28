#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for three-point PERT estimates.
"""
import math

import pytest

from schednet import InvalidDurationError, activity_estimate, expected_time


class TestExpectedTime:

    def test_three_point_scenario(self):
        est = expected_time(5, 7, 9)
        assert est.expected == pytest.approx(7.0)
        assert est.stddev == pytest.approx(0.667, abs=1e-3)
        assert est.variance == pytest.approx((4 / 6) ** 2)

    def test_symmetric_estimate_is_most_likely(self):
        assert expected_time(2, 4, 6).expected == pytest.approx(4.0)

    def test_skewed_estimate(self):
        est = expected_time(5, 7, 12)
        assert est.expected == pytest.approx(7.5)
        assert est.variance == pytest.approx(1.3611, abs=1e-4)

    def test_degenerate_estimate(self):
        est = expected_time(3, 3, 3)
        assert est.expected == pytest.approx(3.0)
        assert est.stddev == 0.0

    def test_inconsistent_order_is_accepted(self):
        # optimistic > pessimistic: formula applies as given
        est = expected_time(9, 7, 5)
        assert est.expected == pytest.approx(7.0)
        assert est.stddev == pytest.approx(-4 / 6)

    @pytest.mark.parametrize("bad", [-1, math.inf, math.nan, 'x', None])
    def test_invalid_numbers(self, bad):
        with pytest.raises(InvalidDurationError):
            expected_time(bad, 2, 3)


class TestActivityEstimate:

    def test_three_point_has_priority(self):
        est = activity_estimate({'optimistic': 1, 'most_likely': 2,
                                 'pessimistic': 3, 'duration': 10})
        assert est.expected == pytest.approx(2.0)

    def test_direct_duration_is_deterministic(self):
        est = activity_estimate({'duration': 6.5})
        assert est == (6.5, 0.0, 0.0)

    def test_incomplete_estimate_falls_back_to_duration(self):
        est = activity_estimate({'optimistic': 1, 'pessimistic': 3, 'duration': 4})
        assert est.expected == 4.0

    def test_insufficient_data(self):
        with pytest.raises(InvalidDurationError, match="Available keys"):
            activity_estimate({'optimistic': 1, 'name': 'x'}, owner='A')
