#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
    SchedNet
    Copyright (C) 2025 anonimous

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""

#==============================================================================
from collections import namedtuple

from .errors import InvalidDurationError
from .network import check_number

THREE_POINT = ('optimistic', 'most_likely', 'pessimistic')

Estimate = namedtuple('Estimate', ['expected', 'stddev', 'variance'])

#==============================================================================
def expected_time(optimistic, most_likely, pessimistic, owner=None):
    """
    Three-point PERT estimate.

    mean = (optimistic + 4*most_likely + pessimistic)/6,
    stddev = (pessimistic - optimistic)/6

    The order of the estimates is not checked, an inconsistent estimate
    (e.g. optimistic > pessimistic) gives a defined but misleading result.

    Parameters
    ----------
    optimistic, most_likely, pessimistic : float
        Finite non-negative duration estimates
    owner : hashable, optional
        Activity id for error messages

    Returns
    -------
    Estimate
        (expected, stddev, variance)

    Examples
    --------
    >>> expected_time(5, 7, 9).expected
    7.0
    """
    a = check_number(optimistic,  'optimistic',  owner)
    m = check_number(most_likely, 'most_likely', owner)
    b = check_number(pessimistic, 'pessimistic', owner)

    mean   = (a + 4 * m + b) / 6
    stddev = (b - a) / 6
    return Estimate(mean, stddev, stddev ** 2)

#==============================================================================
def activity_estimate(data, owner=None):
    """
    Resolve activity duration data into an estimate.

    Supports two formats in order of priority:

    1. **Three-point PERT**: ``optimistic``, ``most_likely``, ``pessimistic``
    2. **Direct duration**: ``duration``, deterministic (zero variance)

    Raises
    ------
    InvalidDurationError
        If neither format is present
    """
    if all(data.get(k) is not None for k in THREE_POINT):
        return expected_time(*(data[k] for k in THREE_POINT), owner=owner)

    if data.get('duration') is not None:
        return Estimate(check_number(data['duration'], 'duration', owner), 0.0, 0.0)

    available = [k for k, v in data.items() if v is not None]
    raise InvalidDurationError(
        f"Insufficient data for determining duration of activity {owner!r}. "
        f"Available keys: {available}")
