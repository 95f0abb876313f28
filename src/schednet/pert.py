#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PERT engine
===========

Activities carry three-point estimates, their expected times are used as
durations of an Activity-on-Node CPM computation.

Usage Example
-------------
>>> res = compute_pert([
...     {'id': 'A', 'optimistic': 5, 'most_likely': 7, 'pessimistic': 9},
...     {'id': 'B', 'optimistic': 1, 'most_likely': 2, 'pessimistic': 3,
...      'predecessors': ['A']},
... ])
>>> res.critical_path
['A', 'B']
>>> res.total_duration
9.0

.. note::
    Standard deviation and variance are computed per activity only,
    they are not aggregated over the project.
"""
#==============================================================================
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
import logging

from . import aon, viz
from .aon import DERIVED_FIELDS, Activity
from .estimate import THREE_POINT, activity_estimate
from .network import PERT_TOLERANCE

logger = logging.getLogger(__name__)

#==============================================================================
class PertActivity(Activity):
    """
    Activity with a three-point duration estimate.

    Parameters
    ----------
    id : hashable
        Activity identifier
    optimistic, most_likely, pessimistic : float, optional
        Three-point estimate, takes priority over ``duration``
    predecessors : iterable, optional
        Ids of the activities this one depends on
    name : str, optional
        Display label
    duration : float, optional
        Deterministic duration used when the estimate is incomplete
    data : dict, optional
        Any other custom fields

    Attributes
    ----------
    expected : float
        Expected duration, equal to ``duration``
    stddev : float
        Duration standard deviation
    variance : float
        Duration variance
    """

    def __init__(self, id, optimistic=None, most_likely=None, pessimistic=None,
                 predecessors=None, name='', duration=None, data=None):
        est = activity_estimate({'optimistic' : optimistic,
                                 'most_likely': most_likely,
                                 'pessimistic': pessimistic,
                                 'duration'   : duration}, owner=id)

        super().__init__(id, est.expected, predecessors, name, data)

        self.optimistic  = optimistic
        self.most_likely = most_likely
        self.pessimistic = pessimistic

        self.expected = est.expected
        self.stddev   = est.stddev
        self.variance = est.variance

    @property
    def is_three_point(self):
        return all(getattr(self, k) is not None for k in THREE_POINT)

    @classmethod
    def _input_fields(cls):
        return ('id', 'duration', 'predecessors', 'name') + THREE_POINT

    @classmethod
    def _derived_fields(cls):
        return DERIVED_FIELDS + ('expected', 'stddev', 'variance')

    @classmethod
    def _resolve_duration(cls, kwargs):
        # __init__ resolves it from the three-point fields
        pass

    def input_dict(self):
        # Three-point estimate takes priority over 'duration'
        ret = super().input_dict()
        if self.is_three_point:
            for k in THREE_POINT:
                ret[k] = getattr(self, k)
        return ret

    def to_dict(self):
        ret = super().to_dict()
        # PERT things
        ret['optimistic']  = self.optimistic
        ret['most_likely'] = self.most_likely
        ret['pessimistic'] = self.pessimistic
        ret['expected']    = self.expected
        ret['stddev']      = self.stddev
        ret['variance']    = self.variance
        return ret

#==============================================================================
class PertResult:
    """
    Result of :func:`compute_pert`.

    Attributes
    ----------
    activities : list
        Scheduled :class:`PertActivity` objects in input order
    critical_path : list
        Critical activity ids by ascending early start
    total_duration : float
        Maximum early finish
    """

    def __init__(self, activities, critical_path, total_duration):
        self.activities     = activities
        self.critical_path  = critical_path
        self.total_duration = total_duration

    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        return {
            'activities'    : [a.to_dict() for a in self.activities],
            'critical_path' : list(self.critical_path),
            'total_duration': self.total_duration,
        }

    def to_dataframe(self):
        return aon.to_dataframe(self.activities)

    def viz(self, output_path=None):
        return viz.aon_digraph(self.activities, output_path)

#==============================================================================
def compute_pert(activities, tolerance=PERT_TOLERANCE):
    """
    Compute PERT schedule.

    Parameters
    ----------
    activities : iterable
        :class:`PertActivity`/:class:`Activity` objects or mappings with
        ``id``, ``predecessors`` and either ``optimistic``, ``most_likely``,
        ``pessimistic`` or ``duration``
    tolerance : float, default=PERT_TOLERANCE
        Criticality threshold for slack

    Returns
    -------
    PertResult

    Raises
    ------
    DuplicateIdError, DanglingReferenceError, CycleError
        If the network is malformed
    InvalidDurationError
        If an activity has no usable duration data
    """
    acts  = aon.coerce_activities(activities, PertActivity)
    total = aon.run_passes(acts, tolerance)
    path  = aon.critical_path(acts)

    logger.debug("PERT critical path: %s", path)
    return PertResult(acts, path, total)
