#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Activity-on-Node CPM engine
===========================

Activities are network nodes, dependencies are arcs from predecessors to
successors. :func:`compute_aon` performs the forward pass (early times), the
backward pass (late times) and computes time reserves and criticality.

Usage Example
-------------
>>> acts = compute_aon([
...     {'id': 'A', 'duration': 3},
...     {'id': 'B', 'duration': 4, 'predecessors': ['A']},
... ])
>>> [a.early_finish for a in acts]
[3.0, 7.0]
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
from collections.abc import Mapping
import logging

import pandas as pd

from .errors import MissingFieldError
from .estimate import activity_estimate
from .network import (DEFAULT_TOLERANCE, build_dependencies, check_number,
                      is_zero, round_off, topological_order, unique_ids)

logger = logging.getLogger(__name__)

# Fields computed by the engine, never read from the input
DERIVED_FIELDS = ('successors', 'early_start', 'early_finish', 'late_start',
                  'late_finish', 'float', 'slack', 'free_float', 'is_critical')

#==============================================================================
class Activity:
    """
    Represents an activity (task) of an Activity-on-Node network.

    Parameters
    ----------
    id : hashable
        Activity identifier, unique within one computation
    duration : float
        Finite non-negative activity duration
    predecessors : iterable, optional
        Ids of the activities this one depends on
    name : str, optional
        Display label, not used in computation
    data : dict, optional
        Any other custom fields

    Attributes
    ----------
    successors : list
        Ids of the activities depending on this one
    early_start, early_finish, late_start, late_finish : float
        CPM timing parameters
    float : float
        Total float (``late_start - early_start``)
    free_float : float
        Delay that does not postpone any successor
    is_critical : bool
        True if the total float is zero within tolerance

    Derived attributes are ``None`` until the activity has been scheduled.
    """

    def __init__(self, id, duration, predecessors=None, name='', data=None):
        assert data is None or isinstance(data, dict)

        self.id           = id
        self.name         = name
        self.duration     = check_number(duration, 'duration', id)
        self.predecessors = unique_ids(predecessors)
        self.data         = data if data is not None else {}
        self.reset()

    def reset(self):
        """Forget all derived fields."""
        self.successors   = []
        self.early_start  = None
        self.early_finish = None
        self.late_start   = None
        self.late_finish  = None
        self.float        = None
        self.free_float   = None
        self.is_critical  = None

    @property
    def slack(self):
        """Alias of total float."""
        return self.float

    #--------------------------------------------------------------------------
    @classmethod
    def from_dict(cls, wbs_data):
        """
        Create an activity from a mapping.

        Keys ``id``, ``duration``, ``predecessors`` and ``name`` are used
        directly, derived fields are ignored, all other keys go to ``data``.
        The duration is resolved by :func:`schednet.estimate.activity_estimate`,
        so a three-point estimate takes priority over ``duration``.

        Raises
        ------
        MissingFieldError
            If there is no ``id``
        InvalidDurationError
            If there is neither a three-point estimate nor a ``duration``
        """
        if 'id' not in wbs_data:
            raise MissingFieldError('id', wbs_data.keys())

        kwargs = {k: wbs_data[k] for k in cls._input_fields() if k in wbs_data}

        # Nested 'data' comes from to_dict() output
        data = dict(wbs_data.get('data') or {})
        data.update({k: v for k, v in wbs_data.items()
                     if k not in cls._input_fields() and
                        k not in cls._derived_fields() and
                        k != 'data'})
        kwargs['data'] = data
        cls._resolve_duration(kwargs)
        return cls(**kwargs)

    @classmethod
    def _resolve_duration(cls, kwargs):
        fields = dict(kwargs['data'])
        fields.update((k, v) for k, v in kwargs.items() if k != 'data')
        kwargs['duration'] = activity_estimate(fields, owner=kwargs['id']).expected

    @classmethod
    def _input_fields(cls):
        return ('id', 'duration', 'predecessors', 'name')

    @classmethod
    def _derived_fields(cls):
        return DERIVED_FIELDS

    def input_dict(self):
        """Return input fields only, suitable for :meth:`from_dict`."""
        ret = self.data.copy()
        ret.update({
            'id'          : self.id,
            'name'        : self.name,
            'duration'    : self.duration,
            'predecessors': list(self.predecessors),
        })
        return ret

    def copy(self):
        """Return an unscheduled copy of the activity."""
        return type(self).from_dict(self.input_dict())

    #--------------------------------------------------------------------------
    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        """
        Convert activity to dictionary representation.

        Returns
        -------
        dict
            Activity inputs, CPM timing parameters and a copy of ``data``
        """
        return {
            'id'          : self.id,
            'name'        : self.name,
            'duration'    : self.duration,
            'predecessors': list(self.predecessors),
            'successors'  : list(self.successors),
            # CPM things
            'early_start' : self.early_start,
            'early_finish': self.early_finish,
            'late_start'  : self.late_start,
            'late_finish' : self.late_finish,
            'float'       : self.float,
            'free_float'  : self.free_float,
            'is_critical' : self.is_critical,
            # Additional data copy
            'data'        : self.data.copy()
        }

#==============================================================================
def coerce_activities(items, cls=Activity):
    """
    Turn activities or mappings into fresh unscheduled ``cls`` instances.

    Input records are never modified.
    """
    ret = []
    for item in items:
        if isinstance(item, Activity):
            ret.append(cls.from_dict(item.input_dict()))
        elif isinstance(item, Mapping):
            ret.append(cls.from_dict(item))
        else:
            raise TypeError(f"Activity or mapping expected. Got: {type(item)}")
    return ret

#==============================================================================
def run_passes(acts, tolerance=DEFAULT_TOLERANCE):
    """
    Schedule activities in place.

    Builds the dependency index once, then runs the forward pass, the
    backward pass and the reserve computation, each as one full sweep.

    Parameters
    ----------
    acts : list
        Unscheduled :class:`Activity` objects
    tolerance : float
        Criticality threshold

    Returns
    -------
    float
        Project duration, ``0.0`` for an empty network

    Raises
    ------
    DuplicateIdError, DanglingReferenceError, CycleError
        If the network is malformed, no activity is modified in this case
    """
    ids = [a.id for a in acts]
    _, preds, succs = build_dependencies(ids, [a.predecessors for a in acts])
    order = topological_order(ids, preds, succs)

    for i, a in enumerate(acts):
        a.successors = [ids[j] for j in succs[i]]

    # Forward pass
    for i in order:
        a = acts[i]
        a.early_start  = max((acts[j].early_finish for j in preds[i]), default=0.0)
        a.early_finish = a.early_start + a.duration

    duration = max((a.early_finish for a in acts), default=0.0)

    # Backward pass
    for i in reversed(order):
        a = acts[i]
        a.late_finish = min((acts[j].late_start for j in succs[i]), default=duration)
        a.late_start  = a.late_finish - a.duration

    # Compute reserves
    for i, a in enumerate(acts):
        a.float = round_off(a.late_start - a.early_start, a.late_start, a.early_start)

        nxt = min((acts[j].early_start for j in succs[i]), default=duration)
        a.free_float = round_off(nxt - a.early_finish, nxt, a.early_finish)

        a.is_critical = is_zero(a.float, tolerance)

    logger.debug("Scheduled %d activities, project duration %s", len(acts), duration)
    return duration

#==============================================================================
def compute_aon(activities, tolerance=DEFAULT_TOLERANCE):
    """
    Compute CPM parameters of an Activity-on-Node network.

    Parameters
    ----------
    activities : iterable
        :class:`Activity` objects or mappings accepted by
        :meth:`Activity.from_dict`, in any order
    tolerance : float, default=DEFAULT_TOLERANCE
        Criticality threshold for total float

    Returns
    -------
    list
        New scheduled :class:`Activity` objects in input order

    Raises
    ------
    DuplicateIdError
        If an id occurs twice
    DanglingReferenceError
        If a predecessor is not in ``activities``
    CycleError
        If dependencies are cyclic
    InvalidDurationError
        If some duration is negative or not finite
    """
    acts = coerce_activities(activities)
    run_passes(acts, tolerance)
    return acts

#==============================================================================
def project_duration(activities):
    """Maximum early finish of scheduled activities, ``0.0`` if there are none."""
    return max((a.early_finish for a in activities), default=0.0)

#==============================================================================
def critical_path(activities):
    """Ids of critical activities ordered by early start, ties keep input order."""
    crit = [a for a in activities if a.is_critical]
    return [a.id for a in sorted(crit, key=lambda a: a.early_start)]

#==============================================================================
def to_dataframe(activities):
    """
    Convert scheduled activities to a pandas DataFrame.

    Custom ``data`` fields are expanded into separate columns.
    """
    expanded = []
    for act in activities:
        row = act.to_dict()
        data = row.pop('data')
        if data:
            row.update(data)
        expanded.append(row)

    return pd.DataFrame(expanded)
