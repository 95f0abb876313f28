#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Activity-on-Arrow CPM engine
============================

Events are network nodes, activities are arrows between them.
:func:`compute_aoa` computes earliest and latest event times, event stages
and the total and free floats of every arrow.

Classes
-------
- :class:`Event`: Represents an event (milestone) of the network
- :class:`AOAActivity`: Represents an activity arrow, real or dummy
- :class:`AOAResult`: Scheduled events, arrows and project duration
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

from . import viz
from .errors import DanglingReferenceError, MissingFieldError
from .estimate import activity_estimate
from .network import (DEFAULT_TOLERANCE, check_number, index_ids, is_zero,
                      round_off, stages, topological_order)

logger = logging.getLogger(__name__)

#==============================================================================
class Event:
    """
    Represents an event (milestone) in the network model.

    Parameters
    ----------
    id : hashable
        Unique event identifier

    Attributes
    ----------
    eet : float
        Earliest event time
    let : float
        Latest event time
    slack : float
        Event time reserve (``let - eet``)
    stage : int
        Event stage in topological order
    is_critical : bool
        True if the event time reserve is zero within tolerance
    """

    def __init__(self, id):
        self.id          = id
        self.stage       = 0
        self.eet         = None
        self.let         = None
        self.slack       = None
        self.is_critical = None

    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        return {
            'id'         : self.id,
            'stage'      : self.stage,
            'eet'        : self.eet,
            'let'        : self.let,
            'slack'      : self.slack,
            'is_critical': self.is_critical,
        }

#==============================================================================
class AOAActivity:
    """
    Represents an activity arrow in the network model.

    Parameters
    ----------
    id : hashable
        Unique activity identifier
    src : hashable
        Source event id
    dst : hashable
        Destination event id
    duration : float
        Finite non-negative activity duration
    name : str
        Activity label for visualization
    dummy : bool
        True for zero duration arrows which only carry a dependency
    data : dict, optional
        Any other custom fields
    """

    def __init__(self, id, src, dst, duration, name='', dummy=False, data=None):
        assert data is None or isinstance(data, dict)

        self.id       = id
        self.src      = src
        self.dst      = dst
        self.duration = check_number(duration, 'duration', id)
        self.name     = name
        self.dummy    = bool(dummy)
        self.data     = data if data is not None else {}

        # CPM parameters
        self.early_start  = None
        self.early_finish = None
        self.late_start   = None
        self.late_finish  = None
        self.total_float  = None
        self.free_float   = None
        self.is_critical  = None

    @classmethod
    def from_dict(cls, arrow):
        """
        Create an arrow from a mapping.

        Event ids are taken from ``src``/``dst`` or from ``from``/``to``.
        Real arrows need a ``duration`` or a three-point estimate, dummies
        default to zero duration.

        Raises
        ------
        MissingFieldError
            If ``id`` or an event id is missing
        InvalidDurationError
            If a real arrow has no duration data
        """
        for field, alias in (('id', 'id'), ('src', 'from'), ('dst', 'to')):
            if field not in arrow and alias not in arrow:
                raise MissingFieldError(field, arrow.keys())

        src = arrow['src'] if 'src' in arrow else arrow['from']
        dst = arrow['dst'] if 'dst' in arrow else arrow['to']

        dummy = bool(arrow.get('dummy', False))
        if dummy:
            duration = arrow.get('duration', 0.0)
        else:
            duration = activity_estimate(arrow, owner=arrow['id']).expected

        return cls(arrow['id'], src, dst, duration,
                   name=arrow.get('name', ''),
                   dummy=dummy,
                   data=dict(arrow.get('data') or {}))

    def copy(self):
        """Return an unscheduled copy of the arrow."""
        return AOAActivity(self.id, self.src, self.dst, self.duration,
                           self.name, self.dummy, self.data.copy())

    def __repr__(self):
        return str(self.to_dict())

    def to_dict(self):
        """
        Convert arrow to dictionary representation.

        Returns
        -------
        dict
            Arrow inputs, CPM timing parameters and a copy of ``data``
        """
        return {
            'id'          : self.id,
            'name'        : self.name,
            'src'         : self.src,
            'dst'         : self.dst,
            'duration'    : self.duration,
            'dummy'       : self.dummy,
            # CPM things
            'early_start' : self.early_start,
            'early_finish': self.early_finish,
            'late_start'  : self.late_start,
            'late_finish' : self.late_finish,
            'total_float' : self.total_float,
            'free_float'  : self.free_float,
            'is_critical' : self.is_critical,
            'data'        : self.data.copy()
        }

#==============================================================================
class AOAResult:
    """
    Result of :func:`compute_aoa`.

    Attributes
    ----------
    events : list
        Scheduled :class:`Event` objects
    activities : list
        Scheduled :class:`AOAActivity` objects in input order
    project_duration : float
        Maximum earliest event time
    """

    def __init__(self, events, activities, project_duration):
        self.events           = events
        self.activities       = activities
        self.project_duration = project_duration

    def event(self, event_id):
        """Get event by id, ``None`` if not found."""
        for e in self.events:
            if e.id == event_id:
                return e
        return None

    def activity(self, activity_id):
        """Get arrow by id, ``None`` if not found."""
        for a in self.activities:
            if a.id == activity_id:
                return a
        return None

    def critical_path(self):
        """Ids of critical real arrows ordered by early start."""
        crit = [a for a in self.activities if a.is_critical and not a.dummy]
        return [a.id for a in sorted(crit, key=lambda a: a.early_start)]

    def __repr__(self):
        _repr = 'Events:{\n'
        for e in self.events:
            _repr += '        ' + str(e) + '\n'
        _repr += '}\n'

        _repr += 'Activities:{\n'
        for a in self.activities:
            _repr += '        ' + str(a) + '\n'
        _repr += '}\n'

        return _repr

    def to_dict(self):
        """
        Convert result to dictionary representation.

        Returns
        -------
        dict
            ``{'events': [...], 'activities': [...], 'project_duration': ...}``
        """
        return {
            'events'          : [e.to_dict() for e in self.events],
            'activities'      : [a.to_dict() for a in self.activities],
            'project_duration': self.project_duration,
        }

    def to_dataframe(self):
        """
        Convert result to pandas DataFrames.

        Returns
        -------
        tuple
            (activities_df, events_df)
        """
        events_df = pd.DataFrame([e.to_dict() for e in self.events])

        expanded = []
        for a in self.activities:
            row = a.to_dict()
            data = row.pop('data')
            if data:
                row.update(data)
            expanded.append(row)

        activities_df = pd.DataFrame(expanded)
        return activities_df, events_df

    def viz(self, output_path=None):
        """Create Graphviz visualization, see :func:`schednet.viz.aoa_digraph`."""
        return viz.aoa_digraph(self, output_path)

#==============================================================================
def _coerce_arrow(item):
    if isinstance(item, AOAActivity):
        return item.copy()
    if isinstance(item, Mapping):
        return AOAActivity.from_dict(item)
    raise TypeError(f"AOAActivity or mapping expected. Got: {type(item)}")

def _event_id(item):
    if isinstance(item, Event):
        return item.id
    if isinstance(item, Mapping):
        if 'id' not in item:
            raise MissingFieldError('id', item.keys())
        return item['id']
    return item

#==============================================================================
def compute_aoa(edges, events=None, tolerance=DEFAULT_TOLERANCE):
    """
    Compute CPM parameters of an Activity-on-Arrow network.

    Parameters
    ----------
    edges : iterable
        :class:`AOAActivity` objects or mappings with ``id``, ``src``
        (or ``from``), ``dst`` (or ``to``), ``duration`` and ``name``
    events : iterable, optional
        Explicit event collection (ids, :class:`Event` objects or mappings
        with ``id``). Arrows must reference these events. By default the
        events are the distinct arrow endpoints in first-seen order.
    tolerance : float, default=DEFAULT_TOLERANCE
        Criticality threshold

    Returns
    -------
    AOAResult

    Raises
    ------
    DuplicateIdError
        If an arrow id or an event id occurs twice
    DanglingReferenceError
        If an arrow references an event missing from ``events``
    CycleError
        If arrows form a cycle, the error lists event ids
    InvalidDurationError
        If some duration is negative or not finite
    """
    arrows = [_coerce_arrow(e) for e in edges]
    index_ids([a.id for a in arrows])

    if events is None:
        evt_ids = []
        seen    = set()
        for a in arrows:
            for e in (a.src, a.dst):
                if e not in seen:
                    seen.add(e)
                    evt_ids.append(e)
    else:
        evt_ids = [_event_id(e) for e in events]

    pos = index_ids(evt_ids)

    preds   = [[] for _ in evt_ids]
    succs   = [[] for _ in evt_ids]
    in_arr  = [[] for _ in evt_ids]
    out_arr = [[] for _ in evt_ids]
    for k, a in enumerate(arrows):
        if a.src not in pos:
            raise DanglingReferenceError(a.src, a.id, 'src')
        if a.dst not in pos:
            raise DanglingReferenceError(a.dst, a.id, 'dst')
        s = pos[a.src]
        d = pos[a.dst]
        preds[d].append(s)
        succs[s].append(d)
        in_arr[d].append(k)
        out_arr[s].append(k)

    order = topological_order(evt_ids, preds, succs)

    evts = [Event(i) for i in evt_ids]
    for e, s in zip(evts, stages(order, preds)):
        e.stage = s

    # Forward pass
    for i in order:
        evts[i].eet = max((evts[pos[arrows[k].src]].eet + arrows[k].duration
                           for k in in_arr[i]), default=0.0)

    duration = max((e.eet for e in evts), default=0.0)

    # Backward pass
    for i in reversed(order):
        evts[i].let = min((evts[pos[arrows[k].dst]].let - arrows[k].duration
                           for k in out_arr[i]), default=duration)

    # Compute reserves
    for e in evts:
        e.slack = round_off(e.let - e.eet, e.let, e.eet)
        e.is_critical = is_zero(e.slack, tolerance)

    for a in arrows:
        src = evts[pos[a.src]]
        dst = evts[pos[a.dst]]

        a.early_start  = src.eet
        a.early_finish = src.eet + a.duration
        a.late_finish  = dst.let
        a.late_start   = dst.let - a.duration
        a.total_float  = round_off(dst.let - src.eet - a.duration, dst.let, src.eet, a.duration)
        a.free_float   = round_off(dst.eet - src.eet - a.duration, dst.eet, src.eet, a.duration)
        a.is_critical  = is_zero(a.total_float, tolerance)

    logger.debug("Scheduled %d events and %d arrows, project duration %s",
                 len(evts), len(arrows), duration)
    return AOAResult(evts, arrows, duration)
