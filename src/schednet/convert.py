#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Activity-on-Node to Activity-on-Arrow conversion
================================================

:func:`aon_to_aoa` builds an AOA network with dummy arrows from an activity
list with predecessors. The construction steps are:

1. Dependency lists are reduced: a predecessor which is already reached
   through another predecessor is dropped.
2. Each distinct reduced dependency list gets one merge event. Activities
   without predecessors start at the start event, activities without
   successors end at the finish event.
3. An activity which feeds exactly one merge event ends there. An activity
   feeding several merge events ends at its own event (or at the merge event
   of its single-element list) and dummies go from there to the rest.
4. Real arrows with equal source and destination are split by an extra
   event and a dummy, the longest activity keeps the direct arrow.
5. Events are numbered by topological stage.

The resulting network has the same early starts, late finishes and project
duration as the Activity-on-Node network.
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

import numpy as np

from .aoa import AOAActivity
from .aon import coerce_activities
from .network import build_dependencies, stages, topological_order

logger = logging.getLogger(__name__)

#==============================================================================
def reduce_dependencies(preds, order):
    """
    Compute minimal dependency lists.

    Parameters
    ----------
    preds : list
        Predecessor positions of each activity
    order : list
        Activity positions in dependency order

    Returns
    -------
    list
        Predecessor positions which are not reachable through other
        predecessors, in input order
    """
    n_act = len(preds)

    # Construct full dependency map
    full_dep_map = np.zeros((n_act, n_act), dtype=bool)
    for i in order:
        for j in preds[i]:
            full_dep_map[i, j] = True
            full_dep_map[i] |= full_dep_map[j]

    # Drop dependencies implied by other dependencies
    min_act_dep = []
    for i in range(n_act):
        min_act_dep.append([j for j in preds[i]
                            if not any(full_dep_map[k, j] for k in preds[i] if k != j)])
    return min_act_dep

#==============================================================================
def _dummy_ids(taken):
    n = 0
    while True:
        n += 1
        did = '#' + str(n)
        if did not in taken:
            yield did

#==============================================================================
def aon_to_aoa(activities):
    """
    Convert an Activity-on-Node network to Activity-on-Arrow form.

    Parameters
    ----------
    activities : iterable
        :class:`schednet.aon.Activity` objects or mappings

    Returns
    -------
    list
        :class:`schednet.aoa.AOAActivity` arrows: real activities in input
        order followed by dummies (``dummy=True``, zero duration, ids ``'#1'``,
        ``'#2'``, ...). Events are integers numbered from 1 by stage.

    Raises
    ------
    DuplicateIdError, DanglingReferenceError, CycleError
        If the network is malformed
    """
    acts = coerce_activities(activities)
    if not acts:
        return []

    ids = [a.id for a in acts]
    _, preds, succs = build_dependencies(ids, [a.predecessors for a in acts])
    order = topological_order(ids, preds, succs)
    min_act_dep = reduce_dependencies(preds, order)

    n_evt = 0
    def _new_event():
        nonlocal n_evt
        n_evt += 1
        return n_evt - 1

    start  = _new_event()
    finish = _new_event()

    # One merge event for each distinct minimal dependency list
    merge = {}
    feeds = [[] for _ in acts]
    for i in order:
        if not min_act_dep[i]:
            continue
        key = frozenset(min_act_dep[i])
        if key in merge:
            continue
        merge[key] = _new_event()
        for j in min_act_dep[i]:
            feeds[j].append(key)

    src = [start] * len(acts)
    dst = [finish] * len(acts)
    dummies = []

    for i in order:
        if min_act_dep[i]:
            src[i] = merge[frozenset(min_act_dep[i])]

        if 1 == len(feeds[i]):
            dst[i] = merge[feeds[i][0]]
        elif len(feeds[i]) > 1:
            own = frozenset([i])
            dst[i] = merge[own] if own in merge else _new_event()
            for key in feeds[i]:
                if key != own:
                    dummies.append((dst[i], merge[key]))

    # Split parallel arrows, the longest activity stays on the direct one
    direct = {}
    for i in sorted(order, key=lambda i: -acts[i].duration):
        key = (src[i], dst[i])
        if key not in direct:
            direct[key] = i
            continue
        evt = _new_event()
        dummies.append((evt, dst[i]))
        dst[i] = evt

    # Renumerate events according to the rules of network modeling
    arcs  = [(src[i], dst[i]) for i in range(len(acts))] + dummies
    ev_preds = [[] for _ in range(n_evt)]
    ev_succs = [[] for _ in range(n_evt)]
    for s, d in arcs:
        ev_preds[d].append(s)
        ev_succs[s].append(d)

    ev_order = topological_order(list(range(n_evt)), ev_preds, ev_succs)
    ev_stage = stages(ev_order, ev_preds)
    number = {e: n for n, e in enumerate(sorted(range(n_evt), key=lambda e: ev_stage[e]), 1)}

    ret = []
    for i, a in enumerate(acts):
        ret.append(AOAActivity(a.id, number[src[i]], number[dst[i]], a.duration,
                               a.name, data=a.data.copy()))

    dummy_id = _dummy_ids(set(ids))
    for s, d in dummies:
        ret.append(AOAActivity(next(dummy_id), number[s], number[d], 0.0, dummy=True))

    logger.debug("Converted %d activities to %d events with %d dummies",
                 len(acts), n_evt, len(dummies))
    return ret
