#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Network core shared by the AON, AOA and PERT engines
====================================================

Every engine call builds its own index of the network: each id gets a
position once per computation and all dependency lists are stored as lists
of positions. Traversal order comes from Kahn's algorithm, so nothing here
recurses and a cycle is found as a by-product of the sort: the nodes left
with unresolved dependencies are exactly those on (or behind) a cycle.
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

from .errors import (CycleError, DanglingReferenceError, DuplicateIdError,
                     InvalidDurationError)

logger = logging.getLogger(__name__)

EPS = np.finfo(float).eps

DEFAULT_TOLERANCE = 1e-3  # CPM criticality threshold
PERT_TOLERANCE    = 1e-2  # PERT criticality threshold

#==============================================================================
def is_zero(value, tolerance=DEFAULT_TOLERANCE):
    """Tolerance based zero test used for every criticality decision."""
    return abs(value) < tolerance

#==============================================================================
def round_off(value, *operands):
    """
    Replace a difference which is below the computation error by zero.

    Parameters
    ----------
    value : float
        Difference of two computed times
    operands : float
        The times the difference was computed from

    Returns
    -------
    float
        ``value`` or ``0.0`` when ``abs(value)`` does not exceed the error bound
    """
    err = EPS * sum(abs(o) for o in operands)
    return value if abs(value) > err else 0.0

#==============================================================================
def check_number(value, what, owner):
    """
    Validate a finite non-negative number.

    Parameters
    ----------
    value : number
        Value to check
    what : str
        Field name used in the error message
    owner : hashable
        Id of the record owning the field

    Returns
    -------
    float

    Raises
    ------
    InvalidDurationError
        If ``value`` is not a number, is not finite or is negative
    """
    try:
        val = float(value)
    except (TypeError, ValueError):
        raise InvalidDurationError(
            f"{what} of {owner!r} must be a number. Got: {value!r}") from None

    if not np.isfinite(val):
        raise InvalidDurationError(f"{what} of {owner!r} must be finite. Got: {val}")
    if val < 0.0:
        raise InvalidDurationError(f"{what} of {owner!r} must be non-negative. Got: {val}")
    return val

#==============================================================================
def unique_ids(ids):
    """Return ``ids`` as a list without repetitions, keeping first occurrences."""
    if ids is None:
        return []
    if isinstance(ids, str):
        ids = [ids]

    ret = []
    for i in ids:
        if i not in ret:
            ret.append(i)
    return ret

#==============================================================================
def index_ids(ids):
    """
    Assign positions to ids.

    Returns
    -------
    dict
        id -> position

    Raises
    ------
    DuplicateIdError
        If some id occurs twice
    """
    pos = {}
    for i, item_id in enumerate(ids):
        if item_id in pos:
            raise DuplicateIdError(item_id)
        pos[item_id] = i
    return pos

#==============================================================================
def build_dependencies(ids, predecessors):
    """
    Build predecessor and successor indexes of an activity network.

    Parameters
    ----------
    ids : list
        Activity ids
    predecessors : list
        Predecessor id lists, one for each id

    Returns
    -------
    tuple
        (pos, preds, succs) where ``pos`` maps ids to positions and
        ``preds``/``succs`` are lists of position lists. Successors are
        listed in input order.

    Raises
    ------
    DuplicateIdError
        If some id occurs twice
    DanglingReferenceError
        If a predecessor id is not one of ``ids``
    """
    assert len(ids) == len(predecessors)

    pos   = index_ids(ids)
    preds = []
    succs = [[] for _ in ids]

    for i, deps in enumerate(predecessors):
        row = []
        for d in deps:
            if d not in pos:
                raise DanglingReferenceError(d, ids[i])
            j = pos[d]
            if j in row:
                continue
            row.append(j)
            succs[j].append(i)
        preds.append(row)

    return pos, preds, succs

#==============================================================================
def topological_order(ids, preds, succs):
    """
    Sort network nodes with Kahn's algorithm.

    ``preds[i]`` and ``succs[i]`` must describe the same arcs from both ends,
    parallel arcs are allowed as long as they are repeated on both sides.

    Parameters
    ----------
    ids : list
        Node ids, used for error reporting only
    preds : list
        Predecessor positions of each node
    succs : list
        Successor positions of each node

    Returns
    -------
    list
        Node positions in dependency order

    Raises
    ------
    CycleError
        If the network is not acyclic
    """
    # Count dependencies for topological sorting
    n_dep = [len(p) for p in preds]

    # Start with nodes without dependencies
    order = [i for i, n in enumerate(n_dep) if 0 == n]

    i = 0
    while i < len(order):
        for j in succs[order[i]]:
            n_dep[j] -= 1
            if 0 == n_dep[j]:
                order.append(j)
        i += 1

    if len(order) < len(ids):
        cycle = [ids[k] for k in _find_cycle(preds, n_dep)]
        logger.debug("Unsorted nodes: %d of %d", len(ids) - len(order), len(ids))
        raise CycleError(cycle)

    return order

#==============================================================================
def _find_cycle(preds, n_dep):
    # An unsorted node always has an unsorted predecessor,
    # so walking back through them must come to some node twice.
    k = next(i for i, n in enumerate(n_dep) if n > 0)

    seen = {}
    path = []
    while k not in seen:
        seen[k] = len(path)
        path.append(k)
        k = next(j for j in preds[k] if n_dep[j] > 0)

    cycle = path[seen[k]:]
    cycle.reverse()
    return cycle

#==============================================================================
def stages(order, preds):
    """
    Compute topological stages: the longest arc count from a source node.

    Parameters
    ----------
    order : list
        Node positions in dependency order
    preds : list
        Predecessor positions of each node

    Returns
    -------
    list
        Stage of each node
    """
    stage = [0] * len(preds)
    for i in order:
        stage[i] = max((stage[j] + 1 for j in preds[i]), default=0)
    return stage
