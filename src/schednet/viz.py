#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Graphviz diagrams of scheduled networks.

Color coding:
    - Red: Critical (zero reserve)
    - Black: Non-critical
    - Dashed lines: Dummy activities
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
import graphviz

CRITICAL = '#ff0000'
REGULAR  = '#000000'

def _cl(is_critical):
    return CRITICAL if is_critical else REGULAR

def _rec(text):
    # Record labels treat these characters as field syntax
    for c in '\\{}|<>':
        text = text.replace(c, '\\' + c)
    return text

def _render(dot, output_path):
    if output_path is not None:
        dot.render(output_path, format='png', cleanup=True)
    return dot

#==============================================================================
def aon_digraph(activities, output_path=None):
    """
    Create Graphviz visualization of a scheduled Activity-on-Node network.

    Each node shows early start, duration and early finish in the top row,
    the activity id and name in the middle and late start, float and late
    finish in the bottom row.

    Parameters
    ----------
    activities : list
        Scheduled :class:`schednet.aon.Activity` objects
    output_path : str, optional
        Render a png file to this path when given

    Returns
    -------
    graphviz.Digraph
    """
    dot = graphviz.Digraph(node_attr={'shape': 'record', 'style': 'rounded'})
    dot.graph_attr['rankdir'] = 'LR'

    crit = {}
    for a in activities:
        crit[a.id] = a.is_critical
        lbl = '{{%.1f|%.1f|%.1f}|%s|{%.1f|%.2f|%.1f}}' % (
            a.early_start, a.duration, a.early_finish,
            _rec(' '.join(str(s) for s in (a.id, a.name) if s)),
            a.late_start, a.float, a.late_finish)
        dot.node(str(a.id), lbl, color=_cl(a.is_critical))

    for a in activities:
        for p in a.predecessors:
            dot.edge(str(p), str(a.id), color=_cl(crit[p] and a.is_critical))

    return _render(dot, output_path)

#==============================================================================
def aoa_digraph(result, output_path=None):
    """
    Create Graphviz visualization of a scheduled Activity-on-Arrow network.

    Event nodes show id, earliest and latest times and the event reserve,
    arrows show the activity name, duration and total float.

    Parameters
    ----------
    result : schednet.aoa.AOAResult
        Result of :func:`schednet.aoa.compute_aoa`
    output_path : str, optional
        Render a png file to this path when given

    Returns
    -------
    graphviz.Digraph
    """
    dot = graphviz.Digraph(node_attr={'shape': 'record', 'style': 'rounded'})
    dot.graph_attr['rankdir'] = 'LR'

    # Add events/nodes
    for e in result.events:
        dot.node(str(e.id),
                 '{%s |{%.1f|%.1f}| %.2f}' % (_rec(str(e.id)), e.eet, e.let, e.slack),
                 color=_cl(e.is_critical))

    # Add activities/edges
    for a in result.activities:
        if a.dummy:
            lbl = '#\n r=' + format(a.total_float, '.2f')
        else:
            lbl  = str(a.name or a.id)
            lbl += '\n t=' + format(a.duration, '.1f') + '\n r=' + format(a.total_float, '.2f')

        dot.edge(str(a.src), str(a.dst),
                 label=lbl,
                 color=_cl(a.is_critical),
                 style='dashed' if a.dummy else 'solid')

    return _render(dot, output_path)
