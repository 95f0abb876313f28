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
import logging
import sys

from schednet import (CycleError, aon_to_aoa, compute_aoa, compute_aon,
                      compute_pert, critical_path, project_duration)
from schednet.aon import to_dataframe
from schednet.estimate import THREE_POINT

#==============================================================================
def main():
    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.WARNING)

    wbs = [
        {'id': 'A', 'name': 'Heating and frames study',  'optimistic': 2., 'most_likely': 3., 'pessimistic': 4.},
        {'id': 'B', 'name': 'Frame construction',        'optimistic': 3., 'most_likely': 4., 'pessimistic': 5., 'predecessors': ['A']},
        {'id': 'C', 'name': 'Earthwork and pose drains', 'optimistic': 1., 'most_likely': 2., 'pessimistic': 3., 'predecessors': ['A']},
        {'id': 'D', 'name': 'Assemblage',                'optimistic': 4., 'most_likely': 5., 'pessimistic': 6., 'predecessors': ['B', 'C']},
        {'id': 'E', 'name': 'Painting',                  'duration': 2.,                                        'predecessors': ['C']},
    ]

    print("=== Activity-on-Node ===")
    # Most likely durations only
    acts = compute_aon([dict({k: v for k, v in w.items() if k not in THREE_POINT},
                             duration=w.get('most_likely', w.get('duration')))
                        for w in wbs])
    print(to_dataframe(acts)[['id', 'duration', 'early_start', 'early_finish',
                              'late_start', 'late_finish', 'float', 'is_critical']])
    print(f"Project duration: {project_duration(acts)}")
    print(f"Critical path: {critical_path(acts)}")

    print("\n=== PERT ===")
    res = compute_pert(wbs)
    print(res.to_dataframe()[['id', 'expected', 'stddev', 'early_start', 'early_finish', 'float']])
    print(f"Total duration: {res.total_duration}")
    print(f"Critical path: {res.critical_path}")

    print("\n=== Activity-on-Arrow ===")
    net = compute_aoa(aon_to_aoa(acts))
    activities_df, events_df = net.to_dataframe()
    print(activities_df[['id', 'src', 'dst', 'duration', 'dummy', 'total_float', 'free_float']])
    print(events_df)
    print(f"Project duration: {net.project_duration}")

    print("\n=== Cycle detection ===")
    try:
        compute_aon([{'id': 'A', 'duration': 1, 'predecessors': ['B']},
                     {'id': 'B', 'duration': 1, 'predecessors': ['A']}])
    except CycleError as e:
        print(f"Error: {e}")

    return 0

#==============================================================================
if __name__ == '__main__':
    sys.exit(main())
