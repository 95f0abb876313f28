#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SchedNet - Critical Path Method and PERT network scheduling
===========================================================

Features
--------
- Activity-on-Node CPM: :func:`compute_aon`
- Activity-on-Arrow CPM: :func:`compute_aoa`
- PERT three-point scheduling: :func:`compute_pert`, :func:`expected_time`
- AON to AOA conversion with dummy activities: :func:`aon_to_aoa`
- Export to dictionaries, pandas DataFrames and Graphviz diagrams
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
from .aoa import AOAActivity, AOAResult, Event, compute_aoa
from .aon import Activity, compute_aon, critical_path, project_duration
from .convert import aon_to_aoa
from .errors import (CycleError, DanglingReferenceError, DuplicateIdError,
                     InvalidDurationError, MissingFieldError,
                     NetworkError)
from .estimate import Estimate, activity_estimate, expected_time
from .network import DEFAULT_TOLERANCE, PERT_TOLERANCE
from .pert import PertActivity, PertResult, compute_pert

__version__ = '0.1.0'

__all__ = [
    'Activity', 'AOAActivity', 'AOAResult', 'Event', 'Estimate',
    'PertActivity', 'PertResult',
    'compute_aon', 'compute_aoa', 'compute_pert', 'aon_to_aoa',
    'expected_time', 'activity_estimate', 'critical_path', 'project_duration',
    'NetworkError', 'CycleError', 'DanglingReferenceError', 'DuplicateIdError',
    'InvalidDurationError', 'MissingFieldError',
    'DEFAULT_TOLERANCE', 'PERT_TOLERANCE',
]
