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
class NetworkError(ValueError):
    """Base class for all structural and input errors of a network model."""

#==============================================================================
class DanglingReferenceError(NetworkError):
    """
    A dependency refers to an id which is not present in the network.

    Parameters
    ----------
    missing_id : hashable
        The id that could not be resolved
    referrer : hashable
        Id of the activity (or arrow) holding the reference
    kind : str, default='predecessor'
        What the reference is: 'predecessor', 'src' or 'dst'
    """

    def __init__(self, missing_id, referrer, kind='predecessor'):
        self.missing_id = missing_id
        self.referrer = referrer
        self.kind = kind
        super().__init__(
            f"Activity {referrer!r} refers to unknown {kind} {missing_id!r}")

#==============================================================================
class CycleError(NetworkError):
    """
    The dependency relation is not acyclic.

    Parameters
    ----------
    cycle : list
        Ids on one cycle, in dependency order
    """

    def __init__(self, cycle):
        self.cycle = list(cycle)
        path = ' -> '.join(repr(i) for i in self.cycle + self.cycle[:1])
        super().__init__(f"Dependency cycle detected: {path}")

#==============================================================================
class DuplicateIdError(NetworkError):
    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Duplicate id {item_id!r}")

#==============================================================================
class MissingFieldError(NetworkError):
    """
    A record lacks a required field.

    Parameters
    ----------
    field : str
        Name of the missing field
    keys : list
        Keys the record does have
    """

    def __init__(self, field, keys):
        self.field = field
        self.keys = list(keys)
        super().__init__(f"Record must contain {field!r}. Got keys: {self.keys}")

#==============================================================================
class InvalidDurationError(NetworkError):
    pass
