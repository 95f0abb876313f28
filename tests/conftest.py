#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared fixtures for schednet tests.
"""
import random

import pytest


@pytest.fixture
def chain():
    """A(3) -> B(4) -> C(2)"""
    return [
        {'id': 'A', 'duration': 3, 'predecessors': []},
        {'id': 'B', 'duration': 4, 'predecessors': ['A']},
        {'id': 'C', 'duration': 2, 'predecessors': ['B']},
    ]


@pytest.fixture
def diamond():
    """A(3) -> B(4), C(2) -> D(5)"""
    return [
        {'id': 'A', 'duration': 3, 'predecessors': []},
        {'id': 'B', 'duration': 4, 'predecessors': ['A']},
        {'id': 'C', 'duration': 2, 'predecessors': ['A']},
        {'id': 'D', 'duration': 5, 'predecessors': ['B', 'C']},
    ]


@pytest.fixture
def aoa_edges():
    """Event network 1->2 (A3), 2->3 (B4), 2->4 (C2), 3->5 (D5), 4->5 (E5)"""
    return [
        {'id': 'A', 'src': 1, 'dst': 2, 'duration': 3},
        {'id': 'B', 'src': 2, 'dst': 3, 'duration': 4},
        {'id': 'C', 'src': 2, 'dst': 4, 'duration': 2},
        {'id': 'D', 'src': 3, 'dst': 5, 'duration': 5},
        {'id': 'E', 'src': 4, 'dst': 5, 'duration': 5},
    ]


@pytest.fixture
def construction():
    """Twelve activity building project with multiple start and end activities."""
    dur = {'A': 3.84, 'B': 2., 'C': 3.8, 'D': 4., 'E': 6., 'F': 6.,
           'G': 6., 'H': 2., 'I': 5., 'J': 5., 'K': 2., 'L': 1.}
    pred = {
        'E': ['A', 'B', 'C'],
        'F': ['B', 'C'],
        'G': ['C', 'D'],
        'H': ['A', 'F', 'G'],
        'I': ['E', 'F', 'G'],
        'J': ['C', 'F', 'G'],
        'K': ['F', 'H', 'I'],
        'L': ['G', 'H', 'I', 'J'],
    }
    return [{'id': k, 'duration': v, 'predecessors': pred.get(k, [])}
            for k, v in dur.items()]


def make_dag(seed, n_act=12, p_link=0.3):
    """Random acyclic activity list, listed out of dependency order."""
    rnd = random.Random(seed)
    ids = ['T%02d' % i for i in range(n_act)]
    acts = []
    for i, a in enumerate(ids):
        preds = [p for p in ids[:i] if rnd.random() < p_link]
        acts.append({'id': a,
                     'duration': float(rnd.randint(0, 9)),
                     'predecessors': preds})
    rnd.shuffle(acts)
    return acts


@pytest.fixture(params=range(8))
def random_dag(request):
    return make_dag(request.param)
