#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Package level checks: public names and module headers.
"""
import inspect

import pytest

import schednet
from schednet import aoa, aon, convert, errors, estimate, network, pert, viz

MODULES = [schednet, aoa, aon, convert, errors, estimate, network, pert, viz]


def test_public_names_resolve():
    for name in schednet.__all__:
        assert hasattr(schednet, name), name


def test_errors_share_base():
    for name in ('CycleError', 'DanglingReferenceError', 'DuplicateIdError',
                 'InvalidDurationError', 'MissingFieldError'):
        assert issubclass(getattr(errors, name), errors.NetworkError)


@pytest.mark.parametrize("module", MODULES, ids=lambda m: m.__name__)
def test_license_header(module):
    source = inspect.getsource(module)
    header = source[:source.index('"""', source.index('GNU'))]
    assert 'SchedNet' in header
    assert 'GNU General Public License' in header
    assert 'E-mail' not in header
