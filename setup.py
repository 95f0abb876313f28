#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
from os.path import abspath, dirname, join, relpath
from setuptools import find_packages, setup

SETUP_DIR = abspath(dirname(__file__))

#Nowadays setup needs relative paths
src_dir   = relpath(join(SETUP_DIR, "src"), SETUP_DIR)

setup(
    name="schednet",
    version="0.1.0",
    description="Critical Path Method and PERT network scheduling (AON, AOA)",
    license="GPL-3.0-or-later",
    package_dir={"": src_dir},
    packages=find_packages(where=src_dir),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "graphviz",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
