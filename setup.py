#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of PRISM
# (see https://github.com/orgs/Radiance-Technologies/prism).
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
lisp: Parse Lisp source text into trees of typed values.
"""

from setuptools import find_packages, setup

setup(
    name="lisp-reader",
    version="0.1.0",
    description="A recursive-descent parser for Lisp s-expressions",
    python_requires=">=3.8",
    packages=find_packages(include=["lisp",
                                    "lisp.*"]),
    package_data={"lisp.tests": ["lisp_examples/*.lisp"]},
    install_requires=[
        "numpy",
        "seutil",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["lisp-parse=lisp.__main__:cli"]},
)
