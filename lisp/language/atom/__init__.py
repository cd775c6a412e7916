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
Provides the atomic leaves of parsed expressions and their recognizers.
"""

from .base import Atom  # noqa: F401
from .comment import Null  # noqa: F401
from .float import Float  # noqa: F401
from .integer import INT64_MAX, INT64_MIN, Integer  # noqa: F401
from .string import String  # noqa: F401
from .symbol import Symbol  # noqa: F401

DISPATCH_ORDER = (Null, Float, Integer, String, Symbol)
"""
The order in which recognizers are tried when parsing an `Atom`.
"""
