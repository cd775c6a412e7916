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
Provides parsing of Lisp source text into expression trees.
"""

from .atom import (  # noqa: F401
    Atom,
    Float,
    Integer,
    Null,
    String,
    Symbol,
)
from .exception import IllegalExpressionOperationException  # noqa: F401
from .list import ExpressionList  # noqa: F401
from .node import Expression  # noqa: F401
from .program import Program  # noqa: F401
