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
Parse Lisp source text into trees of typed values.
"""

from lisp.language import (  # noqa: F401
    Atom,
    Expression,
    ExpressionList,
    Float,
    Integer,
    Null,
    Program,
    String,
    Symbol,
)
from lisp.util.parse import ParseError  # noqa: F401


def parse_program(source: str) -> Expression:
    """
    Parse an entire program.

    Parameters
    ----------
    source : str
        The full program text.

    Returns
    -------
    Expression
        The sole top-level expression, or a list of the top-level
        expressions if there are zero or several.

    Raises
    ------
    ParseError
        If any part of `source` is not a valid expression.
    """
    return Program.parse(source)
