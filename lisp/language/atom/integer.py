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
Defines signed 64-bit integer atoms.
"""
import re
from dataclasses import dataclass
from typing import Tuple

from lisp.util.parse import ParseError

from .base import Atom

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

_integer_syntax: re.Pattern = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Integer(Atom):
    """
    A signed 64-bit integer literal.
    """

    value: int

    def __post_init__(self) -> None:
        """
        Verify that the value fits in 64 bits.
        """
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(
                f"Integer {self.value} does not fit in a signed 64-bit "
                "integer")

    def __str__(self) -> str:  # noqa: D105
        return str(self.value)

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Integer', int]:
        """
        Parse an integer literal.

        An integer has the following grammar::

            <Integer> ::= [+|-] <digit>+

        where the digits may not be followed by a decimal point.
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        match = _integer_syntax.match(input, pos)
        if match is None or input.startswith(".", match.end()):
            raise ParseError(cls, input, begpos)
        try:
            # int() also rejects pathologically long digit strings
            integer = cls(int(match.group()))
        except ValueError as e:
            raise ParseError(cls, input, begpos) from e
        pos = cls._lstrip(input, match.end())
        return integer, pos
