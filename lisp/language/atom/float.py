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
Defines floating-point atoms.
"""
import re
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from lisp.util.parse import ParseError

from .base import Atom

_float_syntax: re.Pattern = re.compile(
    r"(?P<whole>[+-]?[0-9]+)\.(?P<fraction>[0-9]*)")


@dataclass(frozen=True)
class Float(Atom):
    """
    A signed floating-point literal.

    The literal requires a decimal point but not any fractional digits,
    e.g., ``42.`` is ``42.0``.
    """

    value: float

    def __post_init__(self) -> None:
        """
        Coerce the value to a float.
        """
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:  # noqa: D105
        # positional notation always reparses as a float
        return np.format_float_positional(self.value)

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Float', int]:
        """
        Parse a float literal.

        A float has the following grammar::

            <Float> ::= [+|-] <digit>+ . <digit>*
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        match = _float_syntax.match(input, pos)
        if match is None:
            raise ParseError(cls, input, begpos)
        fraction = match.group("fraction") or "0"
        try:
            value = float(f"{match.group('whole')}.{fraction}")
        except ValueError as e:
            raise ParseError(cls, input, begpos) from e
        pos = cls._lstrip(input, match.end())
        return cls(value), pos
