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
Defines symbol atoms: operators, global variables, and identifiers.
"""
import re
from dataclasses import dataclass
from typing import Tuple

from lisp.util.parse import ParseError

from .base import Atom

_arithmetic_syntax: re.Pattern = re.compile(r"(?P<symbol>[-+*/])[ \t\r\n]+")
_global_variable_syntax: re.Pattern = re.compile(
    r"(?P<symbol>\*[A-Za-z0-9_-]+\*)")
_regular_syntax: re.Pattern = re.compile(
    r"(?P<symbol>[A-Za-z][A-Za-z0-9_*-]*)")


@dataclass(frozen=True)
class Symbol(Atom):
    """
    An identifier or operator.

    The name is kept exactly as written (no case folding).
    """

    value: str

    def __str__(self) -> str:  # noqa: D105
        return self.value

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Symbol', int]:
        """
        Parse a symbol.

        A symbol has the following grammar::

            <Symbol> ::= <Arithmetic>
                       | <GlobalVariable>
                       | <Regular>
            <Arithmetic> ::= (+|*|/|-) <whitespace>+
            <GlobalVariable> ::= * (<alnum>|-|_)+ *
            <Regular> ::= <alpha> (<alnum>|-|_|*)*

        An arithmetic operator must be followed by whitespace so that
        signed numbers such as ``+42`` are not split into an operator
        and a number.
        """
        return cls._alt(
            input,
            pos,
            cls._chain_parse_arithmetic,
            cls._chain_parse_global_variable,
            cls._chain_parse_regular)

    @classmethod
    def _chain_parse_arithmetic(cls, input: str,
                                pos: int) -> Tuple['Symbol',
                                                   int]:
        return cls._chain_parse_syntax(_arithmetic_syntax, input, pos)

    @classmethod
    def _chain_parse_global_variable(cls, input: str,
                                     pos: int) -> Tuple['Symbol',
                                                        int]:
        return cls._chain_parse_syntax(_global_variable_syntax, input, pos)

    @classmethod
    def _chain_parse_regular(cls, input: str,
                             pos: int) -> Tuple['Symbol',
                                                int]:
        return cls._chain_parse_syntax(_regular_syntax, input, pos)

    @classmethod
    def _chain_parse_syntax(
            cls,
            syntax: re.Pattern,
            input: str,
            pos: int) -> Tuple['Symbol',
                               int]:
        """
        Parse the ``symbol`` group of `syntax` as a `Symbol`.
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        match = syntax.match(input, pos)
        if match is None:
            raise ParseError(cls, input, begpos)
        pos = cls._lstrip(input, match.end())
        return cls(match.group("symbol")), pos
