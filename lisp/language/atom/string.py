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
Defines double-quoted string literal atoms.
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple

from lisp.util.parse import ParseError

from .base import Atom


@dataclass(frozen=True)
class String(Atom):
    r"""
    A double-quoted string literal.

    The value is the text between the quotes.
    An escaped quote (``\"``) does not end the literal and is kept in
    the value as is; no other escape sequence is interpreted.
    """

    value: str
    c_quote: ClassVar[str] = '"'
    escaped_quote: ClassVar[str] = '\\"'

    def __str__(self) -> str:  # noqa: D105
        return self.c_quote + self.value + self.c_quote

    def to_python_ds(self) -> str:
        """
        Return the literal including its surrounding quotes.
        """
        return str(self)

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['String', int]:
        r"""
        Parse a string literal.

        A string has the following grammar::

            <String> ::= " ( \" | <any character but "> )* "
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        pos = cls._expect(input, pos, cls.c_quote, begpos)
        start = pos
        while True:
            if pos >= len(input):
                # unterminated
                raise ParseError(cls, input, begpos)
            elif input.startswith(cls.escaped_quote, pos):
                pos += len(cls.escaped_quote)
            elif input[pos] == cls.c_quote:
                break
            else:
                pos += 1
        value = input[start : pos]
        pos = cls._lstrip(input, pos + len(cls.c_quote))
        return cls(value), pos
