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
Defines comments, which parse to a payload-free `Null` atom.
"""
from dataclasses import dataclass
from typing import ClassVar, Tuple

from lisp.util.parse import ParseError

from .base import Atom


@dataclass(frozen=True)
class Null(Atom):
    """
    The result of parsing and discarding a comment.

    Two forms of comment are recognized: ``;;`` through the end of the
    line and ``#| ... |#``, which ends at the first ``|#`` (i.e., block
    comments do not nest).
    `Null` atoms are dropped whenever a sequence of expressions is
    collected, so they never appear in a finished tree.
    """

    line_comment_start: ClassVar[str] = ";;"
    block_comment_start: ClassVar[str] = "#|"
    block_comment_end: ClassVar[str] = "|#"

    def __str__(self) -> str:  # noqa: D105
        return ""

    def is_null(self) -> bool:  # noqa: D102
        return True

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Null', int]:
        """
        Parse a comment.

        A comment has the following grammar::

            <Comment> ::= <BlockComment>
                        | <LineComment>
        """
        return cls._alt(
            input,
            pos,
            cls._chain_parse_block_comment,
            cls._chain_parse_line_comment)

    @classmethod
    def _chain_parse_block_comment(cls, input: str,
                                   pos: int) -> Tuple['Null',
                                                      int]:
        """
        Parse a comment enclosed by ``#|`` and the next ``|#``.
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        pos = cls._expect(input, pos, cls.block_comment_start, begpos)
        end = input.find(cls.block_comment_end, pos)
        if end < 0:
            raise ParseError(cls, input, begpos)
        pos = cls._lstrip(input, end + len(cls.block_comment_end))
        return cls(), pos

    @classmethod
    def _chain_parse_line_comment(cls, input: str,
                                  pos: int) -> Tuple['Null',
                                                     int]:
        """
        Parse a comment from ``;;`` to the end of the line.
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        pos = cls._expect(input, pos, cls.line_comment_start, begpos)
        while pos < len(input) and input[pos] not in "\r\n":
            pos += 1
        pos = cls._lstrip(input, pos)
        return cls(), pos
