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
Defines the top-level parser of whole programs.
"""
import logging
from typing import Sequence, Tuple

from lisp.util.parse import Parseable, ParseError

from .list import ExpressionList
from .node import Expression


class Program(Parseable):
    """
    Namespace for methods that parse whole programs.

    A program is a sequence of zero or more top-level expressions that
    must span the entire input, save for surrounding whitespace.
    Parsing a program is all or nothing: any unconsumed text fails the
    parse.

    Examples
    --------
    >>> Program.parse("(+ 1 2)")
    ExpressionList(children=(Symbol(value='+'), Integer(value=1), Integer(value=2)))
    >>> Program.parse("a b")
    ExpressionList(children=(Symbol(value='a'), Symbol(value='b')))
    """

    logger = logging.getLogger(__name__)

    @classmethod
    def collapse(cls, expressions: Sequence[Expression]) -> Expression:
        """
        Shape the top-level expressions into a single tree.

        Exactly one expression is returned as is.
        Zero or several expressions are wrapped in an `ExpressionList`
        in source order, so an empty program is an empty list.
        """
        if len(expressions) == 1:
            return expressions[0]
        else:
            return ExpressionList(expressions)

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple[Expression, int]:
        """
        Parse every top-level expression in `input` from `pos`.

        A program has the following grammar::

            <Program> ::= <Expression>* <whitespace>* <EOF>

        Returns
        -------
        Expression
            The collapsed top-level expressions.
        int
            The length of `input`.

        Raises
        ------
        ParseError
            If text other than whitespace remains after the last
            top-level expression.
        """
        expressions, pos, error = Expression._chain_parse_sequence(input, pos)
        pos = cls._lstrip(input, pos)
        if pos < len(input):
            cls.logger.debug(
                f"Failed to parse program at character {pos} "
                f"after {len(expressions)} top-level expressions")
            raise ParseError(cls, input, pos) from error
        cls.logger.debug(f"Parsed {len(expressions)} top-level expressions")
        return cls.collapse(expressions), pos
