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
Defines parenthesized lists of expressions.
"""
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Sequence, Tuple

import numpy as np

from lisp.util.parse import ParseError

from .atom import Atom
from .node import Expression


@dataclass(frozen=True)
class ExpressionList(Expression):
    """
    An ordered, possibly empty sequence of child expressions.
    """

    children: Sequence[Expression] = ()
    lpar: ClassVar[str] = "("
    rpar: ClassVar[str] = ")"
    pprint_newline: ClassVar[str] = "\n"
    pprint_tab: ClassVar[str] = "  "
    pprint_ellipsis: ClassVar[str] = "(...)"

    def __post_init__(self) -> None:
        """
        Store the children as a tuple.
        """
        object.__setattr__(self, "children", tuple(self.children))

    def __iter__(self) -> Iterator[Expression]:  # noqa: D105
        return iter(self.children)

    def __str__(self) -> str:  # noqa: D105
        return self.lpar + " ".join(str(c) for c in self.children) + self.rpar

    @property
    def height(self) -> int:  # noqa: D102
        return max([c.height for c in self.children] + [0]) + 1

    @property
    def num_nodes(self) -> int:  # noqa: D102
        return sum([c.num_nodes for c in self.children]) + 1

    @property
    def num_leaves(self) -> int:  # noqa: D102
        return sum([c.num_leaves for c in self.children])

    def contains_atom(self, atom: Atom) -> bool:  # noqa: D102
        for c in self.children:
            if c.contains_atom(atom):
                return True
            # end if
        # end for
        return False

    def get_children(self) -> Tuple[Expression, ...]:  # noqa: D102
        return self.children

    def is_list(self) -> bool:  # noqa: D102
        return True

    def pretty_format(  # noqa: D102
            self,
            max_depth: float = np.inf,
            depth: int = 0) -> str:
        indent = depth * self.pprint_tab
        if not self.children:
            return indent + self.lpar + self.rpar
        elif max_depth <= 0:
            return indent + self.pprint_ellipsis
        lines = [indent + self.lpar]
        lines.extend(
            c.pretty_format(max_depth - 1,
                            depth + 1) for c in self.children)
        lines.append(indent + self.rpar)
        return self.pprint_newline.join(lines)

    def to_python_ds(self) -> list:  # noqa: D102
        return [child.to_python_ds() for child in self.children]

    @classmethod
    def _chain_parse(cls,
                     input: str,
                     pos: int) -> Tuple['ExpressionList',
                                        int]:
        """
        Parse a parenthesized list of expressions.

        A list has the following grammar::

            <List> ::= ( <Expression>* )

        Comments inside the list are discarded.
        The list fails as a whole if the expressions are not followed
        by a closing parenthesis.
        """
        begpos = pos
        pos = cls._lstrip(input, pos)
        pos = cls._expect(input, pos, cls.lpar, begpos)
        children: List[Expression] = []
        while True:
            try:
                child, pos = Expression._chain_parse(input, pos)
            except ParseError as e:
                error = e
                break
            if not child.is_null():
                children.append(child)
        pos = cls._lstrip(input, pos)
        try:
            pos = cls._expect(input, pos, cls.rpar, begpos)
        except ParseError as e:
            raise e from error
        pos = cls._lstrip(input, pos)
        return cls(children), pos
