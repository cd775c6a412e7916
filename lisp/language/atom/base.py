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
Defines the abstract atom and the dispatch among atom recognizers.
"""
import abc
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from lisp.language.exception import IllegalExpressionOperationException
from lisp.language.node import Expression


@dataclass(frozen=True)
class Atom(Expression, abc.ABC):
    """
    A leaf of an expression tree.

    Concrete atoms implement `_chain_parse` as their recognizer.
    Parsing `Atom` itself dispatches among the concrete recognizers.
    """

    pprint_tab = "  "

    def __iter__(self) -> Iterator[Expression]:  # noqa: D105
        raise IllegalExpressionOperationException(
            "Cannot iterate over children of an atom")

    @property
    def height(self) -> int:  # noqa: D102
        return 0

    @property
    def num_nodes(self) -> int:  # noqa: D102
        return 1

    @property
    def num_leaves(self) -> int:  # noqa: D102
        return 1

    def contains_atom(self, atom: 'Atom') -> bool:  # noqa: D102
        return self == atom

    def get_content(self) -> Optional[Union[int, float, str]]:  # noqa: D102
        return getattr(self, "value", None)

    def is_atom(self) -> bool:  # noqa: D102
        return True

    def pretty_format(  # noqa: D102
            self,
            max_depth: float = np.inf,
            depth: int = 0) -> str:
        return depth * self.pprint_tab + str(self)

    def to_python_ds(self) -> Union[None, int, float, str]:  # noqa: D102
        return self.get_content()

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Atom', int]:
        """
        Parse the first atom that any recognizer accepts.

        Recognizers are tried in the following order::

            <Atom> ::= <Comment>
                     | <Float>
                     | <Integer>
                     | <String>
                     | <Symbol>

        Floats must be tried before integers, otherwise ``42.5`` would
        be read as ``42`` followed by unparseable ``.5``.
        """
        # avoid circular imports
        from lisp.language.atom import DISPATCH_ORDER
        return Atom._alt(input, pos, *DISPATCH_ORDER)
