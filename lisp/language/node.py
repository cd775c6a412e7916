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
Defines the abstract node of a parsed expression tree.
"""
import abc
import logging
from typing import (
    TYPE_CHECKING,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

import numpy as np

from lisp.language.exception import IllegalExpressionOperationException
from lisp.util.logging import log_and_raise
from lisp.util.parse import Parseable, ParseError

if TYPE_CHECKING:
    from lisp.language.atom.base import Atom

logger = logging.getLogger(__name__)

PythonDS = Union[None, int, float, str, list]
"""
The shape of an expression converted to Python lists and scalars.
"""


class Expression(Parseable, abc.ABC):
    """
    Abstract class of a node in a parsed expression tree.

    An expression is either an `Atom` leaf or an `ExpressionList` of
    child expressions.
    Nodes are immutable once constructed.
    """

    def __getitem__(self, index: int) -> 'Expression':
        """
        Get the `index`-th child of this node.

        Parameters
        ----------
        index : int
            The index of the requested child.

        Returns
        -------
        Expression
            The requested child node.

        Raises
        ------
        IllegalExpressionOperationException
            If the index is out of bounds or the node has no children.
        """
        children = self.get_children()
        if children is None:
            raise IllegalExpressionOperationException(
                "Cannot get the children of an atom.")
        elif isinstance(index, int):
            if index < -len(children) or index >= len(children):
                raise IllegalExpressionOperationException(
                    f"Cannot get child ({index}), "
                    f"this list only has {len(children)} children.")
            # end if
        # end if

        return children[index]

    def __len__(self) -> int:
        """
        Get the number of immediate children.

        Returns
        -------
        int
            The number of immediate children of this node.
        """
        children = self.get_children()
        if children is None:
            return 0
        else:
            return len(children)

    @abc.abstractmethod
    def __iter__(self) -> Iterator['Expression']:  # noqa: D105
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """
        Get a representation of this subtree as source text.

        The text parses back to an equal tree.
        """
        ...

    @property
    def content(self) -> Union[int, float, str]:
        """
        Get the value of this atom, or throw exception.

        Raises
        ------
        IllegalExpressionOperationException
            If the node is not an atom with a value.
        """
        content = self.get_content()
        if content is None:
            raise IllegalExpressionOperationException(
                "Cannot get the content of a list or comment.")
        else:
            return content
        # end if

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """
        Get the height of the tree rooted at this node.

        Atoms have height zero.
        """
        ...

    @property
    @abc.abstractmethod
    def num_nodes(self) -> int:
        """
        Get the number of nodes in this node's subtree.
        """
        ...

    @property
    @abc.abstractmethod
    def num_leaves(self) -> int:
        """
        Get the number of leaves (atoms) in this node's subtree.
        """
        ...

    @abc.abstractmethod
    def contains_atom(self, atom: 'Atom') -> bool:
        """
        Return whether an atom equal to `atom` is in this subtree.
        """
        ...

    def flatten(self) -> List['Expression']:
        """
        Flatten the expression tree according to a preorder traversal.

        Returns
        -------
        list of Expression
            The nodes contained in this tree in preorder (each node
            appears before any children).
        """
        node_list = [self]
        for c in self.get_children() or ():
            node_list.extend(c.flatten())
        return node_list

    def get_children(self) -> Optional[Tuple['Expression', ...]]:
        """
        Get the children of this (list) node.

        Returns
        -------
        tuple of Expression or None
            This node's children if this is a list node, otherwise None.
        """
        return None

    def get_content(self) -> Optional[Union[int, float, str]]:
        """
        Get the value of this (atom) node.

        Returns
        -------
        int or float or str or None
            The node's value if this is an atom with a value, otherwise
            None.
        """
        return None

    def is_atom(self) -> bool:
        """
        Check if this node is an atom.
        """
        return False

    def is_list(self) -> bool:
        """
        Check if this node is a list.
        """
        return False

    def is_null(self) -> bool:
        """
        Check if this node is the discarded result of a comment.
        """
        return False

    @abc.abstractmethod
    def pretty_format(self, max_depth: float = np.inf, depth: int = 0) -> str:
        """
        Format this expression as indented, human-readable text.

        Each list is shown with its children one level deeper than the
        list itself; each atom is shown via its text form.

        Parameters
        ----------
        max_depth : float, optional
            The maximum number of list levels to expand, by default
            unlimited.
            Lists below this depth are elided.
        depth : int, optional
            The indentation level of this node, by default zero.

        Returns
        -------
        str
            The formatted expression.
        """
        ...

    @abc.abstractmethod
    def to_python_ds(self) -> PythonDS:
        """
        Convert this expression to Python lists and scalars.

        Integers and floats map to themselves, symbols to their names,
        string literals to their quoted source text, and lists to lists.
        """
        ...

    def serialize(self) -> PythonDS:
        """
        Convert this node's subtree to serializable Python data.

        See Also
        --------
        Expression.to_python_ds
        """
        return self.to_python_ds()

    @classmethod
    def deserialize(cls, data: PythonDS) -> 'Expression':
        """
        Rebuild an expression from the output of `serialize`.
        """
        return cls.from_python_ds(data)

    @classmethod
    def from_python_ds(cls, python_ds: PythonDS) -> 'Expression':
        """
        Convert Python lists and scalars to an `Expression`.

        Parameters
        ----------
        python_ds : PythonDS
            An expression represented as in `to_python_ds`.

        Returns
        -------
        Expression
            The equivalent expression tree.

        Raises
        ------
        TypeError
            If `python_ds` contains a value with no expression
            counterpart.

        See Also
        --------
        Expression.to_python_ds : For the inverse operation.
        """
        # avoid circular imports
        from lisp.language.atom import Float, Integer, Null, String, Symbol
        from lisp.language.list import ExpressionList
        if python_ds is None:
            return Null()
        elif isinstance(python_ds, bool):
            log_and_raise(
                logger,
                f"Cannot convert Boolean {python_ds} to an expression",
                TypeError)
        elif isinstance(python_ds, int):
            return Integer(python_ds)
        elif isinstance(python_ds, float):
            return Float(python_ds)
        elif isinstance(python_ds, str):
            if (len(python_ds) >= 2 and python_ds.startswith('"')
                    and python_ds.endswith('"')):
                return String(python_ds[1 :-1])
            else:
                return Symbol(python_ds)
        elif isinstance(python_ds, (list, tuple)):
            return ExpressionList(
                [cls.from_python_ds(child) for child in python_ds])
        log_and_raise(
            logger,
            f"Cannot convert {type(python_ds).__name__} to an expression",
            TypeError)

    @classmethod
    def _chain_parse(cls, input: str, pos: int) -> Tuple['Expression', int]:
        """
        Parse a single atom or a parenthesized list.

        An expression has the following grammar::

            <Expression> ::= <Atom>
                           | <List>

        The result may be a `Null` atom if a comment was parsed.
        """
        # avoid circular imports
        from lisp.language.atom import Atom
        from lisp.language.list import ExpressionList
        try:
            return Atom._chain_parse(input, pos)
        except ParseError:
            pass
        # each nesting level adds two stack frames
        try:
            return ExpressionList._chain_parse(input, pos)
        except ParseError as e:
            raise ParseError(Expression, input, pos) from e

    @classmethod
    def _chain_parse_sequence(
            cls,
            input: str,
            pos: int) -> Tuple[List['Expression'],
                               int,
                               Optional[ParseError]]:
        """
        Parse as many consecutive expressions as possible.

        Comments are discarded.

        Returns
        -------
        list of Expression
            The parsed expressions in source order.
        int
            The position after the last parsed expression.
        Optional[ParseError]
            The failure that ended the sequence, if any.
        """
        expressions, pos, error = cls._many(
            input,
            pos,
            Expression._chain_parse)
        expressions = [e for e in expressions if not e.is_null()]
        return expressions, pos, error
