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
Test suite for parsing whole programs.
"""
import time
import unittest

import numpy as np

from lisp import parse_program
from lisp.language import (
    ExpressionList,
    Float,
    Integer,
    Program,
    String,
    Symbol,
)
from lisp.language.atom import INT64_MAX, INT64_MIN
from lisp.util.parse import ParseError


class TestProgram(unittest.TestCase):
    """
    Test suite for `Program`.
    """

    def test_single_expression_unwraps(self):
        """
        Verify that one top-level expression is returned as is.
        """
        self.assertEqual(Program.parse("symbol"), Symbol("symbol"))
        self.assertEqual(Program.parse("  42\n"), Integer(42))
        self.assertEqual(
            Program.parse("(a)\n"),
            ExpressionList([Symbol("a")]))
        self.assertEqual(Program.parse("()"), ExpressionList())
        self.assertEqual(
            Program.parse(";; header\n(a) ;; trailer"),
            ExpressionList([Symbol("a")]))

    def test_several_expressions_wrap(self):
        """
        Verify that zero or several expressions are wrapped in a list.
        """
        self.assertEqual(
            Program.parse("a b"),
            ExpressionList([Symbol("a"),
                            Symbol("b")]))
        self.assertEqual(
            Program.parse("(a) (b)"),
            ExpressionList(
                [ExpressionList([Symbol("a")]),
                 ExpressionList([Symbol("b")])]))
        self.assertEqual(Program.parse(""), ExpressionList())
        self.assertEqual(Program.parse(" \n\t "), ExpressionList())
        self.assertEqual(Program.parse(";; only a comment"), ExpressionList())
        self.assertEqual(
            Program.parse("#| only |# ;; comments\n"),
            ExpressionList())

    def test_collapse(self):
        """
        Verify the shaping of top-level expressions.
        """
        self.assertEqual(Program.collapse([]), ExpressionList())
        self.assertEqual(Program.collapse([Integer(1)]), Integer(1))
        self.assertEqual(
            Program.collapse([Integer(1),
                              Integer(2)]),
            ExpressionList([Integer(1),
                            Integer(2)]))

    def test_comments_are_invisible(self):
        """
        Verify that comments do not change the parsed tree.
        """
        self.assertEqual(Program.parse("a ;; c\n b"), Program.parse("a b"))
        self.assertEqual(
            Program.parse("(f #| x |# 1 ;; y\n 2)"),
            Program.parse("(f 1 2)"))

    def test_nested(self):
        """
        Verify that a nested program keeps its structure and order.
        """
        self.assertEqual(
            Program.parse("(first (list 1 (+ 2 3) 9))"),
            ExpressionList(
                [
                    Symbol("first"),
                    ExpressionList(
                        [
                            Symbol("list"),
                            Integer(1),
                            ExpressionList(
                                [Symbol("+"),
                                 Integer(2),
                                 Integer(3)]),
                            Integer(9)
                        ])
                ]))

    def test_deep_nesting(self):
        """
        Verify that moderately deep nesting is supported.
        """
        for depth in [50, 300]:
            with self.subTest(depth=depth):
                parsed = Program.parse("(" * depth + "x" + ")" * depth)
                self.assertEqual(parsed.height, depth)
                self.assertEqual(parsed.num_leaves, 1)

    def test_large_flat_list(self):
        """
        Verify that parse time grows linearly with the input size.
        """

        def parse_time(n: int) -> float:
            source = "(" + " ".join(f"sym{i}" for i in range(n)) + ")"
            best = np.inf
            for _ in range(3):
                start = time.perf_counter()
                parsed = Program.parse(source)
                best = min(best, time.perf_counter() - start)
            self.assertEqual(len(parsed), n)
            return best

        small = parse_time(4000)
        large = parse_time(32000)
        # eight times the input; quadratic growth would take ~64 times
        self.assertLess(large, 24 * small)

    def test_numbers(self):
        """
        Verify integers, floats, and the sign of numbers.
        """
        for value in [0, 1, -1, 1234567890, INT64_MAX, INT64_MIN]:
            with self.subTest(value=value):
                self.assertEqual(Program.parse(str(value)), Integer(value))
        for whole in [0, 5, 42, -42]:
            with self.subTest(whole=whole):
                self.assertEqual(
                    Program.parse(f"{whole}."),
                    Float(float(whole)))
        self.assertEqual(Program.parse("42.5"), Float(42.5))
        self.assertEqual(Program.parse("+42"), Integer(42))
        self.assertEqual(
            Program.parse("+ 42"),
            ExpressionList([Symbol("+"),
                            Integer(42)]))
        with self.assertRaises(ParseError):
            Program.parse(str(INT64_MAX + 1))

    def test_strings(self):
        """
        Verify that string literals are re-emitted unchanged.
        """
        self.assertEqual(Program.parse('""'), String(""))
        for literal in ['""',
                        '"hello world"',
                        r'"say \"hi\""',
                        '"(not a list)"',
                        '";; not a comment"']:
            with self.subTest(literal=literal):
                self.assertEqual(str(Program.parse(literal)), literal)

    def test_round_trip(self):
        """
        Verify that printed trees parse back to equal trees.
        """
        for source in ["(first (list 1 (+ 2 3) 9))",
                       '(defvar *x* "value" -0.5 1e)',
                       "(() (()) 7.)",
                       "a b c"]:
            with self.subTest(source=source):
                tree = Program.parse(source)
                self.assertEqual(Program.parse(str(tree)), tree)

    def test_reject(self):
        """
        Verify that a program is parsed completely or not at all.
        """
        for input, remainder in [("(a b", "(a b"),
                                 ("a )", ")"),
                                 ("a b (c", "(c"),
                                 ("(a) ; single", "; single"),
                                 ("42.5.1", ".1"),
                                 ('"unterminated', '"unterminated'),
                                 ("#| unterminated", "#| unterminated"),
                                 ("+", "+")]:
            with self.subTest(input=input):
                with self.assertRaises(ParseError) as cm:
                    Program.parse(input)
                self.assertIs(cm.exception.tp, Program)
                self.assertEqual(cm.exception.parsed, remainder)

    def test_reject_keeps_cause(self):
        """
        Verify that a failed program reports the inner failure.
        """
        with self.assertRaises(ParseError) as cm:
            Program.parse("(a b")
        cause = cm.exception.__cause__
        self.assertIsInstance(cause, ParseError)
        self.assertIsInstance(cause.__cause__, ParseError)
        self.assertIs(cause.__cause__.tp, ExpressionList)

    def test_not_exhaustive(self):
        """
        Verify that the final position is returned on request.
        """
        self.assertEqual(
            Program.parse("a b  ",
                          exhaustive=False),
            (ExpressionList([Symbol("a"),
                             Symbol("b")]),
             5))

    def test_parse_program(self):
        """
        Verify the package-level entry point.
        """
        self.assertEqual(parse_program("symbol"), Symbol("symbol"))
        self.assertEqual(
            parse_program("a b"),
            ExpressionList([Symbol("a"),
                            Symbol("b")]))
        with self.assertRaises(ParseError):
            parse_program("(a b")


if __name__ == '__main__':
    unittest.main()
