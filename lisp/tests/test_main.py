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
Test suite for the command-line interface.
"""
import contextlib
import io
import tempfile
import unittest
from pathlib import Path

import seutil as su

from lisp.__main__ import (
    DUMP_FORMATS,
    build_argument_parser,
    infer_fmt_from_ext,
    main,
)
from lisp.language import (
    Expression,
    ExpressionList,
    Integer,
    Program,
    String,
    Symbol,
)
from lisp.tests import _LISP_EXAMPLES_PATH


class TestMain(unittest.TestCase):
    """
    Test suite for `lisp.__main__`.
    """

    factorial_path = _LISP_EXAMPLES_PATH / "factorial.lisp"
    unbalanced_path = _LISP_EXAMPLES_PATH / "unbalanced.lisp"

    def run_main(self, *argv: str):
        """
        Run the command-line interface and capture its output.
        """
        args = build_argument_parser().parse_args(list(argv))
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main(args)
        return status, stdout.getvalue()

    def test_example(self):
        """
        Verify the parsed structure of the example program.
        """
        tree = Program.parse(self.factorial_path.read_text().strip())
        self.assertEqual(len(tree), 3)
        self.assertEqual(
            tree[0],
            ExpressionList([Symbol("defparameter"),
                            Symbol("*limit*"),
                            Integer(10)]))
        self.assertEqual(tree[1][0], Symbol("defun"))
        self.assertEqual(tree[1][2], ExpressionList([Symbol("n")]))
        self.assertEqual(tree[2][1], String("factorial of *limit*:"))

    def test_pretty(self):
        """
        Verify that a parsed program is printed indented.
        """
        status, output = self.run_main(str(self.factorial_path))
        self.assertEqual(status, 0)
        self.assertTrue(output.startswith("Parsed successfully:\n\n(\n"))
        self.assertIn("\n    defparameter\n    *limit*\n    10\n", output)

    def test_max_depth(self):
        """
        Verify that deep lists can be elided.
        """
        status, output = self.run_main(
            str(self.factorial_path),
            "--max-depth",
            "1")
        self.assertEqual(status, 0)
        self.assertNotIn("defparameter", output)
        self.assertIn("  (...)", output)

    def test_sexp(self):
        """
        Verify that a parsed program can be printed on one line.
        """
        status, output = self.run_main(
            str(self.factorial_path),
            "--format",
            "sexp")
        self.assertEqual(status, 0)
        self.assertTrue(output.startswith("((defparameter *limit* 10) (defun"))
        tree = Program.parse(self.factorial_path.read_text())
        self.assertEqual(Program.parse(output), tree)

    def test_failure(self):
        """
        Verify that a parse error is logged and reported by status.
        """
        with self.assertLogs("lisp.__main__", level="ERROR") as cm:
            status, output = self.run_main(str(self.unbalanced_path))
        self.assertEqual(status, 1)
        self.assertEqual(output, "")
        self.assertIn("Failed to parse Program", cm.output[0])

    def test_output(self):
        """
        Verify that the tree can be dumped to a file.
        """
        with tempfile.TemporaryDirectory() as tmpdir:
            for name, fmt in [("tree.json", su.io.Fmt.json),
                              ("tree.yaml", su.io.Fmt.yaml)]:
                with self.subTest(name=name):
                    path = Path(tmpdir) / name
                    status, _ = self.run_main(
                        str(self.factorial_path),
                        "--output",
                        str(path))
                    self.assertEqual(status, 0)
                    loaded = Expression.deserialize(su.io.load(path, fmt))
                    self.assertEqual(
                        loaded,
                        Program.parse(self.factorial_path.read_text()))

    def test_infer_fmt_from_ext(self):
        """
        Verify formats inferred from file extensions.
        """
        self.assertEqual(infer_fmt_from_ext(Path("a.json")), su.io.Fmt.json)
        self.assertEqual(infer_fmt_from_ext(Path("a.yml")), su.io.Fmt.yaml)
        self.assertEqual(infer_fmt_from_ext(Path("a.yaml")), su.io.Fmt.yaml)
        for fmt in DUMP_FORMATS:
            for ext in fmt.exts:
                with self.subTest(ext=ext):
                    self.assertIs(infer_fmt_from_ext(Path(f"a.{ext}")), fmt)
        with self.assertRaises(ValueError):
            infer_fmt_from_ext(Path("a.pkl"))
        with self.assertRaises(ValueError):
            infer_fmt_from_ext(Path("json"))
        with self.assertRaises(ValueError):
            infer_fmt_from_ext(Path("a.txt"))
        with self.assertRaises(ValueError):
            self.run_main(str(self.factorial_path), "--output", "tree.txt")


if __name__ == '__main__':
    unittest.main()
