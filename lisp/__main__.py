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
Parse a Lisp source file and print its expression tree.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import seutil as su

from lisp.language import Expression, Program
from lisp.util.debug import Debug
from lisp.util.logging import default_log_level
from lisp.util.parse import ParseError

logger = logging.getLogger(__name__)

DUMP_FORMATS = (su.io.Fmt.json, su.io.Fmt.yaml)
"""
The `seutil` formats to which a serialized tree may be dumped.
"""


def infer_fmt_from_ext(path: Path) -> su.io.Fmt:
    """
    Infer the `seutil` format in which to dump a tree to `path`.

    The extensions of each format are those `seutil` declares.

    Raises
    ------
    ValueError
        If the extension of `path` is not a supported format.
    """
    extension = path.suffix
    if extension.startswith("."):
        extension = extension[1 :]

    for fmt in DUMP_FORMATS:
        if fmt.exts is not None and extension in fmt.exts:
            return fmt

    raise ValueError(f"Filepath ({path}) has unknown extension ({extension})")


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Build the command-line interface.
    """
    parser = argparse.ArgumentParser(prog="lisp-parse", description=__doc__)
    parser.add_argument("path", type=Path, help="A Lisp source file")
    parser.add_argument(
        "--format",
        choices=["pretty",
                 "sexp"],
        default="pretty",
        help="Print the tree indented (pretty) or on one line (sexp)")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Elide lists nested deeper than this in pretty output")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also dump the serialized tree to a .json, .yml, or .yaml file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging")
    return parser


def main(args: argparse.Namespace) -> int:
    """
    Parse the file named by `args` and print the resulting tree.

    Parameters
    ----------
    args : argparse.Namespace
        Arguments as produced by `build_argument_parser`.

    Returns
    -------
    int
        The process exit status: zero if the program parsed, one if
        not.
    """
    if args.debug:
        Debug.is_debug = True
    logging.basicConfig(level=default_log_level())
    fmt = None
    if args.output is not None:
        fmt = infer_fmt_from_ext(args.output)
    source = args.path.read_text().strip()
    try:
        tree: Expression = Program.parse(source)
    except ParseError as e:
        logger.error(f"Error parsing {args.path}: {e}")
        return 1
    if args.format == "sexp":
        print(tree)
    else:
        max_depth = np.inf if args.max_depth is None else args.max_depth
        print(f"Parsed successfully:\n\n{tree.pretty_format(max_depth)}")
    if args.output is not None:
        su.io.dump(args.output, tree.serialize(), fmt=fmt)
        logger.info(f"Dumped tree to {args.output}")
    return 0


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Run the command-line interface and exit.
    """
    sys.exit(main(build_argument_parser().parse_args(argv)))


if __name__ == "__main__":
    cli()
