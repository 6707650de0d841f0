# -*- coding: utf-8 -*-

# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Command-line interface: parse JSON text and print its value tree.

Usage:

    $ echo '{"a": [1, true]}' | python -m strictjson
    object
    `-- 'a': array
        |-- 1
        `-- true
"""

import argparse
import logging
import sys
from pprint import pformat
from typing import List, Optional, Sequence, Text, Tuple

from strictjson.decoder import DEFAULT_MAX_DEPTH, parse
from strictjson.errors import ParseError
from strictjson.util import pretty_tree
from strictjson.values import Array, Object, String, Value

_Node = Tuple[Text, Value]


def format_tree(tree: Value) -> Text:
    """Return a pseudo-graphic representation of the value tree.

    ```pycon
    >>> from strictjson import parse
    >>> print(format_tree(parse('[null, {"k": "v"}]')))
    array
    |-- null
    `-- object
        `-- 'k': 'v'

    ```
    """

    def kids(node: _Node) -> Sequence[_Node]:
        _, value = node
        if isinstance(value, Array):
            return [("", x) for x in value]
        elif isinstance(value, Object):
            return [(repr(k), v) for k, v in value]
        return []

    def show(node: _Node) -> Text:
        label, value = node
        if isinstance(value, (Array, Object)):
            s = value.kind
        elif isinstance(value, String):
            s = repr(value.value)
        elif value.kind == "number":
            s = value.lexeme
        else:
            s = value.kind if value.kind == "null" else str(value.value).lower()
        return "%s: %s" % (label, s) if label else s

    return pretty_tree(("", tree), kids, show)


def _arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="strictjson", description="Parse strict JSON text and print its tree."
    )
    p.add_argument(
        "file",
        nargs="?",
        default="-",
        type=argparse.FileType("rb"),
        help="JSON file to parse, stdin by default",
    )
    p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
    p.add_argument(
        "--strict-numbers",
        action="store_true",
        help="reject numbers with an empty fraction like 1.",
    )
    p.add_argument(
        "--replace-surrogates",
        action="store_true",
        help="decode unpaired surrogate escapes as U+FFFD instead of failing",
    )
    p.add_argument(
        "--python", action="store_true", help="print the tree as Python data"
    )
    p.add_argument(
        "--trace", action="store_true", help="log grammar rules to stderr"
    )
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = _arg_parser().parse_args(argv)
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    with args.file as fd:
        data = fd.read()
    try:
        tree = parse(
            data,
            max_depth=args.max_depth,
            allow_empty_fraction=not args.strict_numbers,
            lone_surrogates="replace" if args.replace_surrogates else "error",
            trace=args.trace,
        )
    except ParseError as e:
        print("syntax error: %s" % e.format(data), file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print("error: %s" % e, file=sys.stderr)
        sys.exit(2)
    if args.python:
        print(pformat(tree.to_python()))
    else:
        print(format_tree(tree))
