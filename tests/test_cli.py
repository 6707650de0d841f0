# -*- coding: utf-8 -*-

import logging
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from typing import List, Tuple

from strictjson.cli import format_tree, main
from strictjson.decoder import parse


class CliTest(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def run_main(self, data: bytes, args: List[str]) -> Tuple[int, str, str]:
        path = os.path.join(self.tmpdir.name, "input.json")
        with open(path, "wb") as fd:
            fd.write(data)
        out, err = StringIO(), StringIO()
        code = 0
        with redirect_stdout(out), redirect_stderr(err):
            try:
                main(args + [path])
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def test_tree(self) -> None:
        code, out, err = self.run_main(b'{"a": [1, true], "b": null}', [])
        self.assertEqual(code, 0)
        self.assertEqual(
            out,
            "object\n"
            "|-- 'a': array\n"
            "|   |-- 1\n"
            "|   `-- true\n"
            "`-- 'b': null\n",
        )
        self.assertEqual(err, "")

    def test_python(self) -> None:
        code, out, _ = self.run_main(b'[1.5, "x", false]', ["--python"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "[1.5, 'x', False]\n")

    def test_syntax_error(self) -> None:
        code, out, err = self.run_main(b"[1,\n 2,]", [])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertEqual(
            err, "syntax error: 2,4: got unexpected character: ']', expected: value\n"
        )

    def test_strict_numbers(self) -> None:
        code, _, _ = self.run_main(b"[1.]", [])
        self.assertEqual(code, 0)
        code, _, err = self.run_main(b"[1.]", ["--strict-numbers"])
        self.assertEqual(code, 1)
        self.assertIn("expected a digit after '.'", err)

    def test_replace_surrogates(self) -> None:
        data = b'["\\ud800"]'
        code, _, err = self.run_main(data, [])
        self.assertEqual(code, 1)
        self.assertIn("unpaired surrogate", err)
        code, out, _ = self.run_main(data, ["--python", "--replace-surrogates"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "[%r]\n" % chr(0xFFFD))

    def test_max_depth(self) -> None:
        code, _, err = self.run_main(b"[[[]]]", ["--max-depth", "2"])
        self.assertEqual(code, 1)
        self.assertIn("1,3: nesting is deeper than the limit of 2 levels", err)

    def test_max_depth_beyond_the_stack(self) -> None:
        code, _, err = self.run_main(b"[" * 5000, ["--max-depth", "10000"])
        self.assertEqual(code, 1)
        self.assertIn("nesting is deeper than the limit of", err)

    def test_invalid_max_depth(self) -> None:
        code, _, err = self.run_main(b"[]", ["--max-depth", "0"])
        self.assertEqual(code, 2)
        self.assertIn("max_depth must be at least 1", err)

    def test_trace(self) -> None:
        root = logging.getLogger()
        self.addCleanup(setattr, root, "handlers", root.handlers[:])
        self.addCleanup(root.setLevel, root.level)
        with self.assertLogs("strictjson", level=logging.DEBUG) as logs:
            code, _, _ = self.run_main(b"[true]", ["--trace"])
        self.assertEqual(code, 0)
        self.assertIn("DEBUG:strictjson:> array at 0", logs.output)
        self.assertIn("DEBUG:strictjson:< value matched 1..5", logs.output)


class FormatTreeTest(unittest.TestCase):
    def test_scalars(self) -> None:
        self.assertEqual(
            format_tree(parse(b'[-1.50, "a\\"b", false]')),
            "array\n"
            "|-- -1.50\n"
            "|-- 'a\"b'\n"
            "`-- false",
        )

    def test_empty(self) -> None:
        self.assertEqual(format_tree(parse(b"{}")), "object")


if __name__ == "__main__":
    unittest.main()
