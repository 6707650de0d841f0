# -*- coding: utf-8 -*-

import unittest
from decimal import Decimal

from strictjson import parse
from strictjson.values import Array, Boolean, Null, Number, Object, String


class NumberTest(unittest.TestCase):
    def test_integers(self) -> None:
        for lexeme, value in [("0", 0), ("-0", 0), ("42", 42), ("-17", -17)]:
            n = Number(lexeme)
            self.assertTrue(n.is_integer)
            self.assertEqual(n.value, value)
            self.assertIsInstance(n.value, int)

    def test_big_integers_are_exact(self) -> None:
        n = Number("123456789012345678901234567890")
        self.assertEqual(n.value, 123456789012345678901234567890)

    def test_floats(self) -> None:
        for lexeme, value in [("1.5", 1.5), ("1e2", 100.0), ("-2.5E-1", -0.25)]:
            n = Number(lexeme)
            self.assertFalse(n.is_integer)
            self.assertEqual(n.value, value)
            self.assertIsInstance(n.value, float)

    def test_empty_fraction(self) -> None:
        n = Number("1.")
        self.assertFalse(n.is_integer)
        self.assertEqual(n.value, 1.0)

    def test_decimal(self) -> None:
        self.assertEqual(Number("0.1").to_decimal(), Decimal("0.1"))
        self.assertEqual(str(Number("1.10").to_decimal()), "1.10")

    def test_lexeme_equality(self) -> None:
        self.assertNotEqual(Number("1.0"), Number("1"))
        self.assertEqual(Number("1.0"), Number("1.0"))


class ValueTest(unittest.TestCase):
    def test_kinds(self) -> None:
        self.assertEqual(
            [v.kind for v in parse(b'[null, true, 1, "s", [], {}]')],
            ["null", "boolean", "number", "string", "array", "object"],
        )

    def test_equality_by_class(self) -> None:
        self.assertEqual(Null(), Null())
        self.assertNotEqual(Boolean(False), Null())
        self.assertNotEqual(String("1"), Number("1"))
        self.assertNotEqual(Array(), Object())

    def test_immutable(self) -> None:
        s = String("a")
        with self.assertRaises(AttributeError):
            s.value = "b"  # type: ignore

    def test_hashable(self) -> None:
        self.assertEqual(len({Null(), Null(), Boolean(True)}), 2)

    def test_array(self) -> None:
        a = parse(b"[1, [2], 3]")
        self.assertEqual(len(a), 3)
        self.assertEqual(a[1], Array((Number("2"),)))
        self.assertEqual(a[-1], Number("3"))
        self.assertEqual(list(a), list(a.items))
        self.assertEqual(a.to_python(), [1, [2], 3])

    def test_object(self) -> None:
        obj = parse(b'{"b": 1, "a": null, "b": "x"}')
        self.assertEqual(len(obj), 3)
        self.assertEqual(obj.keys(), ["b", "a", "b"])
        self.assertEqual(obj.get("b"), Number("1"))
        self.assertEqual(obj.get("a"), Null())
        self.assertIsNone(obj.get("c"))
        self.assertEqual(obj.get("c", Boolean(False)), Boolean(False))
        self.assertEqual(obj.get_all("b"), [Number("1"), String("x")])
        self.assertEqual(list(obj), list(obj.pairs))

    def test_to_python(self) -> None:
        obj = parse(b'{"a": [true, false, null], "b": {"c": 1.5}}')
        self.assertEqual(
            obj.to_python(),
            [("a", [True, False, None]), ("b", [("c", 1.5)])],
        )


if __name__ == "__main__":
    unittest.main()
