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

"""The value tree produced by the parser.

`Value` is a closed union of six immutable classes. Containers keep their elements in
source order, and `Object` is a sequence of pairs rather than a mapping: duplicate keys
are kept as written.
"""

__all__ = [
    "Value",
    "Null",
    "Boolean",
    "Number",
    "String",
    "Array",
    "Object",
]

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, List, Optional, Text, Tuple, Union


@dataclass(frozen=True)
class Null:
    kind = "null"

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Boolean:
    value: bool
    kind = "boolean"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number:
    """A number literal kept as its source lexeme.

    ```pycon
    >>> Number("-1.5e3").value
    -1500.0
    >>> Number("42").value
    42

    ```
    """

    lexeme: Text
    kind = "number"

    @property
    def is_integer(self) -> bool:
        """Whether the lexeme has neither a fraction nor an exponent."""
        return not any(c in self.lexeme for c in ".eE")

    @property
    def value(self) -> Union[int, float]:
        if self.is_integer:
            return int(self.lexeme)
        return float(self.lexeme)

    def to_decimal(self) -> Decimal:
        return Decimal(self.lexeme)

    def to_python(self) -> Union[int, float]:
        return self.value


@dataclass(frozen=True)
class String:
    value: Text
    kind = "string"

    def to_python(self) -> Text:
        return self.value


@dataclass(frozen=True)
class Array:
    items: Tuple["Value", ...] = ()
    kind = "array"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> List[Any]:
        return [x.to_python() for x in self.items]


@dataclass(frozen=True)
class Object:
    """An ordered sequence of `(key, value)` pairs.

    ```pycon
    >>> obj = Object((("a", Number("1")), ("a", Null())))
    >>> obj.get("a")
    Number(lexeme='1')
    >>> obj.get_all("a")
    [Number(lexeme='1'), Null()]

    ```
    """

    pairs: Tuple[Tuple[Text, "Value"], ...] = ()
    kind = "object"

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple[Text, "Value"]]:
        return iter(self.pairs)

    def keys(self) -> List[Text]:
        return [k for k, _ in self.pairs]

    def get(self, key: Text, default: Optional["Value"] = None) -> Optional["Value"]:
        """Return the value of the first pair with `key`."""
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def get_all(self, key: Text) -> List["Value"]:
        return [v for k, v in self.pairs if k == key]

    def to_python(self) -> List[Tuple[Text, Any]]:
        return [(k, v.to_python()) for k, v in self.pairs]


Value = Union[Null, Boolean, Number, String, Array, Object]
