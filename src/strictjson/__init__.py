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

"""A strict JSON parser producing an immutable value tree.

```pycon
>>> from strictjson import parse
>>> doc = parse(b'{"name": "strictjson", "tags": ["json", "peg"]}')
>>> doc.get("tags").to_python()
['json', 'peg']

```
"""

from strictjson.decoder import DEFAULT_MAX_DEPTH, Options, loads, parse
from strictjson.errors import (
    EmptyInput,
    InvalidEncoding,
    InvalidEscapeSequence,
    InvalidNumberFormat,
    InvalidUnicodeEscape,
    NestingTooDeep,
    ParseError,
    TrailingContent,
    UnexpectedToken,
    UnterminatedString,
)
from strictjson.values import Array, Boolean, Null, Number, Object, String, Value

__all__ = [
    "parse",
    "loads",
    "Options",
    "DEFAULT_MAX_DEPTH",
    "Value",
    "Null",
    "Boolean",
    "Number",
    "String",
    "Array",
    "Object",
    "ParseError",
    "UnexpectedToken",
    "UnterminatedString",
    "InvalidEscapeSequence",
    "InvalidUnicodeEscape",
    "InvalidNumberFormat",
    "TrailingContent",
    "NestingTooDeep",
    "EmptyInput",
    "InvalidEncoding",
]
