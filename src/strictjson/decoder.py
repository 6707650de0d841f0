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

"""The JSON grammar and the `parse()` entry point.

The grammar in EBNF, with `~` marking the point after which a rule is committed and
cannot fall back to another alternative:

    json_text = (object | array), ? end of input ? ;
    value     = object | array | string | number | boolean | null ;
    object    = "{", ~, ("}" | pair, { ",", ~, pair }, "}") ;
    array     = "[", ~, ("]" | value, { ",", ~, value }, "]") ;
    pair      = string, ~, ":", value ;
    boolean   = "true" | "false" ;

Whitespace is allowed before and after every token of the grammar, but not inside
string and number literals.
"""

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Options",
    "parse",
    "loads",
    "make_grammar",
]

import logging
from functools import lru_cache, partial
from typing import Any, List, NamedTuple, Optional, Text, Tuple, Union

from strictjson.errors import EmptyInput, InvalidEncoding, ParseError
from strictjson.lexer import WHITESPACE, scan_keyword, scan_number, scan_string
from strictjson.parser import (
    Parser,
    char,
    commit,
    finished,
    forward_decl,
    lexeme,
    many,
    nested,
    traced,
)
from strictjson.util import byte_offset
from strictjson.values import Array, Boolean, Null, Number, Object, String, Value

log = logging.getLogger("strictjson")

# Each nesting level costs about 16 Python frames in the recursive descent
DEFAULT_MAX_DEPTH = 32

_SURROGATE_POLICIES = ("error", "replace")


class Options(NamedTuple):
    """Parser options.

    * `max_depth`: the maximum nesting depth of objects and arrays, the root
      container being at depth 1
    * `allow_empty_fraction`: accept numbers like `1.` with no digits after the dot
    * `lone_surrogates`: `"error"` to reject an unpaired `\\uD800`-`\\uDFFF` escape,
      `"replace"` to decode it as U+FFFD
    * `trace`: log entering and leaving grammar rules at the debug level
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_empty_fraction: bool = True
    lone_surrogates: Text = "error"
    trace: bool = False

    def validate(self) -> "Options":
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError("max_depth must be an int, got %r" % (self.max_depth,))
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1, got %d" % self.max_depth)
        if self.lone_surrogates not in _SURROGATE_POLICIES:
            raise ValueError(
                "lone_surrogates must be one of %s, got %r"
                % (", ".join(_SURROGATE_POLICIES), self.lone_surrogates)
            )
        return self


def _keyword(word: Text, value: Value) -> Parser:
    def scan(text: Text, pos: int) -> Optional[Tuple[Value, int]]:
        end = scan_keyword(text, pos, word)
        return None if end is None else (value, end)

    return lexeme(scan, "'%s'" % word)


def _make_object(values: Tuple[Tuple[Text, Value], List[Tuple[Text, Value]]]) -> Object:
    first, rest = values
    return Object((first,) + tuple(rest))


def _make_array(values: Tuple[Value, List[Value]]) -> Array:
    first, rest = values
    return Array((first,) + tuple(rest))


@lru_cache(maxsize=None)
def make_grammar(options: Options) -> Parser:
    """Build the parser of JSON text for `options`.

    The result holds no mutable state and can be shared between threads.
    """

    def rule(p: Parser, name: Text) -> Parser:
        p = p.named(name)
        return traced(p) if options.trace else p

    value = forward_decl()

    key = lexeme(
        partial(scan_string, lone_surrogates=options.lone_surrogates), "string"
    )
    string = key >> String
    number = lexeme(
        partial(scan_number, allow_empty_fraction=options.allow_empty_fraction),
        "number",
    ) >> Number
    boolean = _keyword("true", Boolean(True)) | _keyword("false", Boolean(False))
    null = _keyword("null", Null())

    pair = rule(key + commit(-char(":") + value) >> tuple, "pair")
    json_object = rule(
        -char("{")
        + nested(
            commit(
                char("}") >> (lambda _: Object())
                | pair + many(-char(",") + commit(pair)) + -char("}") >> _make_object
            ),
            options.max_depth,
        ),
        "object",
    )
    json_array = rule(
        -char("[")
        + nested(
            commit(
                char("]") >> (lambda _: Array())
                | value + many(-char(",") + commit(value)) + -char("]") >> _make_array
            ),
            options.max_depth,
        ),
        "array",
    )
    value.define(
        rule(
            json_object | json_array | string | number | boolean | null,
            "value",
        )
    )
    return (json_object | json_array) + -finished


def _decode(data: Union[bytes, Text]) -> Text:
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(e.start) from None
    elif isinstance(data, str):
        try:
            data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidEncoding(byte_offset(data, e.start)) from None
        return data
    raise TypeError("expected bytes or str, got %s" % type(data).__name__)


def parse(
    data: Union[bytes, Text],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_empty_fraction: bool = True,
    lone_surrogates: Text = "error",
    trace: bool = False
) -> Value:
    """Parse JSON text into a value tree rooted at an `Object` or an `Array`.

    `data` is UTF-8 encoded bytes or an already decoded string. Error offsets are UTF-8
    byte offsets in both cases.

    It raises a `strictjson.errors.ParseError` subclass describing the first violation
    of the grammar. A bare scalar is not valid JSON text here.

    ```pycon
    >>> parse(b'{"a": [1, true]}')
    Object(pairs=(('a', Array(items=(Number(lexeme='1'), Boolean(value=True)))),))
    >>> parse(b'"bare"')
    Traceback (most recent call last):
      ...
    strictjson.errors.UnexpectedToken: 0: got unexpected character: '"', expected: '{' or '['

    ```
    """
    options = Options(max_depth, allow_empty_fraction, lone_surrogates, trace)
    options.validate()
    text = _decode(data)
    if not text.strip(WHITESPACE):
        raise EmptyInput()
    log.debug("parsing %d characters with %r", len(text), options)
    try:
        tree = make_grammar(options).parse(text)
    except ParseError as e:
        log.debug("parsing failed: %s at offset %d", e.kind, e.offset)
        raise
    log.debug("parsed %s of %d elements", tree.kind, len(tree))
    return tree


def loads(data: Union[bytes, Text], **kwargs: Any) -> Value:
    """Same as `parse()`."""
    return parse(data, **kwargs)
