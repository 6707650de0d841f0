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

"""Errors reported by the parser.

Exactly one error is raised per failed parse: the first violation wins and no partial
value tree is returned. Every error carries the UTF-8 byte `offset` of the input where
it happened. Turning an offset into a line and a column is left to
`ParseError.location()`.
"""

__all__ = [
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

from typing import Any, Dict, Optional, Sequence, Text, Tuple, Type, Union

from strictjson.util import line_col, offset_to_str


def _rebuild(
    cls: Type["ParseError"], args: Tuple[Any, ...], state: Dict[Text, Any]
) -> "ParseError":
    e = cls.__new__(cls)
    e.args = args
    e.__dict__.update(state)
    return e


class ParseError(Exception):
    """The base class for strictjson errors."""

    def __init__(self, msg: Text, offset: int) -> None:
        Exception.__init__(self, msg, offset)

    @property
    def msg(self) -> Text:
        return self.args[0]

    @property
    def offset(self) -> int:
        """UTF-8 byte offset of the error in the input."""
        return self.args[1]

    @property
    def kind(self) -> Text:
        return type(self).__name__

    def location(self, data: Union[bytes, Text]) -> Tuple[int, int]:
        """Return the 1-based `(line, column)` of the error in `data`."""
        return line_col(data, self.offset)

    def format(self, data: Union[bytes, Text]) -> Text:
        """Return the error message prefixed with `line,column` in `data`.

        ```pycon
        >>> from strictjson import parse
        >>> data = b'[1,\\n 2,]'
        >>> try:
        ...     parse(data)
        ... except ParseError as e:
        ...     print(e.format(data))
        2,4: got unexpected character: ']', expected: value

        ```
        """
        return "%s: %s" % (offset_to_str(data, self.offset), self.msg)

    def __str__(self) -> Text:
        return "%d: %s" % (self.offset, self.msg)

    def __reduce__(self) -> Tuple[Any, ...]:
        # Subclass constructors take other arguments than `args`
        return _rebuild, (type(self), self.args, self.__dict__)


class UnexpectedToken(ParseError):
    """A character or the end of input that the grammar does not allow here."""

    def __init__(
        self, expected: Sequence[Text], found: Optional[Text], offset: int
    ) -> None:
        self.expected = tuple(expected)
        self.found = found
        if found is None:
            got = "got unexpected end of input"
        else:
            got = "got unexpected character: %r" % found
        if self.expected:
            msg = "%s, expected: %s" % (got, " or ".join(self.expected))
        else:
            msg = got
        ParseError.__init__(self, msg, offset)


class UnterminatedString(ParseError):
    """The input ended before the closing quote of the string started at `offset`."""

    def __init__(self, offset: int) -> None:
        ParseError.__init__(self, "unterminated string", offset)


class InvalidEscapeSequence(ParseError):
    def __init__(self, sequence: Text, offset: int) -> None:
        self.sequence = sequence
        ParseError.__init__(self, "invalid escape sequence: %r" % sequence, offset)


class InvalidUnicodeEscape(ParseError):
    """A `\\u` escape without four hex digits, or an unpaired surrogate half."""

    def __init__(self, sequence: Text, offset: int, reason: Text = "") -> None:
        self.sequence = sequence
        msg = "invalid unicode escape: %r" % sequence
        if reason:
            msg = "%s (%s)" % (msg, reason)
        ParseError.__init__(self, msg, offset)


class InvalidNumberFormat(ParseError):
    def __init__(self, reason: Text, offset: int) -> None:
        self.reason = reason
        ParseError.__init__(self, "invalid number format: %s" % reason, offset)


class TrailingContent(ParseError):
    def __init__(self, offset: int) -> None:
        ParseError.__init__(self, "extra data after the root value", offset)


class NestingTooDeep(ParseError):
    """Objects and arrays are nested deeper than `limit` levels."""

    def __init__(self, limit: int, offset: int) -> None:
        self.limit = limit
        ParseError.__init__(
            self, "nesting is deeper than the limit of %d levels" % limit, offset
        )


class EmptyInput(ParseError):
    def __init__(self) -> None:
        ParseError.__init__(self, "empty input", 0)


class InvalidEncoding(ParseError):
    def __init__(self, offset: int) -> None:
        ParseError.__init__(self, "input is not valid UTF-8", offset)
