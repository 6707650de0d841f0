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

"""A recursive descent parsing engine based on functional combinators.

Parsers work directly on the characters of a text. They are composed with `+`
(sequence), `|` (ordered choice), `>>` (transform the result) and unary `-` (skip the
result).

There are two kinds of failure:

* `NoParseError` is a soft failure. It means that a parser did not match and consumed
  nothing, so the choice combinator `|` may try the next alternative.
* `strictjson.errors.ParseError` is a hard failure. Nothing catches it until it reaches
  the caller of `Parser.parse()`.

`commit()` turns soft failures into hard ones once a rule has consumed its
distinguishing prefix, e.g. an opening bracket.

Basic combinators are taken from Harrison's book ["Introduction to Functional
Programming"][1] and translated from ML into Python.

  [1]: https://www.cl.cam.ac.uk/teaching/Lectures/funprog-jrh-1996/
"""

__all__ = [
    "State",
    "Parser",
    "NoParseError",
    "char",
    "lexeme",
    "many",
    "skip",
    "commit",
    "nested",
    "forward_decl",
    "finished",
    "traced",
]

import logging
from typing import Any, Callable, List, Optional, Text, Tuple

from strictjson.errors import NestingTooDeep, TrailingContent, UnexpectedToken
from strictjson.lexer import skip_space
from strictjson.util import byte_offset

log = logging.getLogger("strictjson")

Scanner = Callable[[Text, int], Optional[Tuple[Any, int]]]


class State:
    """Parsing state that is maintained for backtracking and error reporting.

    It consists of the current position `pos` in the text being parsed, the position
    `max` of the rightmost character that has been reached while parsing, the
    descriptions `expected` of the parsers that failed at `max`, and the current nesting
    `depth` of containers.
    """

    __slots__ = ("pos", "max", "expected", "depth")

    def __init__(
        self,
        pos: int = 0,
        max: int = 0,
        expected: Tuple[Text, ...] = (),
        depth: int = 0,
    ) -> None:
        self.pos = pos
        self.max = max
        self.expected = expected
        self.depth = depth

    def advance(self, pos: int) -> "State":
        if pos == self.pos:
            return self
        if pos > self.max:
            return State(pos, pos, (), self.depth)
        return State(pos, self.max, self.expected, self.depth)

    def fail(self, pos: int, expected: Text) -> "State":
        """Record that `expected` was not found at `pos`."""
        if pos > self.max:
            return State(self.pos, pos, (expected,), self.depth)
        elif pos == self.max and expected not in self.expected:
            return State(self.pos, pos, self.expected + (expected,), self.depth)
        return self

    def merge(self, other: "State") -> "State":
        """Keep the position of this state and the failure info of `other`."""
        if other.max == self.max and other.expected is self.expected:
            return self
        return State(self.pos, other.max, other.expected, self.depth)

    def error(self, text: Text) -> UnexpectedToken:
        found = text[self.max] if self.max < len(text) else None
        return UnexpectedToken(self.expected, found, byte_offset(text, self.max))

    def __repr__(self) -> str:
        return "State(%r, %r, %r, %r)" % (self.pos, self.max, self.expected, self.depth)


class NoParseError(Exception):
    """Internal no-parse exception for backtracking."""

    def __init__(self, state: State) -> None:
        Exception.__init__(self, state)
        self.state = state


class Parser:
    """Base class for various parsers.

    It defines some operators for parser composition and the `parse()` function as its
    external interface.
    """

    name: Optional[Text] = None

    def named(self, name: Text) -> "Parser":
        """Specify the name of the parser for error messages and tracing."""
        self.name = name
        return self

    def parse(self, text: Text) -> Any:
        """Apply the parser to the text and produce the parsing result.

        A soft failure that reaches this point is reported as `UnexpectedToken` at the
        rightmost position reached while parsing.
        """
        try:
            tree, _ = self(text, State())
            return tree
        except NoParseError as e:
            raise e.state.error(text) from None

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        raise NotImplementedError("an abstract parser cannot be called")

    def __add__(self, other: "Parser") -> "Parser":
        """Return a sequential composition of parsers.

        The resulting parser merges the parsed sequence into a single `_Tuple` unless
        the user explicitly prevents it. See also `skip()` and `>>` combinators.
        """
        return _Seq(self, other)

    def __or__(self, other: "Parser") -> "Parser":
        """Return an ordered choice composition of two parsers.

        The second parser is tried only if the first one fails softly.
        """
        return _Alt(self, other)

    def __rshift__(self, f: Callable[[Any], Any]) -> "Parser":
        """Return an interpreting parser that applies `f` to the parsing result."""
        return _Map(self, f)

    def __neg__(self) -> "Parser":
        return skip(self)

    def __str__(self) -> str:
        return self.name or type(self).__name__


class _Tuple(tuple):
    pass


class _Ignored:
    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return "_Ignored(%r)" % (self.value,)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Ignored) and self.value == other.value


def _magic(v1: Any, v2: Any) -> Any:
    if isinstance(v1, _Ignored):
        return v2
    elif isinstance(v2, _Ignored):
        return v1
    elif isinstance(v1, _Tuple):
        return _Tuple(v1 + (v2,))
    else:
        return _Tuple((v1, v2))


class _Map(Parser):
    def __init__(self, p: Parser, f: Callable[[Any], Any]) -> None:
        self.p = p
        self.f = f

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        v, s2 = self.p(text, s)
        return self.f(v), s2


class _Seq(Parser):
    def __init__(self, p1: Parser, p2: Parser) -> None:
        if isinstance(p1, _Seq) and p1.name is None:
            self.ps: List[Parser] = p1.ps + [p2]
        else:
            self.ps = [p1, p2]

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        res, s = self.ps[0](text, s)
        for p in self.ps[1:]:
            v, s = p(text, s)
            res = _magic(res, v)
        return res, s


class _Alt(Parser):
    def __init__(self, p1: Parser, p2: Parser) -> None:
        if isinstance(p1, _Alt) and p1.name is None:
            self.ps: List[Parser] = p1.ps + [p2]
        else:
            self.ps = [p1, p2]

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        start = s
        e: Optional[NoParseError] = None
        for p in self.ps:
            try:
                return p(text, s)
            except NoParseError as npe:
                e = npe
                s = s.merge(npe.state)
        assert e is not None
        if self.name is not None:
            # None of the alternatives got past the first character, so the whole
            # choice is reported under its name
            pos = skip_space(text, start.pos)
            if e.state.max == pos:
                base = start.expected if start.max == pos else ()
                raise NoParseError(
                    State(start.pos, pos, base + (self.name,), start.depth)
                )
        raise e


class _Many(Parser):
    """Repeated application of a parser while it succeeds.

    Iterative implementation preventing the stack overflow.
    """

    def __init__(self, p: Parser) -> None:
        self.p = p

    def __call__(self, text: Text, s: State) -> Tuple[List[Any], State]:
        res = []
        try:
            while True:
                v, s = self.p(text, s)
                res.append(v)
        except NoParseError as e:
            return res, s.merge(e.state)


class _Char(Parser):
    """Parses the character `c` after optional whitespace."""

    def __init__(self, c: Text) -> None:
        self.c = c
        self.name = "'%s'" % c

    def __call__(self, text: Text, s: State) -> Tuple[Text, State]:
        pos = skip_space(text, s.pos)
        if text.startswith(self.c, pos):
            return self.c, s.advance(pos + 1)
        raise NoParseError(s.fail(pos, self.name))


class _Lexeme(Parser):
    """Parses a lexeme recognized by `scan` after optional whitespace.

    The scanner itself is atomic: it is called at the first non-whitespace character
    and it either returns `None` without consuming anything or matches the whole
    lexeme.
    """

    def __init__(self, scan: Scanner, name: Text) -> None:
        self.scan = scan
        self.name = name

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        pos = skip_space(text, s.pos)
        res = self.scan(text, pos)
        if res is None:
            raise NoParseError(s.fail(pos, self.name))
        v, end = res
        return v, s.advance(end)


class _Commit(Parser):
    def __init__(self, p: Parser) -> None:
        self.p = p

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        try:
            return self.p(text, s)
        except NoParseError as e:
            raise e.state.error(text) from None


class _Nested(Parser):
    def __init__(self, p: Parser, limit: int) -> None:
        self.p = p
        self.limit = limit

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        if s.depth >= self.limit:
            # s.pos is right after the opening bracket
            raise NestingTooDeep(self.limit, byte_offset(text, s.pos - 1))
        try:
            v, s2 = self.p(text, State(s.pos, s.max, s.expected, s.depth + 1))
        except RecursionError:
            # The Python stack ran out before `limit`: report the levels that fit
            log.debug("stack exhausted at depth %d", s.depth + 1)
            raise NestingTooDeep(s.depth, byte_offset(text, s.pos - 1)) from None
        return v, State(s2.pos, s2.max, s2.expected, s.depth)


class _Eof(Parser):
    """Raises `TrailingContent` if anything but whitespace is left in the text."""

    def __call__(self, text: Text, s: State) -> Tuple[None, State]:
        pos = skip_space(text, s.pos)
        if pos < len(text):
            raise TrailingContent(byte_offset(text, pos))
        return None, s.advance(pos)


class _Fwd(Parser):
    """Undefined parser that can be used as a forward declaration.

    You will be able to `define()` it when all the parsers it depends on are available.
    """

    def __init__(self) -> None:
        self.p: Optional[Parser] = None

    def define(self, p: Parser) -> None:
        self.p = p

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        if self.p is None:
            raise NotImplementedError("you must define() a forward_decl somewhere")
        return self.p(text, s)


class _Traced(Parser):
    def __init__(self, p: Parser) -> None:
        self.p = p
        self.name = p.name

    def __call__(self, text: Text, s: State) -> Tuple[Any, State]:
        log.debug("> %s at %d", self, s.pos)
        try:
            v, s2 = self.p(text, s)
        except NoParseError as e:
            log.debug("< %s failed at %d", self, e.state.max)
            raise
        log.debug("< %s matched %d..%d", self, s.pos, s2.pos)
        return v, s2


def char(c: Text) -> Parser:
    """Return a parser that skips whitespace and matches the character `c`.

    ```pycon
    >>> (char("[") + char("]")).parse(" [ ]")
    ('[', ']')

    ```
    """
    return _Char(c)


finished = _Eof()


def lexeme(scan: Scanner, name: Text) -> Parser:
    """Return a parser that skips whitespace and applies the scanning function `scan`.

    `scan(text, pos)` must return `None` if the lexeme does not start at `pos`,
    otherwise the value of the lexeme and its end position.
    """
    return _Lexeme(scan, name)


def many(p: Parser) -> Parser:
    """Return a parser that applies `p` zero or more times and returns a list."""
    return _Many(p)


def skip(p: Parser) -> Parser:
    """Return a parser such that its results are ignored by the combinator `+`.

    It is useful for throwing away elements of concrete syntax (e.g. `","`, `":"`).
    """
    return p >> _Ignored


def commit(p: Parser) -> Parser:
    """Return a parser that turns soft failures of `p` into `UnexpectedToken` errors.

    ```pycon
    >>> p = char("[") + commit(char("]")) | char("x")
    >>> p.parse("[x")
    Traceback (most recent call last):
      ...
    strictjson.errors.UnexpectedToken: 1: got unexpected character: 'x', expected: ']'

    ```
    """
    return _Commit(p)


def nested(p: Parser, limit: int) -> Parser:
    """Return a parser that applies `p` one container level deeper.

    It raises `NestingTooDeep` instead of entering level `limit + 1`. Put it right
    after the parser of an opening bracket.

    If the Python stack is exhausted before `limit` is reached, the deepest container
    that still fits reports `NestingTooDeep` with the number of levels above it as
    the limit.
    """
    return _Nested(p, limit)


def forward_decl() -> _Fwd:
    """Return an undefined parser that can be used as a forward declaration."""
    return _Fwd()


def traced(p: Parser) -> Parser:
    """Return a parser that logs entering and leaving `p` at the debug level."""
    return _Traced(p)
