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

from typing import Callable, Sequence, Text, Tuple, TypeVar, Union

T = TypeVar("T")


def pretty_tree(
    x: T, kids: Callable[[T], Sequence[T]], show: Callable[[T], Text]
) -> Text:
    """Return a pseudo-graphic tree representation of the object `x` similar to the
    `tree` command in Unix.

    Type: `(T, Callable[[T], List[T]], Callable[[T], str]) -> str`

    It applies the parameter `show` (which is a function of type `(T) -> str`) to get a
    textual representation of the objects to show.

    It applies the parameter `kids` (which is a function of type `(T) -> List[T]`) to
    list the children of the object to show.

    Examples:

    ```pycon
    >>> print(pretty_tree(
    ...     ["foo", ["bar", "baz"], "quux"],
    ...     lambda obj: obj if isinstance(obj, list) else [],
    ...     lambda obj: "[]" if isinstance(obj, list) else str(obj),
    ... ))
    []
    |-- foo
    |-- []
    |   |-- bar
    |   `-- baz
    `-- quux

    ```
    """
    (mid, end, cont, last, root) = ("|-- ", "`-- ", "|   ", "    ", "")

    def rec(obj: T, indent: Text, sym: Text) -> Text:
        line = indent + sym + show(obj)
        obj_kids = kids(obj)
        if len(obj_kids) == 0:
            return line
        else:
            if sym == mid:
                next_indent = indent + cont
            elif sym == root:
                next_indent = indent + root
            else:
                next_indent = indent + last
            chars = [mid] * (len(obj_kids) - 1) + [end]
            lines = [rec(kid, next_indent, sym) for kid, sym in zip(obj_kids, chars)]
            return "\n".join([line] + lines)

    return rec(x, "", root)


def byte_offset(text: Text, pos: int) -> int:
    """Return the UTF-8 byte offset of the character index `pos` in `text`.

    ```pycon
    >>> byte_offset("λx", 1)
    2

    ```
    """
    return len(text[:pos].encode("utf-8", "surrogatepass"))


def line_col(data: Union[bytes, Text], offset: int) -> Tuple[int, int]:
    """Return the 1-based `(line, column)` of the byte `offset` in `data`.

    Columns count characters, not bytes. Only LF starts a new line.

    ```pycon
    >>> line_col(b'{\\n  "a": x}', 9)
    (2, 8)

    ```
    """
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogatepass")
    head = data[:offset]
    line = head.count(b"\n") + 1
    start = head.rfind(b"\n") + 1
    column = len(head[start:].decode("utf-8", "replace")) + 1
    return line, column


def offset_to_str(data: Union[bytes, Text], offset: int) -> Text:
    """Format the byte `offset` in `data` as `line,column`."""
    return "%d,%d" % line_col(data, offset)
