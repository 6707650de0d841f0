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

"""Scanning functions for the primitive lexemes of JSON text.

Each `scan_*` function looks at the character position `pos` of `text` and returns
`None` if the lexeme cannot start there. Once the first character of a lexeme has been
matched, the scanner is atomic: it never skips whitespace and any malformed
continuation is reported by raising a `strictjson.errors.ParseError`.

`skip_space()` is the only function that skips insignificant whitespace.
"""

__all__ = [
    "WHITESPACE",
    "skip_space",
    "scan_string",
    "scan_number",
    "scan_keyword",
]

import re
from typing import List, Optional, Text, Tuple

from strictjson.errors import (
    InvalidEscapeSequence,
    InvalidNumberFormat,
    InvalidUnicodeEscape,
    UnexpectedToken,
    UnterminatedString,
)
from strictjson.util import byte_offset

WHITESPACE = " \t\r\n"
DIGITS = "0123456789"
REPLACEMENT_CHARACTER = "\ufffd"

_space_re = re.compile(r"[ \t\r\n]*")
_digits_re = re.compile(r"[0-9]*")
_unescaped_re = re.compile(r'[^"\\]*')
_hex4_re = re.compile(r"[0-9A-Fa-f]{4}")
_low_surrogate_re = re.compile(r"\\u([Dd][C-Fc-f][0-9A-Fa-f]{2})")

_escapes = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def skip_space(text: Text, pos: int) -> int:
    """Return the position of the first non-whitespace character at or after `pos`."""
    return _space_re.match(text, pos).end()


def scan_string(
    text: Text, pos: int, lone_surrogates: Text = "error"
) -> Optional[Tuple[Text, int]]:
    r"""Scan a string literal and return its decoded value and the end position.

    ```pycon
    >>> scan_string(r'"a\tb" : 1', 0)
    ('a\tb', 6)
    >>> scan_string("1", 0) is None
    True

    ```
    """
    if not text.startswith('"', pos):
        return None
    chunks: List[Text] = []
    i = pos + 1
    n = len(text)
    while True:
        end = _unescaped_re.match(text, i).end()
        chunks.append(text[i:end])
        i = end
        if i >= n:
            raise UnterminatedString(byte_offset(text, pos))
        if text[i] == '"':
            return "".join(chunks), i + 1
        if i + 1 >= n:
            raise UnterminatedString(byte_offset(text, pos))
        esc = text[i + 1]
        if esc == "u":
            s, i = _scan_unicode_escape(text, i, lone_surrogates)
            chunks.append(s)
        elif esc in _escapes:
            chunks.append(_escapes[esc])
            i += 2
        else:
            raise InvalidEscapeSequence("\\" + esc, byte_offset(text, i))


def _scan_unicode_escape(
    text: Text, i: int, lone_surrogates: Text
) -> Tuple[Text, int]:
    m = _hex4_re.match(text, i + 2)
    if m is None:
        raise InvalidUnicodeEscape(text[i : i + 6], byte_offset(text, i))
    code = int(m.group(), 16)
    end = m.end()
    if 0xD800 <= code <= 0xDBFF:
        low = _low_surrogate_re.match(text, end)
        if low is not None:
            code = 0x10000 + ((code - 0xD800) << 10) + (int(low.group(1), 16) - 0xDC00)
            return chr(code), low.end()
    elif not 0xDC00 <= code <= 0xDFFF:
        return chr(code), end
    if lone_surrogates == "replace":
        return REPLACEMENT_CHARACTER, end
    raise InvalidUnicodeEscape(
        text[i:end], byte_offset(text, i), "unpaired surrogate"
    )


def scan_number(
    text: Text, pos: int, allow_empty_fraction: bool = True
) -> Optional[Tuple[Text, int]]:
    """Scan a number literal and return its lexeme and the end position.

    The fraction may have no digits after the dot unless `allow_empty_fraction` is
    false.

    ```pycon
    >>> scan_number("-12.5e+3]", 0)
    ('-12.5e+3', 8)
    >>> scan_number("1.]", 0)
    ('1.', 2)

    ```
    """
    n = len(text)
    if pos >= n or text[pos] not in "-" + DIGITS:
        return None
    i = pos
    if text[i] == "-":
        i += 1
    if i >= n or text[i] not in DIGITS:
        raise InvalidNumberFormat("expected a digit after '-'", byte_offset(text, i))
    if text[i] == "0":
        i += 1
        if i < n and text[i] in DIGITS:
            raise InvalidNumberFormat("leading zero", byte_offset(text, i))
    else:
        i = _digits_re.match(text, i).end()
    if i < n and text[i] == ".":
        end = _digits_re.match(text, i + 1).end()
        if end == i + 1 and not allow_empty_fraction:
            raise InvalidNumberFormat(
                "expected a digit after '.'", byte_offset(text, end)
            )
        i = end
    if i < n and text[i] in "eE":
        i += 1
        if i < n and text[i] in "+-":
            i += 1
        end = _digits_re.match(text, i).end()
        if end == i:
            raise InvalidNumberFormat(
                "expected a digit in the exponent", byte_offset(text, i)
            )
        i = end
    return text[pos:i], i


def scan_keyword(text: Text, pos: int, word: Text) -> Optional[int]:
    """Scan the keyword `word` and return the end position.

    Keywords are case-sensitive. A partial match is an error, not a mismatch.
    """
    if not text.startswith(word[0], pos):
        return None
    end = pos + len(word)
    if text.startswith(word, pos):
        return end
    i = pos
    while i < len(text) and text[i] == word[i - pos]:
        i += 1
    found = text[i] if i < len(text) else None
    raise UnexpectedToken(["'%s'" % word], found, byte_offset(text, i))
