"""Character-level scanning of JSON text: whitespace, literals, numbers, strings."""

from __future__ import annotations

import math
from string import hexdigits

from leptjson.value import JsonParseError, ParseStatus

_WHITESPACE = frozenset(" \t\n\r")

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset(hexdigits)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and ch != ""


def _is_digit_1_to_9(ch: str) -> bool:
    return "1" <= ch <= "9" and ch != ""


class Scanner:
    """A cursor over a JSON text that reads its tokens."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"JSON text must be a str, not {type(text).__name__}")
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return self._pos

    def peek(self) -> str:
        """The next character, or an empty string at the end of the text."""
        return self._text[self._pos : self._pos + 1]

    def advance(self) -> str:
        """Consume and return the next character; an empty string at the end."""
        ch = self.peek()
        if ch:
            self._pos += 1
        return ch

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def skip_whitespace(self) -> None:
        text = self._text
        pos = self._pos
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        self._pos = pos

    def _expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise ValueError(f"expected {ch!r} at position {self._pos}")
        self._pos += 1

    def _fail(self, status: ParseStatus, position: int) -> JsonParseError:
        return JsonParseError(status, position)

    def parse_literal(self, literal: str) -> None:
        """Consume ``literal`` (such as ``true``) or raise INVALID_VALUE."""
        if not literal:
            raise ValueError("literal must not be empty")
        self._expect(literal[0])
        if not self._text.startswith(literal[1:], self._pos):
            raise self._fail(ParseStatus.INVALID_VALUE, self._pos - 1)
        self._pos += len(literal) - 1

    def parse_number(self) -> float:
        """Read a JSON number and return it as a float."""
        text = self._text
        start = self._pos
        pos = start

        def char_at(i: int) -> str:
            return text[i : i + 1]

        def skip_digits(i: int) -> int:
            while _is_digit(char_at(i)):
                i += 1
            return i

        if char_at(pos) == "-":
            pos += 1
        if char_at(pos) == "0":
            pos += 1
        else:
            if not _is_digit_1_to_9(char_at(pos)):
                raise self._fail(ParseStatus.INVALID_VALUE, start)
            pos = skip_digits(pos + 1)
        if char_at(pos) == ".":
            pos += 1
            if not _is_digit(char_at(pos)):
                raise self._fail(ParseStatus.INVALID_VALUE, start)
            pos = skip_digits(pos + 1)
        if char_at(pos) in ("e", "E"):
            pos += 1
            if char_at(pos) in ("+", "-"):
                pos += 1
            if not _is_digit(char_at(pos)):
                raise self._fail(ParseStatus.INVALID_VALUE, start)
            pos = skip_digits(pos + 1)

        number = float(text[start:pos])
        if math.isinf(number):
            raise self._fail(ParseStatus.NUMBER_TOO_BIG, start)
        self._pos = pos
        return number

    def _hex4(self, pos: int, escape_start: int) -> int:
        digits = self._text[pos : pos + 4]
        if len(digits) != 4 or not all(ch in _HEX_DIGITS for ch in digits):
            raise self._fail(ParseStatus.INVALID_UNICODE_HEX, escape_start)
        return int(digits, 16)

    def parse_string(self) -> str:
        """Read a quoted JSON string and return its decoded contents."""
        self._expect('"')
        text = self._text
        pos = self._pos
        chars: list[str] = []
        while True:
            if pos >= len(text):
                raise self._fail(ParseStatus.MISS_QUOTATION_MARK, pos)
            ch = text[pos]
            pos += 1
            if ch == '"':
                self._pos = pos
                return "".join(chars)
            if ch == "\\":
                escape_start = pos - 1
                esc = text[pos : pos + 1]
                pos += 1
                if esc in _ESCAPES:
                    chars.append(_ESCAPES[esc])
                elif esc == "u":
                    code = self._hex4(pos, escape_start)
                    pos += 4
                    if 0xD800 <= code <= 0xDBFF:
                        if text[pos : pos + 1] != "\\":
                            raise self._fail(ParseStatus.INVALID_UNICODE_SURROGATE, escape_start)
                        pos += 1
                        if text[pos : pos + 1] != "u":
                            raise self._fail(ParseStatus.INVALID_UNICODE_SURROGATE, escape_start)
                        pos += 1
                        low = self._hex4(pos, escape_start)
                        pos += 4
                        if not 0xDC00 <= low <= 0xDFFF:
                            raise self._fail(ParseStatus.INVALID_UNICODE_SURROGATE, escape_start)
                        code = (((code - 0xD800) << 10) | (low - 0xDC00)) + 0x10000
                    chars.append(chr(code))
                else:
                    raise self._fail(ParseStatus.INVALID_STRING_ESCAPE, escape_start)
            elif ch < " ":
                raise self._fail(ParseStatus.INVALID_STRING_CHAR, pos - 1)
            else:
                chars.append(ch)