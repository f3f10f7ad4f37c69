"""Recursive-descent parsing of JSON text into a JsonValue tree."""

from __future__ import annotations

from leptjson.scanner import Scanner
from leptjson.value import JsonParseError, JsonType, JsonValue, Member, ParseStatus

_LITERALS = {
    "t": ("true", JsonType.TRUE),
    "f": ("false", JsonType.FALSE),
    "n": ("null", JsonType.NULL),
}


def _parse_literal(scanner: Scanner, literal: str, kind: JsonType) -> JsonValue:
    scanner.parse_literal(literal)
    if kind is JsonType.NULL:
        return JsonValue.null()
    return JsonValue.from_boolean(kind is JsonType.TRUE)


def _parse_array(scanner: Scanner) -> JsonValue:
    scanner.advance()  # '['
    scanner.skip_whitespace()
    elements: list[JsonValue] = []
    if scanner.peek() == "]":
        scanner.advance()
        return JsonValue.from_array(elements)
    while True:
        elements.append(_parse_value(scanner))
        scanner.skip_whitespace()
        ch = scanner.peek()
        if ch == ",":
            scanner.advance()
            scanner.skip_whitespace()
        elif ch == "]":
            scanner.advance()
            return JsonValue.from_array(elements)
        else:
            raise JsonParseError(ParseStatus.MISS_COMMA_OR_SQUARE_BRACKET, scanner.position)


def _parse_object(scanner: Scanner) -> JsonValue:
    scanner.advance()  # '{'
    scanner.skip_whitespace()
    members: list[Member] = []
    if scanner.peek() == "}":
        scanner.advance()
        return JsonValue.from_object(members)
    while True:
        if scanner.peek() != '"':
            raise JsonParseError(ParseStatus.MISS_KEY, scanner.position)
        key = scanner.parse_string()
        scanner.skip_whitespace()
        if scanner.peek() != ":":
            raise JsonParseError(ParseStatus.MISS_COLON, scanner.position)
        scanner.advance()
        scanner.skip_whitespace()
        members.append(Member(key, _parse_value(scanner)))
        scanner.skip_whitespace()
        ch = scanner.peek()
        if ch == ",":
            scanner.advance()
            scanner.skip_whitespace()
        elif ch == "}":
            scanner.advance()
            return JsonValue.from_object(members)
        else:
            raise JsonParseError(ParseStatus.MISS_COMMA_OR_CURLY_BRACKET, scanner.position)


def _parse_value(scanner: Scanner) -> JsonValue:
    ch = scanner.peek()
    if not ch:
        raise JsonParseError(ParseStatus.EXPECT_VALUE, scanner.position)
    if ch in _LITERALS:
        literal, kind = _LITERALS[ch]
        return _parse_literal(scanner, literal, kind)
    if ch == '"':
        return JsonValue.from_string(scanner.parse_string())
    if ch == "[":
        return _parse_array(scanner)
    if ch == "{":
        return _parse_object(scanner)
    return JsonValue.from_number(scanner.parse_number())


def parse(json: str) -> JsonValue:
    """Parse a complete JSON text; raise JsonParseError if it is malformed."""
    scanner = Scanner(json)
    scanner.skip_whitespace()
    value = _parse_value(scanner)
    scanner.skip_whitespace()
    if not scanner.at_end():
        raise JsonParseError(ParseStatus.ROOT_NOT_SINGULAR, scanner.position)
    return value