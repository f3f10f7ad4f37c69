# leptjson

A small, strict JSON parser. It reads a JSON text into a tree of `JsonValue`
objects and reports malformed input with a `JsonParseError` that carries a
`ParseStatus` and the position in the text where the problem was found.

## Installation

```
pip install leptjson
```

## Parsing

```python
from leptjson.parser import parse
from leptjson.value import JsonType

doc = parse('{ "name" : "abc", "items" : [ 1, 2, 3 ], "ok" : true }')

assert doc.type == JsonType.OBJECT
assert len(doc) == 3

for member in doc.members:
    print(member.key, member.value.type)

items = doc["items"]          # object value by key
assert doc[1].value == items  # object member by position
assert [e.number for e in items.elements] == [1.0, 2.0, 3.0]
```

`parse` accepts only a `str`. Objects keep their members as `Member(key, value)`
pairs in document order, and duplicate keys are kept as they appear; looking a
value up by key returns the first match or raises `KeyError`. Numbers are
floats; strings are Python `str`, with `\uXXXX` escapes and surrogate pairs
decoded. Only space, tab, newline and carriage return count as whitespace.

## Errors

```python
from leptjson.parser import parse
from leptjson.value import JsonParseError, ParseStatus

try:
    parse("[1, 2")
except JsonParseError as err:
    assert err.status == ParseStatus.MISS_COMMA_OR_SQUARE_BRACKET
    print(err.position)
```

`JsonParseError` is a subclass of `ValueError`. The statuses are:

| Status | Meaning |
| --- | --- |
| `EXPECT_VALUE` | the text ends where a value is expected |
| `INVALID_VALUE` | a literal or number is malformed |
| `ROOT_NOT_SINGULAR` | text follows the first value |
| `NUMBER_TOO_BIG` | a number overflows a double |
| `MISS_QUOTATION_MARK` | a string is not closed |
| `INVALID_STRING_ESCAPE` | an unknown escape such as `\v` |
| `INVALID_STRING_CHAR` | a raw control character in a string |
| `INVALID_UNICODE_HEX` | a `\u` escape without four hex digits |
| `INVALID_UNICODE_SURROGATE` | a high surrogate without a valid low one |
| `MISS_COMMA_OR_SQUARE_BRACKET` | an array element is not followed by `,` or `]` |
| `MISS_KEY` | an object member does not start with a string key |
| `MISS_COLON` | a key is not followed by `:` |
| `MISS_COMMA_OR_CURLY_BRACKET` | a member is not followed by `,` or `}` |

## Building values

```python
from leptjson.value import JsonValue

v = JsonValue.from_string("Hello")
v.set_number(1234.5)
assert v.number == 1234.5
v.set_boolean(True)
assert v.boolean is True
v.set_null()

arr = JsonValue.from_array([JsonValue.from_number(1), JsonValue.null()])
obj = JsonValue.from_object([("a", arr)])
assert obj["a"] == arr
```

Asking for the contents of the wrong type (for example `.number` on a string,
or `len()` of a number) raises `TypeError`. Values compare equal when their
types and contents are equal.

## Scanning

`leptjson.scanner.Scanner` is the cursor the parser uses. It can be used
directly to read single tokens: `skip_whitespace()`, `parse_literal(literal)`,
`parse_number()` and `parse_string()`, with `peek()`, `advance()`, `at_end()`
and `position` to inspect the cursor.

## What it does not do

The package only reads JSON. It has no function that writes a `JsonValue`
back out as JSON text, and it installs no command-line tool.