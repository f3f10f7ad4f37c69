"""The JSON value model: types, parse statuses, errors and the value tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator, Union


class JsonType(Enum):
    """The kind of a JSON value."""

    NULL = 0
    FALSE = 1
    TRUE = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class ParseStatus(IntEnum):
    """Outcome of parsing a JSON text."""

    OK = 0
    EXPECT_VALUE = 1
    INVALID_VALUE = 2
    ROOT_NOT_SINGULAR = 3
    NUMBER_TOO_BIG = 4
    MISS_QUOTATION_MARK = 5
    INVALID_STRING_ESCAPE = 6
    INVALID_STRING_CHAR = 7
    INVALID_UNICODE_HEX = 8
    INVALID_UNICODE_SURROGATE = 9
    MISS_COMMA_OR_SQUARE_BRACKET = 10
    MISS_KEY = 11
    MISS_COLON = 12
    MISS_COMMA_OR_CURLY_BRACKET = 13


class JsonParseError(ValueError):
    """Raised when a JSON text cannot be parsed."""

    def __init__(self, status: ParseStatus, position: int) -> None:
        self.status = ParseStatus(status)
        self.position = position
        message = self.status.name.lower().replace("_", " ")
        super().__init__(f"{message} at position {position}")


@dataclass
class Member:
    """One key/value pair of a JSON object."""

    key: str
    value: "JsonValue"


_Payload = Union[None, float, str, list, list]


class JsonValue:
    """A JSON value tree node; a fresh value is null."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._type = JsonType.NULL
        self._payload: _Payload = None

    # Construction

    @classmethod
    def null(cls) -> "JsonValue":
        return cls()

    @classmethod
    def from_boolean(cls, b: object) -> "JsonValue":
        value = cls()
        value.set_boolean(b)
        return value

    @classmethod
    def from_number(cls, n: float) -> "JsonValue":
        value = cls()
        value.set_number(n)
        return value

    @classmethod
    def from_string(cls, s: str) -> "JsonValue":
        value = cls()
        value.set_string(s)
        return value

    @classmethod
    def from_array(cls, elements: Iterable["JsonValue"]) -> "JsonValue":
        items = list(elements)
        for item in items:
            if not isinstance(item, JsonValue):
                raise TypeError(f"array element must be a JsonValue, not {type(item).__name__}")
        value = cls()
        value._type = JsonType.ARRAY
        value._payload = items
        return value

    @classmethod
    def from_object(cls, members: Iterable[Union[Member, tuple]]) -> "JsonValue":
        items = []
        for entry in members:
            member = entry if isinstance(entry, Member) else Member(*entry)
            if not isinstance(member.key, str):
                raise TypeError(f"object key must be a str, not {type(member.key).__name__}")
            if not isinstance(member.value, JsonValue):
                raise TypeError(
                    f"object member value must be a JsonValue, not {type(member.value).__name__}"
                )
            items.append(member)
        value = cls()
        value._type = JsonType.OBJECT
        value._payload = items
        return value

    # Access

    @property
    def type(self) -> JsonType:
        return self._type

    def _require(self, *types: JsonType) -> None:
        if self._type not in types:
            expected = " or ".join(t.name for t in types)
            raise TypeError(f"value is {self._type.name}, not {expected}")

    def set_null(self) -> None:
        self._type = JsonType.NULL
        self._payload = None

    @property
    def boolean(self) -> bool:
        self._require(JsonType.TRUE, JsonType.FALSE)
        return self._type is JsonType.TRUE

    def set_boolean(self, b: object) -> None:
        self._type = JsonType.TRUE if b else JsonType.FALSE
        self._payload = None

    @property
    def number(self) -> float:
        self._require(JsonType.NUMBER)
        return self._payload  # type: ignore[return-value]

    def set_number(self, n: float) -> None:
        if isinstance(n, bool) or not isinstance(n, (int, float)):
            raise TypeError(f"number must be int or float, not {type(n).__name__}")
        self._type = JsonType.NUMBER
        self._payload = float(n)

    @property
    def string(self) -> str:
        self._require(JsonType.STRING)
        return self._payload  # type: ignore[return-value]

    def set_string(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError(f"string must be a str, not {type(s).__name__}")
        self._type = JsonType.STRING
        self._payload = s

    @property
    def elements(self) -> list["JsonValue"]:
        self._require(JsonType.ARRAY)
        return self._payload  # type: ignore[return-value]

    @property
    def members(self) -> list[Member]:
        self._require(JsonType.OBJECT)
        return self._payload  # type: ignore[return-value]

    # Container protocol

    def __len__(self) -> int:
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        return len(self._payload)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Union["JsonValue", Member]]:
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        return iter(self._payload)  # type: ignore[arg-type]

    def __getitem__(self, index: Union[int, str]) -> Union["JsonValue", Member]:
        """Array element or object member by position; object value by key."""
        self._require(JsonType.ARRAY, JsonType.OBJECT)
        if isinstance(index, str):
            self._require(JsonType.OBJECT)
            for member in self._payload:  # type: ignore[union-attr]
                if member.key == index:
                    return member.value
            raise KeyError(index)
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be int, not {type(index).__name__}")
        if not 0 <= index < len(self._payload):  # type: ignore[arg-type]
            raise IndexError(f"index {index} out of range")
        return self._payload[index]  # type: ignore[index]

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._payload == other._payload

    def __repr__(self) -> str:
        if self._payload is None:
            return f"JsonValue({self._type.name})"
        return f"JsonValue({self._type.name}, {self._payload!r})"