"""Core type definitions for prettyjson."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple, Union


class ValueKind(Enum):
    """Enumeration of JSON value variants."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


class KeyOrder(Enum):
    """Enumeration of object key ordering policies."""
    SORTED = "sorted"
    INSERTION = "insertion"


# Errors raised by the json codec are re-exported, never wrapped.
DecodeError = json.JSONDecodeError
ENCODE_ERRORS = (TypeError, ValueError)


@dataclass(frozen=True)
class Style:
    """Terminal style for one kind of token, in termcolor vocabulary."""
    color: Optional[str] = None
    attrs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class JsonValue:
    """
    A decoded JSON document node.

    The payload depends on ``kind``:

    - NULL: ``None``
    - BOOLEAN: ``bool``
    - NUMBER: the numeric literal text exactly as decoded
    - STRING: ``str``
    - ARRAY: tuple of ``JsonValue``
    - OBJECT: tuple of ``(key, JsonValue)`` pairs, in rendering order
    - UNSUPPORTED: the native object that has no JSON variant
    """
    kind: ValueKind
    payload: Any = None

    @classmethod
    def null(cls) -> "JsonValue":
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> "JsonValue":
        return cls(ValueKind.BOOLEAN, bool(value))

    @classmethod
    def number(cls, literal: str) -> "JsonValue":
        return cls(ValueKind.NUMBER, str(literal))

    @classmethod
    def string(cls, value: str) -> "JsonValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def array(cls, items) -> "JsonValue":
        return cls(ValueKind.ARRAY, tuple(items))

    @classmethod
    def object(cls, pairs) -> "JsonValue":
        return cls(ValueKind.OBJECT, tuple(pairs))

    @classmethod
    def unsupported(cls, obj: Any) -> "JsonValue":
        return cls(ValueKind.UNSUPPORTED, obj)

    def is_container(self) -> bool:
        return self.kind in (ValueKind.ARRAY, ValueKind.OBJECT)

    def items(self) -> Iterator[Tuple[str, "JsonValue"]]:
        """Iterate object entries in their stored order."""
        if self.kind is not ValueKind.OBJECT:
            raise TypeError(f"{self.kind.value} value has no items")
        return iter(self.payload)

    def to_python(self) -> Any:
        """
        Convert back into plain Python data.

        Numbers come back as ``int`` when the literal is integral and as
        ``float`` otherwise. Unsupported payloads are returned as-is.

        Returns:
            Python object built from dicts, lists and scalars
        """
        if self.kind is ValueKind.NUMBER:
            return json.loads(self.payload)
        if self.kind is ValueKind.ARRAY:
            return [item.to_python() for item in self.payload]
        if self.kind is ValueKind.OBJECT:
            return {key: value.to_python() for key, value in self.payload}
        return self.payload


JsonInput = Union[bytes, bytearray, str]


class FormatterInterface(ABC):
    """Abstract interface for JSON formatters."""

    @abstractmethod
    def format(self, data: JsonInput) -> str:
        """Decode a JSON document and render it."""
        pass

    @abstractmethod
    def marshal(self, obj: Any) -> str:
        """Encode a native value to JSON and render it."""
        pass

    @abstractmethod
    def render(self, value: JsonValue) -> str:
        """Render an already decoded value."""
        pass
