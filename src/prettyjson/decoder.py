"""JSON codec adapter producing ``JsonValue`` trees."""

import json
import logging
from typing import Any, Iterator, List, Optional, Set, Tuple

from .types import JsonInput, JsonValue, KeyOrder, ValueKind


logger = logging.getLogger(__name__)


class _NumberLiteral(str):
    """Numeric literal text kept exactly as it appeared in the document."""


class _ObjectPairs(list):
    """Object entries in document order, duplicates included."""


_DECODER = json.JSONDecoder(
    object_pairs_hook=_ObjectPairs,
    parse_int=_NumberLiteral,
    parse_float=_NumberLiteral,
    parse_constant=_NumberLiteral,
)


def decode(data: JsonInput, key_order: KeyOrder = KeyOrder.INSERTION) -> JsonValue:
    """
    Decode one JSON document into a ``JsonValue``.

    Args:
        data: JSON document as bytes (UTF-8/16/32, BOM allowed) or text
        key_order: Ordering applied to every object in the document

    Returns:
        Root value of the document

    Raises:
        json.JSONDecodeError: If the document is not valid JSON
        UnicodeDecodeError: If bytes cannot be decoded as text
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode(json.detect_encoding(data))
    raw = _DECODER.decode(data)
    logger.debug(f"Decoded {type(raw).__name__} document")
    return to_value(raw, key_order)


def encode(obj: Any) -> str:
    """
    Encode a native value as compact JSON text.

    Raises:
        TypeError: If ``obj`` contains a type the codec cannot encode
        ValueError: If ``obj`` is circular or holds NaN/Infinity
    """
    return json.dumps(obj, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def to_value(obj: Any, key_order: KeyOrder = KeyOrder.INSERTION) -> JsonValue:
    """
    Convert native Python data into a ``JsonValue``.

    Accepts what ``json.loads`` produces as well as the lists, tuples and
    str-keyed dicts a caller builds by hand. Anything without a JSON
    counterpart becomes an UNSUPPORTED value instead of raising, and so does
    a container that contains itself. Containers are walked with an explicit
    stack, so nesting depth is not bounded by the interpreter's recursion
    limit.

    Args:
        obj: Python object to convert
        key_order: Ordering applied to every object

    Returns:
        Converted value
    """
    stack: List[_Frame] = []
    active: Set[int] = set()
    value = _convert(obj, stack, active)
    while stack:
        frame = stack[-1]
        if value is not None:
            frame.built.append((frame.key, value))
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            active.discard(id(frame.source))
            value = frame.finish(key_order)
            continue
        frame.key, child = entry
        value = _convert(child, stack, active)
    return value


class _Frame:
    """Container being converted: remaining entries and converted children."""

    __slots__ = ("source", "kind", "entries", "built", "key")

    def __init__(self, source: Any, kind: ValueKind, entries: Iterator[Tuple[Optional[str], Any]]):
        self.source = source
        self.kind = kind
        self.entries = entries
        self.built: List[Tuple[Optional[str], JsonValue]] = []
        self.key: Optional[str] = None

    def finish(self, key_order: KeyOrder) -> JsonValue:
        if self.kind is ValueKind.ARRAY:
            return JsonValue.array([value for _, value in self.built])
        return JsonValue.object(_order_pairs(self.built, key_order))


def _convert(obj: Any, stack: List[_Frame], active: Set[int]) -> Optional[JsonValue]:
    # Scalars convert directly; containers push a frame and return None.
    if obj is None:
        return JsonValue.null()
    if isinstance(obj, bool):
        return JsonValue.boolean(obj)
    if isinstance(obj, _NumberLiteral):
        return JsonValue.number(str(obj))
    if isinstance(obj, (int, float)):
        return JsonValue.number(json.dumps(obj))
    if isinstance(obj, str):
        return JsonValue.string(obj)
    if id(obj) in active:
        logger.debug(f"Circular reference to {type(obj).__name__}")
        return JsonValue.unsupported(obj)
    if isinstance(obj, _ObjectPairs):
        frame = _Frame(obj, ValueKind.OBJECT, iter(_merge_duplicates(obj)))
    elif isinstance(obj, (list, tuple)):
        frame = _Frame(obj, ValueKind.ARRAY, ((None, item) for item in obj))
    elif isinstance(obj, dict) and all(isinstance(key, str) for key in obj):
        frame = _Frame(obj, ValueKind.OBJECT, iter(list(obj.items())))
    else:
        logger.debug(f"No JSON variant for {type(obj).__name__}")
        return JsonValue.unsupported(obj)

    stack.append(frame)
    active.add(id(obj))
    return None


def _merge_duplicates(pairs: _ObjectPairs) -> List[Tuple[str, Any]]:
    # Last value wins, first position is kept.
    merged = {}
    for key, value in pairs:
        merged[key] = value
    return list(merged.items())


def _order_pairs(pairs: List[Tuple[str, JsonValue]], key_order: KeyOrder) -> List[Tuple[str, JsonValue]]:
    if key_order is KeyOrder.SORTED:
        return sorted(pairs, key=lambda pair: pair[0])
    return pairs
