"""
prettyjson - colorized JSON pretty printer.

Renders JSON documents and native Python values as indented,
optionally ANSI-colored text for terminals and logs.
"""

from .config import FormatterConfig
from .decoder import decode, encode, to_value
from .formatter import Formatter, format, marshal
from .renderer import ValueRenderer
from .types import DecodeError, ENCODE_ERRORS, JsonValue, KeyOrder, Style, ValueKind

__version__ = "1.0.0"
__all__ = [
    "Formatter",
    "FormatterConfig",
    "ValueRenderer",
    "JsonValue",
    "ValueKind",
    "KeyOrder",
    "Style",
    "DecodeError",
    "ENCODE_ERRORS",
    "decode",
    "encode",
    "to_value",
    "format",
    "marshal",
]
