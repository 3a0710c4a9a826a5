"""Formatter facade tying the codec, configuration and renderer together."""

import logging
from typing import Any, Optional

from .config import FormatterConfig
from .decoder import decode, encode
from .renderer import ValueRenderer
from .types import FormatterInterface, JsonInput, JsonValue, KeyOrder


class Formatter(FormatterInterface):
    """
    Pretty-prints JSON documents and native values.

    A formatter fixes one key ordering policy for its lifetime; the
    configuration stays public so callers can adjust colors, indentation and
    truncation between calls.
    """

    def __init__(self, config: Optional[FormatterConfig] = None,
                 key_order: KeyOrder = KeyOrder.INSERTION,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the formatter.

        Args:
            config: Rendering configuration (defaults to ``FormatterConfig()``)
            key_order: Object key ordering used for every decoded document
            logger: Optional logger instance
        """
        self.config = config if config is not None else FormatterConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._key_order = key_order
        self.renderer = ValueRenderer(self.logger)

    @property
    def key_order(self) -> KeyOrder:
        return self._key_order

    def format(self, data: JsonInput) -> str:
        """
        Decode a JSON document and render it.

        Args:
            data: JSON document as bytes or text

        Returns:
            Formatted text

        Raises:
            json.JSONDecodeError: If ``data`` is not valid JSON
        """
        self.logger.debug(f"Formatting JSON document of length {len(data)}")
        return self.render(decode(data, self._key_order))

    def marshal(self, obj: Any) -> str:
        """
        Encode ``obj`` to JSON, then decode and render it.

        Going through the codec normalizes the value into the JSON data
        model, so tuples become arrays and the codec's own type rules apply.

        Args:
            obj: Any JSON-serializable Python object

        Returns:
            Formatted text

        Raises:
            TypeError: If ``obj`` holds a type the codec cannot encode
            ValueError: If ``obj`` is circular or holds NaN/Infinity
        """
        return self.format(encode(obj))

    def render(self, value: JsonValue) -> str:
        """Render an already decoded value with the current configuration."""
        return self.renderer.render(self.config, value)


def format(data: JsonInput) -> str:
    """Format a JSON document with the default configuration."""
    return Formatter().format(data)


def marshal(obj: Any) -> str:
    """Encode and format ``obj`` with the default configuration."""
    return Formatter().marshal(obj)
