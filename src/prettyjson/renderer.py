"""Rendering of ``JsonValue`` trees into indented, colored text."""

import json
import logging
import re
from typing import Iterator, List, Optional, Tuple

from .colors import colorize
from .config import FormatterConfig
from .types import JsonValue, Style, ValueKind


ELLIPSIS = "..."


class ValueRenderer:
    """
    Renders a decoded JSON value as human-readable text.

    The renderer holds no per-call state: every ``render`` call owns its own
    output buffer, so one instance may be shared between threads as long as
    the configuration is not mutated while a call is running.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the renderer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def render(self, config: FormatterConfig, value: JsonValue) -> str:
        """
        Render ``value`` using ``config``.

        Containers are walked with an explicit stack rather than recursion.

        Args:
            config: Rendering configuration, read but never modified
            value: Root of the decoded document

        Returns:
            Formatted text without a trailing newline
        """
        out: List[str] = []
        stack: List[_OpenContainer] = []
        separator = ":" if config.is_compact else ": "

        self._emit(config, value, 1, out, stack)
        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                out.append(config.newline + config.indent_for(frame.depth - 1) + frame.closer)
                continue

            key, item = entry
            out.append(("," if frame.count else "") + config.newline + config.indent_for(frame.depth))
            frame.count += 1
            if key is not None:
                out.append(self._paint(config, config.key_color, quote(key)))
                out.append(separator)
            self._emit(config, item, frame.depth + 1, out, stack)
        return "".join(out)

    def _emit(self, config: FormatterConfig, value: JsonValue, depth: int,
              out: List[str], stack: List["_OpenContainer"]) -> None:
        # Scalars and empty containers are written at once; others are opened.
        if value.is_container():
            is_object = value.kind is ValueKind.OBJECT
            if not value.payload:
                out.append("{}" if is_object else "[]")
                return
            entries = iter(value.payload) if is_object else ((None, item) for item in value.payload)
            out.append("{" if is_object else "[")
            stack.append(_OpenContainer(entries, depth, "}" if is_object else "]"))
            return

        kind = value.kind
        if kind is ValueKind.NULL:
            out.append(self._paint(config, config.null_color, "null"))
        elif kind is ValueKind.BOOLEAN:
            out.append(self._paint(config, config.bool_color, "true" if value.payload else "false"))
        elif kind is ValueKind.NUMBER:
            out.append(self._paint(config, config.number_color, value.payload))
        elif kind is ValueKind.STRING:
            text = truncate(value.payload, config.string_max_length)
            out.append(self._paint(config, config.string_color, quote(text)))
        elif kind is ValueKind.UNSUPPORTED:
            type_name = type(value.payload).__name__
            self.logger.warning(f"Rendering placeholder for unsupported value of type {type_name}")
            out.append(f"<unsupported: {type_name}>")
        else:
            raise AssertionError(f"Unhandled value kind: {kind}")

    @staticmethod
    def _paint(config: FormatterConfig, style: Optional[Style], text: str) -> str:
        if config.disabled_color or style is None:
            return text
        return colorize(text, style, force=config.force_color)


class _OpenContainer:
    """Array or object whose entries are still being written."""

    __slots__ = ("entries", "depth", "closer", "count")

    def __init__(self, entries: Iterator[Tuple[Optional[str], JsonValue]], depth: int, closer: str):
        self.entries = entries
        self.depth = depth
        self.closer = closer
        self.count = 0


def truncate(text: str, max_length: int) -> str:
    """
    Cut ``text`` to ``max_length`` code points and mark the cut.

    A string whose length reaches the limit is cut and gets the ``...``
    marker; a limit of zero or less leaves the text alone.
    """
    if max_length > 0 and len(text) >= max_length:
        return text[:max_length] + ELLIPSIS
    return text


_ESCAPED_CHARS = re.compile("[\u2028\u2029\ud800-\udfff]")


def quote(text: str) -> str:
    """JSON string literal for ``text``, without ASCII or HTML escaping."""
    encoded = json.dumps(text, ensure_ascii=False)
    # Line separators and lone surrogates stay escaped.
    return _ESCAPED_CHARS.sub(lambda match: "\\u%04x" % ord(match.group()), encoded)
