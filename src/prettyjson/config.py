"""Rendering configuration."""

from dataclasses import dataclass, field, replace
from typing import Optional

from .types import Style


@dataclass
class FormatterConfig:
    """
    Rendering parameters for ``ValueRenderer``.

    Defaults are tuned for a color terminal. Every field may be changed
    between render calls; nothing is validated here, and an ``indent`` of
    zero or less simply disables indentation.

    Attributes:
        key_color: Style for object keys
        string_color: Style for string values
        bool_color: Style for ``true``/``false``
        number_color: Style for numbers
        null_color: Style for ``null``
        string_max_length: Truncate string values to this many code points
            (0 disables truncation)
        disabled_color: Emit plain text regardless of the styles above
        force_color: Color even when stdout is not a terminal
        indent: Spaces per nesting level
        newline: Line separator; an empty string gives single-line output
    """
    key_color: Optional[Style] = field(default_factory=lambda: Style("blue", ("bold",)))
    string_color: Optional[Style] = field(default_factory=lambda: Style("green", ("bold",)))
    bool_color: Optional[Style] = field(default_factory=lambda: Style("yellow", ("bold",)))
    number_color: Optional[Style] = field(default_factory=lambda: Style("cyan", ("bold",)))
    null_color: Optional[Style] = field(default_factory=lambda: Style("black", ("bold",)))
    string_max_length: int = 0
    disabled_color: bool = False
    force_color: bool = False
    indent: int = 2
    newline: str = "\n"

    @classmethod
    def plain(cls) -> "FormatterConfig":
        """Default configuration with colors disabled."""
        return cls(disabled_color=True)

    @classmethod
    def compact(cls) -> "FormatterConfig":
        """Single-line configuration with no incidental whitespace."""
        return cls(indent=0, newline="")

    def copy(self, **changes) -> "FormatterConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    @property
    def is_compact(self) -> bool:
        return self.newline == ""

    def indent_for(self, depth: int) -> str:
        """Indentation string for the given nesting depth."""
        return " " * max(0, self.indent * depth)
