"""Terminal coloring for rendered tokens."""

from typing import Optional

from termcolor import colored

from .types import Style


def colorize(text: str, style: Optional[Style], force: bool = False) -> str:
    """
    Wrap ``text`` so that ``style`` is active for that span only.

    termcolor decides whether the terminal can show colors (TTY detection,
    ``NO_COLOR``, ``ANSI_COLORS_DISABLED``) unless ``force`` is set.

    Args:
        text: Token to wrap
        style: Style to apply; ``None`` returns the text untouched
        force: Emit escape sequences even when stdout is not a terminal

    Returns:
        Styled (or plain) text
    """
    if style is None:
        return text
    return colored(
        text,
        style.color,
        attrs=list(style.attrs) or None,
        force_color=True if force else None,
    )
