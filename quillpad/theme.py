"""Themes: named pairs of light and dark colour schemes."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field

from quillpad.color import Color

_BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class ColorScheme:
    """The colours used to paint the editor and the interface around it."""

    foreground: Color = _BLACK
    background: Color = _BLACK
    selection: Color = _BLACK
    cursor: Color = _BLACK
    emphasis_markup: Color = _BLACK
    list_markup: Color = _BLACK
    heading_text: Color = _BLACK
    emphasis_text: Color = _BLACK
    blockquote_text: Color = _BLACK
    link: Color = _BLACK
    error: Color = _BLACK
    heading_markup: Color = _BLACK
    divider: Color = _BLACK
    image: Color = _BLACK
    inline_html: Color = _BLACK
    blockquote_markup: Color = _BLACK
    code_text: Color = _BLACK
    code_markup: Color = _BLACK


@dataclass
class Theme:
    """A named theme with a light colour scheme and an optional dark one.

    When no dark scheme is given, the dark scheme is the light scheme the
    theme was created with, and ``has_dark_color_scheme`` is false.
    """

    name: str = ""
    light_colors: ColorScheme = field(default_factory=ColorScheme)
    dark_colors: ColorScheme | None = None
    read_only: bool = False
    has_dark_color_scheme: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.dark_colors is None:
            self.dark_colors = self.light_colors
            self.has_dark_color_scheme = False
        else:
            self.has_dark_color_scheme = True

    def set_dark_color_scheme(self, colors: ColorScheme) -> None:
        """Set the dark mode colour scheme and mark it as available."""
        self.dark_colors = colors
        self.has_dark_color_scheme = True

    def copy(self) -> Theme:
        """Return an independent copy of this theme."""
        return _copy.copy(self)