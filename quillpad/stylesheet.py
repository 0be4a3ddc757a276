"""Widget style sheets and preview CSS derived from a colour scheme."""

from __future__ import annotations

import math
import re
import struct
import tempfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from quillpad.color import (
    Color,
    apply_alpha,
    lighten_to_match_contrast_ratio,
    luminance,
)
from quillpad.theme import ColorScheme

_FOUNDRY_PATTERN = re.compile(r"\[.*\]")
_FONT_SIZE = 11
_ICON_SIZE = 16


@dataclass(frozen=True)
class FontSpec:
    """A font family and point size."""

    family: str
    point_size: int

    def clean_family(self) -> str:
        """Return the family name without any bracketed foundry suffix."""
        return _FOUNDRY_PATTERN.sub("", self.family).strip()


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + kind
        + data
        + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)
    )


def _segment_distance(px: float, py: float, a: tuple, b: tuple) -> float:
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    t = max(0.0, min(1.0, ((px - ax) * dx + (py - ay) * dy) / (dx * dx + dy * dy)))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


def _arrow_icon_png(color: Color) -> bytes:
    """Render a 16x16 circled up-chevron in the given colour as PNG bytes."""
    centre = (_ICON_SIZE - 1) / 2
    left, apex, right = (4.0, 9.5), (7.5, 6.0), (11.0, 9.5)
    rows = []
    for y in range(_ICON_SIZE):
        row = bytearray(b"\x00")
        for x in range(_ICON_SIZE):
            inside = math.hypot(x - centre, y - centre) <= centre
            on_chevron = min(
                _segment_distance(x, y, left, apex),
                _segment_distance(x, y, apex, right),
            ) <= 1.0
            if inside and not on_chevron:
                row += bytes((color.red, color.green, color.blue, 255))
            else:
                row += b"\x00\x00\x00\x00"
        rows.append(bytes(row))
    header = struct.pack(">IIBBBBB", _ICON_SIZE, _ICON_SIZE, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(b"".join(rows)))
        + _png_chunk(b"IEND", b"")
    )


def _rgba(color: Color) -> str:
    return f"rgba({color.red}, {color.green}, {color.blue}, {color.alpha_f:.6g})"


class StyleSheetBuilder:
    """Builds the application's style sheets from a colour scheme.

    ``preview_template`` is the CSS for the HTML preview with ``$name``
    placeholders; when it is empty the preview CSS is empty too.
    Each builder writes the status bar drop-down arrow icon to a temporary
    PNG file and removes the one written by the previous builder.
    """

    _arrow_icon_path: ClassVar[str] = ""

    def __init__(
        self,
        colors: ColorScheme,
        rounded_corners: bool,
        preview_text_font: FontSpec,
        preview_code_font: FontSpec,
        preview_template: str = "",
    ) -> None:
        self._text_font = preview_text_font
        self._code_font = preview_code_font

        self._background = colors.background
        self._foreground = colors.foreground
        self._accent = colors.link
        self._selected_bg = colors.selection

        if luminance(self._background) > luminance(self._foreground):
            interface = lighten_to_match_contrast_ratio(
                self._foreground, colors.background, 2.0
            )
            self.interface_text_color = apply_alpha(interface, colors.background, 220)
            self._selected_fg = self._foreground
            if luminance(self._selected_bg) < 0.5:
                self._selected_fg = self._background
        else:
            self.interface_text_color = self._foreground.darker(120)
            self._selected_fg = self._foreground
            if luminance(self._selected_bg) >= 0.5:
                self._selected_fg = self._background

        self._pressed = apply_alpha(self.interface_text_color, colors.background, 30)
        self._hover = self._pressed
        self.faint_color = apply_alpha(colors.foreground, colors.background, 30)

        self._heading = colors.heading_text
        self._code = colors.code_text
        self._link = colors.link
        self._blockquote = colors.blockquote_text
        self._thick_border = colors.emphasis_markup

        self.clear_cache()
        self.arrow_icon_path = self._write_arrow_icon()

        self.scroll_bar_style_sheet = self._build_scroll_bar(rounded_corners)
        self.editor_style_sheet = self._build_editor()
        self.splitter_style_sheet = self._build_splitter()
        self.status_bar_style_sheet = self._build_status_bar()
        self.status_bar_widgets_style_sheet = self._build_status_bar_widgets()
        self.find_replace_style_sheet = self._build_find_replace()
        self.layout_style_sheet = self._build_layout()
        self.sidebar_style_sheet = self._build_sidebar()
        self.sidebar_widget_style_sheet = self._build_sidebar_widget()
        self.status_label_style_sheet = self._build_status_label()
        self.html_preview_css = self._build_html_preview_css(
            preview_template, rounded_corners
        )

    def clear_cache(self) -> None:
        """Remove the temporary arrow icon file written by the last builder."""
        path = type(self)._arrow_icon_path
        if path:
            Path(path).unlink(missing_ok=True)

    def _write_arrow_icon(self) -> str:
        try:
            with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as handle:
                handle.write(_arrow_icon_png(self.interface_text_color))
                path = handle.name
        except OSError:
            return ""
        type(self)._arrow_icon_path = path
        return path

    def _build_scroll_bar(self, rounded_corners: bool) -> str:
        radius = "3px" if rounded_corners else "0px"
        scroll = self._foreground.with_alpha(50).name_argb()
        accent = self._accent.name()
        return (
            "QAbstractScrollArea::corner { background: transparent } "
            "QAbstractScrollArea { padding: 3px 3px 0px 3px; margin: 0 } "
            "QScrollBar::horizontal { border: 0; background: transparent; "
            "height: 16px; margin: 5px } "
            f"QScrollBar::handle:horizontal {{ border: 0; background: {scroll}"
            f"; min-width: 50px; border-radius: {radius}; }} "
            "QScrollBar::vertical { border: 0; background: transparent; "
            "width: 16px; margin: 5px } "
            f"QScrollBar::vertical:hover {{ background: {scroll}"
            f"; border-radius: {radius} }} "
            f"QScrollBar::horizontal:hover {{ background: {scroll}"
            f"; border-radius: {radius} }} "
            f"QScrollBar::handle:vertical {{ border: 0; background: {scroll}"
            f"; min-height: 50px; border-radius: {radius}; }} "
            f"QScrollBar::handle:vertical:hover {{ background: {accent} }} "
            f"QScrollBar::handle:horizontal:hover {{ background: {accent} }} "
            "QScrollBar::add-line { background: transparent; border: 0 } "
            "QScrollBar::sub-line { background: transparent; border: 0 } "
        )

    def _build_layout(self) -> str:
        return (
            f"#editorLayoutArea {{ background-color: {self._background.name()}"
            "; margin: 0; border: 0 }"
        )

    def _build_splitter(self) -> str:
        return (
            "QSplitter::handle { border: 0; padding: 0; margin: 0; "
            f"background-color: {self.faint_color.name()} }} "
            "QSplitter::handle:vertical { height: 1px } "
            "QSplitter::handle:horizontal { width: 1px } "
        )

    def _build_editor(self) -> str:
        return (
            "QPlainTextEdit { border: 0; margin: 0; padding: 5px; "
            f"background-color: {self._background.name()}"
            f"; color: {self._foreground.name()}"
            f"; selection-color: {self._selected_fg.name()}"
            f"; selection-background-color: {self._selected_bg.name()} }} "
            + self.scroll_bar_style_sheet
        )

    def _build_status_bar(self) -> str:
        return (
            "QStatusBar { margin: 0; padding: 0; border-top: 1px solid "
            f"{self.faint_color.name()}"
            "; border-left: 0; border-right: 0; border-bottom: 0; background: "
            f"{self._background.name()}"
            f"; color: {self.interface_text_color.name()} }} "
        )

    def _build_status_bar_widgets(self) -> str:
        interface = self.interface_text_color.name()
        background = self._background.name()
        foreground = self._foreground.name()
        pressed = self._pressed.name()
        return (
            f"QLabel {{ font-size: {_FONT_SIZE}"
            "pt; margin: 0px; padding: 5px; border: 0; background: transparent; "
            f"color: {interface} }} "
            "QPushButton { padding: 5 5 5 5; margin: 0; border: 0; "
            "border-radius: 5px; "
            f"color: {interface}; background-color: {background}"
            "; font-size: 16px; width: 32px } "
            "QPushButton:pressed, QPushButton:flat, QPushButton:checked, "
            "QPushButton:hover { padding: 5 5 5 5; margin: 0; "
            f"color: {interface}; background-color: {pressed} }} "
            f"QPushButton#showSidebarButton:hover {{ color: {foreground}"
            "; background-color: transparent }"
            "QComboBox {"
            "    height: 22px;"
            "    border: 0px;"
            "    margin: 0;"
            "    padding: 0;"
            f"    color: {interface}; "
            f"    background-color: {background}; "
            "} "
            "QComboBox:hover {"
            f"    border-bottom: 2px solid {self._accent.name()};"
            "} "
            "QListView {"
            "    padding: 0px; "
            "    margin: 0px; "
            f"    color: {foreground};"
            f"    background-color: {background}; "
            "} "
            "QListView::item { background-color: transparent; } "
            "QListView::item:selected {"
            f"    background-color: {self._selected_bg.name()};"
            f"    color: {self._selected_fg.name()};"
            " } "
            "QComboBox::drop-down {"
            "    border: 0px;"
            "    margin: 0;"
            "    padding: 0;"
            "    height: 20px; "
            "    width: 20px; "
            "} "
            "QComboBox::down-arrow { "
            "    border: 0px;"
            "    margin: 0;"
            "    padding: 0px;"
            "    height: 14px; "
            "    width: 14px; "
            f"    image: url({self.arrow_icon_path});"
            "} "
            "QComboBox::drop-down:hover { "
            "    border-radius: 10px;"
            f"    background-color: {pressed}; "
            "} "
        )

    def _build_status_label(self) -> str:
        return (
            f"color: {self.interface_text_color.name()}"
            f"; background-color: {self._hover.name()}"
            "; border-radius: 5px; padding: 3px"
        )

    def _build_find_replace(self) -> str:
        interface = self.interface_text_color.name()
        pressed = self._pressed.name()
        foreground = self._foreground.name()
        return (
            f"QLabel {{ font-size: {_FONT_SIZE}"
            "pt; margin: 0px; padding: 5px; border: 0; background: transparent; "
            f"color: {interface} }} "
            "QPushButton { font-size: 16px; padding: 5 5 5 5; margin: 0; "
            f"border: 0; border-radius: 5px; color: {interface}"
            f"; background-color: {pressed}; min-width: 16px }} "
            'QPushButton[checkable="true"] { font-size: 16px; '
            "background: transparent; ; min-width: 32px; height: 16px } "
            "QPushButton:pressed, QPushButton:checked, QPushButton:hover "
            f"{{ background-color: {pressed} }} "
            "QPushButton:flat { background: transparent; } "
            f"QPushButton:hover {{ color: {foreground} }} "
            "QPushButton#findReplaceCloseButton { font-size: 12px } "
            f"QLineEdit {{ color: {foreground}"
            f"; background-color: {pressed}"
            f"; border: 1px solid {pressed}"
            "; border-radius: 3px "
            f"; selection-color: {self._selected_fg.name()}"
            f"; selection-background-color: {self._selected_bg.name()} }} "
        )

    def _build_sidebar(self) -> str:
        background = self._background.name()
        interface = self.interface_text_color.name()
        accent = self._accent.name()
        foreground = self._foreground.name()
        pressed = self._pressed.name()
        return (
            "#sidebar { border: 0; margin: 0; padding: 0; "
            f"background-color: {background} }} "
            "QStackedWidget { border: 0; padding: 1; margin: 0; "
            f"; background-color: {background}; border-width: 0px; }} "
            'QPushButton[checkable="true"] { icon-size: 22px; min-width: 40px; '
            "max-width: 40px; height: 40px; outline: none; margin: 0; "
            f"padding: 0; border: 0; background-color: {background}"
            f"; color: {interface}"
            "; border-width: 0px; border-left-width: 3px; border-style: solid; "
            f"border-color: {background}"
            f" }} QPushButton:checked {{ border-color: {accent}"
            f"; color: {foreground}; background-color: {pressed}"
            f" }} QPushButton:checked:hover {{ border-color: {accent}"
            f"; color: {foreground}; background-color: {pressed} }} "
            'QPushButton[checkable="false"] { icon-size: 22px; padding: 0; '
            "margin: 0; border: 0; border-radius: 5px; "
            f"background-color: {background}; color: {interface}"
            "; width: 40px; height: 40px } "
            f"QPushButton:hover {{ color: {foreground}"
            "; background-color: transparent }"
            f"  QMenu {{ color: {foreground}; background-color: {background} }} "
            "QMenu::item { background-color: transparent; } "
            "QMenu::item:selected { background-color: "
            f"{self._selected_bg.name()}; color: {self._selected_fg.name()} }} "
        )

    def _build_sidebar_widget(self) -> str:
        background = self._background.name()
        foreground = self._foreground.name()
        return (
            "QListWidget { outline: none; border: 0; padding: 1; "
            f"background-color: {background}; color: {foreground}"
            f"; font-size: {_FONT_SIZE}pt; font-weight: normal }} "
            "QListWidget::item { border: 0; padding: 1 0 1 0; margin: 0; "
            f"background-color: {background}; color: {foreground}"
            "; font-weight: normal } "
            "QListWidget::item:selected { border-radius: 0px; "
            f"color: {self._selected_fg.name()}"
            f"; background-color: {self._selected_bg.name()} }} "
            "QLabel { border: 0; padding: 0; margin: 0; "
            "background-color: transparent; "
            f"font-size: {_FONT_SIZE}pt; color: {foreground} }} "
            + self.scroll_bar_style_sheet
        )

    def _build_html_preview_css(self, template: str, rounded_corners: bool) -> str:
        if not template:
            return ""
        scroll = self._foreground.with_alpha(50)
        radius = "3px" if rounded_corners else "0px"
        replacements = (
            ("$textColor", self._foreground.name()),
            ("$backgroundColor", self._background.name()),
            ("$textFont", self._text_font.clean_family()),
            ("$fontSize", f"{self._text_font.point_size}pt"),
            ("$headingColor", self._heading.name()),
            ("$faintColor", self.faint_color.name()),
            ("$blockBackground", self.faint_color.name()),
            ("$codeColor", self._code.name()),
            ("$linkColor", self._link.name()),
            ("$blockquoteColor", self._blockquote.name()),
            ("$thickBorderColor", self._thick_border.name()),
            ("$scrollBarThumbColor", _rgba(scroll)),
            ("$scrollBarThumbHoverColor", self._accent.name()),
            ("$scrollBarTrackColor", _rgba(scroll)),
            ("$scrollBarBorderRadius", radius),
            ("$monospaceFont", self._code_font.clean_family()),
            ("$codeFontSize", f"{self._code_font.point_size}pt"),
        )
        css = template
        for placeholder, value in replacements:
            css = css.replace(placeholder, value)
        return css