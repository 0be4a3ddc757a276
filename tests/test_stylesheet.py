from pathlib import Path

import pytest

from quillpad.color import Color, parse_color
from quillpad.stylesheet import FontSpec, StyleSheetBuilder
from quillpad.theme import ColorScheme

TEXT_FONT = FontSpec("Noto Serif [GOOG]", 12)
CODE_FONT = FontSpec("Fira Mono", 10)

LIGHT = ColorScheme(
    foreground=parse_color("#202020"),
    background=parse_color("#f0f0f0"),
    selection=parse_color("#303080"),
    link=parse_color("#0066cc"),
    heading_text=parse_color("#112233"),
    code_text=parse_color("#445566"),
    blockquote_text=parse_color("#778899"),
    emphasis_markup=parse_color("#aabbcc"),
)

DARK = ColorScheme(
    foreground=parse_color("#e0e0e0"),
    background=parse_color("#101010"),
    selection=parse_color("#d0d0f0"),
    link=parse_color("#66aaff"),
)


@pytest.fixture
def builders():
    made = []

    def make(colors=LIGHT, rounded=False, template=""):
        builder = StyleSheetBuilder(colors, rounded, TEXT_FONT, CODE_FONT, template)
        made.append(builder)
        return builder

    yield make
    for builder in made:
        Path(builder.arrow_icon_path).unlink(missing_ok=True)


def test_layout_uses_background(builders):
    builder = builders()
    assert builder.layout_style_sheet == (
        "#editorLayoutArea { background-color: #f0f0f0; margin: 0; border: 0 }"
    )


def test_editor_sheet_ends_with_scroll_bars(builders):
    builder = builders()
    assert builder.editor_style_sheet.startswith("QPlainTextEdit { border: 0; ")
    assert builder.editor_style_sheet.endswith(builder.scroll_bar_style_sheet)
    assert builder.sidebar_widget_style_sheet.endswith(builder.scroll_bar_style_sheet)
    assert "color: #202020" in builder.editor_style_sheet


def test_scroll_bar_radius(builders):
    assert "border-radius: 3px" in builders(rounded=True).scroll_bar_style_sheet
    assert "border-radius: 3px" not in builders(rounded=False).scroll_bar_style_sheet
    assert "border-radius: 0px" in builders(rounded=False).scroll_bar_style_sheet


def test_scroll_bar_uses_translucent_foreground(builders):
    builder = builders()
    assert LIGHT.foreground.with_alpha(50).name_argb() in builder.scroll_bar_style_sheet


def test_light_scheme_selected_text_uses_background(builders):
    # Dark selection on a light theme: selected text uses the background colour.
    builder = builders()
    assert "selection-color: #f0f0f0" in builder.editor_style_sheet


def test_dark_scheme_interface_color(builders):
    builder = builders(DARK)
    assert builder.interface_text_color == DARK.foreground.darker(120)
    # Light selection on a dark theme: selected text uses the background colour.
    assert "selection-color: #101010" in builder.editor_style_sheet


def test_faint_color_in_splitter_and_status_bar(builders):
    builder = builders()
    faint = builder.faint_color.name()
    assert builder.splitter_style_sheet.startswith(
        "QSplitter::handle { border: 0; padding: 0; margin: 0; background-color: " + faint
    )
    assert f"border-top: 1px solid {faint}" in builder.status_bar_style_sheet


def test_status_label_uses_interface_color(builders):
    builder = builders()
    assert builder.status_label_style_sheet.startswith(
        f"color: {builder.interface_text_color.name()}; background-color: "
    )
    assert builder.status_label_style_sheet.endswith("; border-radius: 5px; padding: 3px")


def test_arrow_icon_written_and_referenced(builders):
    builder = builders()
    path = Path(builder.arrow_icon_path)
    assert path.read_bytes().startswith(b"\x89PNG\r\n\x1a\n")
    assert f"image: url({builder.arrow_icon_path});" in builder.status_bar_widgets_style_sheet


def test_new_builder_removes_previous_icon(builders):
    first = builders()
    second = builders()
    assert not Path(first.arrow_icon_path).exists()
    assert Path(second.arrow_icon_path).exists()
    second.clear_cache()
    assert not Path(second.arrow_icon_path).exists()


def test_preview_css_empty_without_template(builders):
    assert builders().html_preview_css == ""


def test_preview_css_substitutes_fonts_and_colors(builders):
    template = "$textColor|$backgroundColor|$textFont|$fontSize|$monospaceFont|$codeFontSize"
    css = builders(template=template).html_preview_css
    assert css == "#202020|#f0f0f0|Noto Serif|12pt|Fira Mono|10pt"


def test_preview_css_scroll_and_radius(builders):
    template = "$scrollBarThumbColor;$scrollBarThumbHoverColor;$scrollBarBorderRadius"
    css = builders(rounded=True, template=template).html_preview_css
    assert css == "rgba(32, 32, 32, 0.196078);#0066cc;3px"


def test_preview_css_scheme_colors(builders):
    template = "$headingColor $codeColor $linkColor $blockquoteColor $thickBorderColor"
    css = builders(template=template).html_preview_css
    assert css == "#112233 #445566 #0066cc #778899 #aabbcc"


def test_font_spec_clean_family():
    assert FontSpec("Sans [Foundry]", 9).clean_family() == "Sans"
    assert FontSpec("Plain", 9).clean_family() == "Plain"


def test_interface_color_differs_from_black_foreground(builders):
    scheme = ColorScheme(foreground=Color(0, 0, 0), background=Color(255, 255, 255))
    builder = builders(scheme)
    assert builder.interface_text_color.red > 0