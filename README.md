# quillpad

The model layer of a distraction-free Markdown editor. It does not depend on
any GUI toolkit.

## What it contains

- **Colours** (`quillpad.color`): the frozen `Color` dataclass. It is RGBA with
  8 bits per channel and has `name()` (`#rrggbb`), `name_argb()` (`#aarrggbb`),
  `darker(factor)` and `with_alpha(alpha)`. The module also has `parse_color`
  for `#rgb`, `#rrggbb` and `#aarrggbb`, `from_rgb_f`, `luminance`,
  `lighten_to_match_contrast_ratio` and `apply_alpha`. Values out of range
  raise `ValueError`.
- **Themes** (`quillpad.theme`): the frozen `ColorScheme` dataclass and
  `Theme`. A `Theme` has a name, a light colour scheme, an optional dark
  scheme and a read-only flag. If no dark scheme is given, the light scheme
  is used for it and `has_dark_color_scheme` is false.
  `set_dark_color_scheme` sets the dark scheme and marks it as available.
  `copy()` returns a copy.
- **Style sheets** (`quillpad.stylesheet`): `StyleSheetBuilder` takes a
  `ColorScheme`, a rounded-corners flag, two `FontSpec` fonts (text and code)
  and an optional preview CSS template with `$name` placeholders. From them it
  builds the style sheets for the editor, splitter, status bar, status-bar
  widgets, status label, find/replace bar, sidebar, sidebar widgets and
  layout, and the HTML preview CSS. It also exposes the derived
  `interface_text_color` and `faint_color`.
  - The builder writes a small PNG arrow icon to a temporary file, which the
    status-bar style sheet refers to.
  - `clear_cache()` removes the icon file written by the previous builder.
- **Signals** (`quillpad.observer`): `Signal` has `connect`, `disconnect` and
  `emit`. `StringObserver` emits `text_changed` every time its `text` is
  assigned.
- **Session statistics** (`quillpad.session_statistics`): `SessionStatistics`
  tracks the words written in a session, words per minute, writing time and
  idle percentage. It publishes each of them through a `Signal`.
  - You drive time by calling `tick()` once every `timer_interval_ms`
    milliseconds. The interval is 1000 ms and becomes 5000 ms once the pace
    is above zero.
- **Statistics indicator** (`quillpad.statistics_indicator`):
  - `StatisticsIndicator` holds a display text for every `Statistic` and
    tracks which one is shown.
  - The formatting functions (`word_count_text`, `read_time_text`,
    `write_time_text` and so on) produce texts such as `"12 words"` or
    `"01:05 write time"`.
  - `attach_session` makes the indicator follow a `SessionStatistics`.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from quillpad.color import parse_color, apply_alpha
from quillpad.session_statistics import SessionStatistics
from quillpad.statistics_indicator import Statistic, StatisticsIndicator

white = parse_color("#ffffff")
black = parse_color("#000000")
print(apply_alpha(black, white, 128).name())  # a mid grey

stats = SessionStatistics()
indicator = StatisticsIndicator(Statistic.WORDS_ADDED)
indicator.attach_session(stats)

stats.start_new_session(100)
stats.on_typing_resumed()
stats.on_document_word_count_changed(130)
stats.tick()
print(stats.word_count)        # 30
print(indicator.current_text)  # 30 words added
```

## What it does not do

- quillpad has no editor window, no command-line program and no rendering of
  Markdown.
- It does not count words, sentences or reading time in a document. The
  document statistics reach a `StatisticsIndicator` only through `set_value`.
- The `quillpad.spelling` subpackage is empty. No dictionaries and no spell
  checking are provided.
- Themes are not loaded from disk or saved to disk.