"""RGB colours and the colour arithmetic used to derive interface colours."""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass, replace

_CHANNEL_MAX = 255
_WIDE_MAX = 0xFFFF
_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for field_name in ("red", "green", "blue", "alpha"):
            _check_channel(field_name, getattr(self, field_name))

    @property
    def red_f(self) -> float:
        return self.red / _CHANNEL_MAX

    @property
    def green_f(self) -> float:
        return self.green / _CHANNEL_MAX

    @property
    def blue_f(self) -> float:
        return self.blue / _CHANNEL_MAX

    @property
    def alpha_f(self) -> float:
        return self.alpha / _CHANNEL_MAX

    @property
    def is_black(self) -> bool:
        """True for opaque black."""
        return (self.red, self.green, self.blue, self.alpha) == (0, 0, 0, 255)

    def name(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def name_argb(self) -> str:
        """Return the colour as ``#aarrggbb``."""
        return f"#{self.alpha:02x}{self.red:02x}{self.green:02x}{self.blue:02x}"

    def with_alpha(self, alpha: int) -> Color:
        """Return a copy of this colour with the given alpha channel."""
        _check_channel("alpha", alpha)
        return replace(self, alpha=alpha)

    def darker(self, factor: int = 200) -> Color:
        """Return a darker colour; a factor of 100 leaves it unchanged.

        Factors below 100 lighten the colour instead, and factors of zero
        or less return the colour as it is.
        """
        if factor <= 0:
            return self
        if factor < 100:
            return self._lighter(10000 // factor)
        hue, saturation, value = self._hsv_wide()
        value = (value * 100) // factor
        return self._from_hsv_wide(hue, saturation, value)

    def _lighter(self, factor: int) -> Color:
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 // factor)
        hue, saturation, value = self._hsv_wide()
        value = (factor * value) // 100
        if value > _WIDE_MAX:
            saturation = max(0, saturation - (value - _WIDE_MAX))
            value = _WIDE_MAX
        return self._from_hsv_wide(hue, saturation, value)

    def _hsv_wide(self) -> tuple[float, int, int]:
        hue, saturation, value = colorsys.rgb_to_hsv(self.red_f, self.green_f, self.blue_f)
        return hue, round(saturation * _WIDE_MAX), round(value * _WIDE_MAX)

    def _from_hsv_wide(self, hue: float, saturation: int, value: int) -> Color:
        red, green, blue = colorsys.hsv_to_rgb(hue, saturation / _WIDE_MAX, value / _WIDE_MAX)
        return Color(
            round(red * _CHANNEL_MAX),
            round(green * _CHANNEL_MAX),
            round(blue * _CHANNEL_MAX),
            self.alpha,
        )


def parse_color(text: str) -> Color:
    """Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb`` into a colour."""
    match = _HEX_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"not a colour: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        red, green, blue = (int(d * 2, 16) for d in digits)
        return Color(red, green, blue)
    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(values) == 3:
        return Color(*values)
    alpha, red, green, blue = values
    return Color(red, green, blue, alpha)


def _channel_from_f(name: str, value: float) -> int:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
    return round(value * _WIDE_MAX) >> 8


def from_rgb_f(red: float, green: float, blue: float) -> Color:
    """Build an opaque colour from channels in the range 0.0 to 1.0."""
    return Color(
        _channel_from_f("red", red),
        _channel_from_f("green", green),
        _channel_from_f("blue", blue),
    )


def luminance(color: Color) -> float:
    """Return how light the colour looks, from 0.0 (dark) to 1.0 (light).

    Black is treated as the darkest non-zero colour so that ratios of
    luminances stay defined.
    """
    c = Color(1, 1, 1) if color.is_black else color
    return 0.30 * c.red_f + 0.59 * c.green_f + 0.11 * c.blue_f


def lighten_to_match_contrast_ratio(
    foreground: Color, background: Color, contrast_ratio: float
) -> Color:
    """Lighten a dark foreground until it has the given contrast to the background.

    A foreground that is not darker than the background is returned as it is.
    """
    fg_brightness = luminance(foreground)
    bg_brightness = luminance(background)

    if bg_brightness <= fg_brightness:
        return foreground

    actual_ratio = bg_brightness / fg_brightness
    color_factor = contrast_ratio / actual_ratio
    base = Color(1, 1, 1) if foreground.is_black else foreground

    return from_rgb_f(
        min(base.red_f / color_factor, 1.0),
        min(base.green_f / color_factor, 1.0),
        min(base.blue_f / color_factor, 1.0),
    )


def _blend_channel(foreground: int, background: int, alpha: float) -> int:
    return int(foreground * alpha + background * (1.0 - alpha))


def apply_alpha(foreground: Color, background: Color, alpha: int) -> Color:
    """Blend the foreground over the background with the given 0-255 opacity."""
    if not 0 <= alpha <= _CHANNEL_MAX:
        raise ValueError(f"alpha value must be between 0 and 255, got {alpha}")
    normalized = alpha / 255.0
    return Color(
        _blend_channel(foreground.red, background.red, normalized),
        _blend_channel(foreground.green, background.green, normalized),
        _blend_channel(foreground.blue, background.blue, normalized),
    )