"""
color_model.py
──────────────
Canonical colour value used throughout the engine.

A ``Color`` is only ever built from a valid literal (hex, rgb/rgba, hsl/hsla or
a CSS colour name) or from explicit channel values; there is no "invalid
colour" instance. Callers that scan untrusted text use ``parse_color`` and
get ``None`` back instead of an exception.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .named_colors import CSS_NAMED_COLORS

# Convenience type aliases
RGBColor = Tuple[int, int, int]
HSLColor = Tuple[float, float, float]


class InvalidColorError(ValueError):
    """Raised when a string cannot be read as a colour."""


# ── Literal grammars ──────────────────────────────────────────────────────────

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

_RGB_RE = re.compile(
    r"^rgba?\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*"
    r"(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)

_HSL_RE = re.compile(
    r"^hsla?\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)%\s*,\s*(\d+(?:\.\d+)?)%\s*"
    r"(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)

_HEX_BY_NAME = CSS_NAMED_COLORS
_NAME_BY_HEX = {hex_: name for name, hex_ in reversed(list(CSS_NAMED_COLORS.items()))}


def _round(value: float) -> int:
    """Round half up; ``round()`` rounds half to even."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def _parse_alpha(raw: Optional[str]) -> float:
    if raw is None:
        return 1.0
    try:
        alpha = float(raw)
    except ValueError:
        raise InvalidColorError(f"Invalid alpha value: {raw!r}") from None
    if not 0.0 <= alpha <= 1.0:
        raise InvalidColorError(f"Alpha out of range (0-1): {raw!r}")
    return alpha


def _format_alpha(alpha: float) -> str:
    return f"{alpha:g}"


# ── Colour value ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Color:
    """An sRGB colour with 0-255 integer channels and a 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidColorError(f"Channel out of range (0-255): {channel}")
        if not 0.0 <= self.a <= 1.0:
            raise InvalidColorError(f"Alpha out of range (0-1): {self.a}")

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, value: str) -> "Color":
        """
        Read *value* as a colour literal.

        Accepts ``#rgb``/``#rrggbb``/``#rrggbbaa`` (``#`` optional),
        ``rgb()``/``rgba()`` with 0-255 integer channels, ``hsl()``/``hsla()``
        with a degree hue and percentage saturation/lightness, and any CSS
        colour name (case-insensitive).

        Raises
        ------
        InvalidColorError
            If *value* is not a well-formed, in-range colour.
        """
        if not isinstance(value, str):
            raise InvalidColorError(f"Expected a string, got {type(value).__name__}")
        text = value.strip()
        lowered = text.lower()

        if lowered in _HEX_BY_NAME:
            return cls._from_hex_digits(_HEX_BY_NAME[lowered][1:])

        m = _HEX_RE.match(text)
        if m:
            return cls._from_hex_digits(m.group(1))

        m = _RGB_RE.match(text)
        if m:
            r, g, b = (int(v) for v in m.group(1, 2, 3))
            if max(r, g, b) > 255:
                raise InvalidColorError(f"RGB channel out of range: {value!r}")
            return cls(r, g, b, _parse_alpha(m.group(4)))

        m = _HSL_RE.match(text)
        if m:
            h, s, l = (float(v) for v in m.group(1, 2, 3))
            if h > 360 or s > 100 or l > 100:
                raise InvalidColorError(f"HSL component out of range: {value!r}")
            return cls.from_hsl(h, s / 100, l / 100, _parse_alpha(m.group(4)))

        raise InvalidColorError(f"Not a colour: {value!r}")

    @classmethod
    def _from_hex_digits(cls, digits: str) -> "Color":
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(r, g, b, a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        """Build a colour from hue in degrees and saturation/lightness in 0-1."""
        r, g, b = colorsys.hls_to_rgb((h % 360) / 360, _clamp(l), _clamp(s))
        return cls(_round(r * 255), _round(g * 255), _round(b * 255), a)

    # ── Conversions ───────────────────────────────────────────────────────────

    @property
    def rgb(self) -> RGBColor:
        return (self.r, self.g, self.b)

    def to_hex(self, with_alpha: bool = False) -> str:
        """Lowercase ``#rrggbb``, or ``#rrggbbaa`` when *with_alpha* is set."""
        base = "#{:02x}{:02x}{:02x}".format(*self.rgb)
        if with_alpha:
            return base + "{:02x}".format(_round(self.a * 255))
        return base

    def to_hsl(self) -> HSLColor:
        """Return ``(hue 0-360, saturation 0-1, lightness 0-1)``."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        return (h * 360, s, l)

    def to_rgb_string(self, alpha: Optional[bool] = None) -> str:
        """
        ``rgb(r,g,b)`` or ``rgba(r,g,b,a)``.

        With *alpha* left as ``None`` the ``rgba`` form is used only for
        translucent colours.
        """
        use_alpha = self.a < 1 if alpha is None else alpha
        if use_alpha:
            return f"rgba({self.r},{self.g},{self.b},{_format_alpha(self.a)})"
        return f"rgb({self.r},{self.g},{self.b})"

    def to_hsl_string(self, alpha: Optional[bool] = None) -> str:
        """``hsl(h,s%,l%)`` or ``hsla(h,s%,l%,a)`` with whole-number components."""
        h, s, l = self.to_hsl()
        body = f"{_round(h)},{_round(s * 100)}%,{_round(l * 100)}%"
        use_alpha = self.a < 1 if alpha is None else alpha
        if use_alpha:
            return f"hsla({body},{_format_alpha(self.a)})"
        return f"hsl({body})"

    def to_name(self) -> Optional[str]:
        """Exact CSS colour name for an opaque colour, or ``None``."""
        if self.a < 1:
            return None
        return _NAME_BY_HEX.get(self.to_hex())

    # ── Colour math ───────────────────────────────────────────────────────────

    def luminance(self) -> float:
        """
        WCAG 2.1 relative luminance (0 = absolute black, 1 = absolute white).
        """
        def _lin(c: int) -> float:
            v = c / 255.0
            return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

        r, g, b = (_lin(c) for c in self.rgb)
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def is_dark(self) -> bool:
        """True if light text reads better on this colour than dark text."""
        return self.luminance() < 0.40

    def with_lightness(self, lightness: float) -> "Color":
        """Same hue and saturation, HSL lightness replaced by *lightness* (0-1)."""
        h, s, _ = self.to_hsl()
        return Color.from_hsl(h, s, lightness, self.a)

    def __str__(self) -> str:
        return self.to_hex(with_alpha=self.a < 1)


# ── Lenient helpers ───────────────────────────────────────────────────────────

def parse_color(value: str) -> Optional[Color]:
    """Like ``Color.parse`` but returns ``None`` for anything invalid."""
    try:
        return Color.parse(value)
    except InvalidColorError:
        return None


def is_valid_color(value: str) -> bool:
    return parse_color(value) is not None
