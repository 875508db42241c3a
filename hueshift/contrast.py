"""
contrast.py
───────────
WCAG 2.1 contrast ratios, AA/AAA classification, and lightness-only
suggestions for colours that fail a target level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .color_model import Color, parse_color

logger = logging.getLogger(__name__)

ColorLike = Union[str, Color]

TARGET_RATIOS: Dict[str, float] = {"AA": 4.5, "AAA": 7.0}
SWEEP_STEPS = 100


@dataclass(frozen=True)
class LevelCompliance:
    normal: bool   # body text
    large:  bool   # >= 18pt, or >= 14pt bold


@dataclass(frozen=True)
class WCAGCompliance:
    aa:  LevelCompliance
    aaa: LevelCompliance


@dataclass(frozen=True)
class Suggestion:
    suggested_hex: str
    ratio:         float


def _coerce(value: ColorLike) -> Optional[Color]:
    if isinstance(value, Color):
        return value
    return parse_color(value)


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """
    ``(L_light + 0.05) / (L_dark + 0.05)``: 1.0 for identical colours up to
    21.0 for black on white. Returns ``0.0`` if either colour is invalid.
    """
    a, b = _coerce(color_a), _coerce(color_b)
    if a is None or b is None:
        return 0.0
    lum_a, lum_b = a.luminance(), b.luminance()
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def wcag_compliance(ratio: float) -> WCAGCompliance:
    return WCAGCompliance(
        aa=LevelCompliance(normal=ratio >= 4.5, large=ratio >= 3.0),
        aaa=LevelCompliance(normal=ratio >= 7.0, large=ratio >= 4.5),
    )


def suggest_accessible_alternative(
    color: ColorLike,
    background: ColorLike,
    target_level: str = "AA",
) -> Optional[Suggestion]:
    """
    Nearest variant of *color* that meets *target_level* against *background*.

    Only HSL lightness moves; hue and saturation stay fixed so the result is
    recognisably the same colour. Lightness is swept in 101 steps towards
    white on dark backgrounds (luminance < 0.5) and towards black otherwise.

    Returns the first step that meets the target, else the best step found if
    it beats the original ratio, else ``None``.
    """
    if target_level not in TARGET_RATIOS:
        raise ValueError(f"target_level must be 'AA' or 'AAA', got {target_level!r}")

    fg, bg = _coerce(color), _coerce(background)
    if fg is None or bg is None:
        return None

    target = TARGET_RATIOS[target_level]
    current = contrast_ratio(fg, bg)
    if current >= target:
        return Suggestion(fg.to_hex(), current)

    h, s, l = fg.to_hsl()
    go_lighter = bg.luminance() < 0.5

    best: Optional[Suggestion] = None
    for step in range(SWEEP_STEPS + 1):
        t = step / SWEEP_STEPS
        lightness = l + (1 - l) * t if go_lighter else l * (1 - t)
        candidate = Color.from_hsl(h, s, lightness)
        ratio = contrast_ratio(candidate, bg)
        if ratio >= target:
            logger.debug("%s meets %s at step %d (%.2f:1)", candidate.to_hex(), target_level, step, ratio)
            return Suggestion(candidate.to_hex(), ratio)
        if ratio > (best.ratio if best else current):
            best = Suggestion(candidate.to_hex(), ratio)

    return best
