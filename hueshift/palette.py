"""
palette.py
──────────
Generates an 11-stop tonal palette (50 … 950) from a single seed colour.

Strategy
────────
  1. Pick a fixed lightness table for the requested curve.
  2. Scale the whole table so the entry at the target step equals the seed's
     own lightness.
  3. For each step, clamp the scaled lightness to 0–100 and soften
     saturation at the extremes (60 % for steps ≤ 100, 80 % for steps ≥ 900).
  4. Rebuild the colour with the seed hue and record its contrast against
     white and black.

Generation is deterministic for a given (seed, target step, curve).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

from .color_model import Color, InvalidColorError, parse_color
from .contrast import contrast_ratio, wcag_compliance

logger = logging.getLogger(__name__)

CurveType = Literal["linear", "natural", "accessibility"]

SHADE_STEPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Target lightness (%) per shade step
LIGHTNESS_CURVES: Dict[str, Dict[int, float]] = {
    "linear": {
        50: 95, 100: 90, 200: 80, 300: 70, 400: 60, 500: 50,
        600: 40, 700: 30, 800: 20, 900: 10, 950: 5,
    },
    "natural": {
        50: 96, 100: 92, 200: 85, 300: 75, 400: 65, 500: 55,
        600: 45, 700: 35, 800: 25, 900: 15, 950: 10,
    },
    "accessibility": {
        50: 97, 100: 94, 200: 88, 300: 78, 400: 68, 500: 55,
        600: 42, 700: 32, 800: 22, 900: 13, 950: 8,
    },
}

# Light / dark shade combinations worth checking for text-on-background use
CONTRAST_PAIRINGS: Tuple[Tuple[int, int], ...] = (
    (50, 900),
    (50, 950),
    (100, 800),
    (100, 900),
    (200, 700),
    (200, 800),
    (300, 700),
)

LIGHT_SATURATION = 0.6
DARK_SATURATION = 0.8

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


# ── Data classes ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ShadeCompliance:
    aa:  bool
    aaa: bool


@dataclass(frozen=True)
class PaletteShade:
    step:              int
    hex:               str
    hue:               float
    saturation_pct:    float
    lightness_pct:     float
    contrast_vs_white: float
    contrast_vs_black: float
    wcag_vs_white:     ShadeCompliance
    wcag_vs_black:     ShadeCompliance

    @property
    def color(self) -> Color:
        return Color.parse(self.hex)

    def label_color(self) -> str:
        """White or black, whichever reads better on this shade."""
        return "#ffffff" if self.contrast_vs_white >= self.contrast_vs_black else "#000000"


@dataclass
class TonalPalette:
    name:              str
    base_color_hex:    str
    target_shade_step: int
    curve_type:        str
    shades:            List[PaletteShade] = field(default_factory=list)

    def shade(self, step: int) -> Optional[PaletteShade]:
        return next((s for s in self.shades if s.step == step), None)

    def as_dict(self) -> Dict[str, str]:
        """``{"50": "#…", …, "950": "#…"}``"""
        return {str(s.step): s.hex for s in self.shades}


@dataclass(frozen=True)
class ContrastPair:
    light_step: int
    dark_step:  int
    ratio:      float
    aa:         bool
    aaa:        bool


# ── Generation ─────────────────────────────────────────────────────────────────

def _shade_compliance(ratio: float) -> ShadeCompliance:
    wcag = wcag_compliance(ratio)
    return ShadeCompliance(aa=wcag.aa.normal, aaa=wcag.aaa.normal)


def _saturation_for(step: int, base_saturation: float) -> float:
    if step <= 100:
        return base_saturation * LIGHT_SATURATION
    if step >= 900:
        return base_saturation * DARK_SATURATION
    return base_saturation


def generate_palette(
    base_color: str,
    name: str = "primary",
    target_shade: int = 500,
    curve: str = "natural",
) -> TonalPalette:
    """
    Build a ``TonalPalette`` whose *target_shade* reproduces *base_color*'s
    lightness.

    Raises
    ------
    InvalidColorError
        If *base_color* is not a valid colour.
    ValueError
        If *target_shade* or *curve* is not one of the known values.
    """
    seed = parse_color(base_color)
    if seed is None:
        raise InvalidColorError(f"Invalid color provided: {base_color!r}")
    if curve not in LIGHTNESS_CURVES:
        raise ValueError(f"Unknown curve {curve!r}; expected one of {sorted(LIGHTNESS_CURVES)}")
    if target_shade not in SHADE_STEPS:
        raise ValueError(f"Unknown shade step {target_shade!r}; expected one of {SHADE_STEPS}")

    table = LIGHTNESS_CURVES[curve]
    base_hue, base_sat, base_light = seed.to_hsl()
    scale = (base_light * 100) / table[target_shade]

    shades: List[PaletteShade] = []
    for step in SHADE_STEPS:
        lightness = max(0.0, min(100.0, table[step] * scale))
        color = Color.from_hsl(base_hue, _saturation_for(step, base_sat), lightness / 100)

        h, s, l = color.to_hsl()
        vs_white = contrast_ratio(color, WHITE)
        vs_black = contrast_ratio(color, BLACK)
        shades.append(PaletteShade(
            step=step,
            hex=color.to_hex(),
            hue=h,
            saturation_pct=s * 100,
            lightness_pct=l * 100,
            contrast_vs_white=vs_white,
            contrast_vs_black=vs_black,
            wcag_vs_white=_shade_compliance(vs_white),
            wcag_vs_black=_shade_compliance(vs_black),
        ))

    logger.debug("generated %s palette %r from %s (target %d)", curve, name, seed.to_hex(), target_shade)
    return TonalPalette(
        name=name,
        base_color_hex=seed.to_hex(),
        target_shade_step=target_shade,
        curve_type=curve,
        shades=shades,
    )


def contrast_pairs(palette: TonalPalette) -> List[ContrastPair]:
    """Contrast and AA/AAA (normal text) for each curated light/dark pairing."""
    pairs: List[ContrastPair] = []
    for light, dark in CONTRAST_PAIRINGS:
        light_shade, dark_shade = palette.shade(light), palette.shade(dark)
        if light_shade is None or dark_shade is None:
            continue
        ratio = contrast_ratio(light_shade.hex, dark_shade.hex)
        wcag = wcag_compliance(ratio)
        pairs.append(ContrastPair(light, dark, ratio, wcag.aa.normal, wcag.aaa.normal))
    return pairs
