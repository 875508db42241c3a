"""
color_space.py
──────────────
sRGB → CIE Lab conversion and the CIE76 colour difference (Delta-E).

Delta-E here is the plain Euclidean distance in Lab space (CIE76), not
CIEDE2000. Similarity thresholds are calibrated against it:

    ~0   indistinguishable
    < 5  visually similar
    > 10 clearly different
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .color_model import Color, parse_color

LabColor = Tuple[float, float, float]

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

EPSILON = 0.008856
KAPPA = 903.3


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert an (n, 3) RGB array (0-255) to an (n, 3) Lab array."""
    # Normalize RGB to [0, 1]
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0

    # Undo the sRGB transfer curve
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    # Linear RGB to XYZ (sRGB primaries, D65)
    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    x, y, z = x / XN, y / YN, z / ZN

    fx = np.where(x > EPSILON, np.cbrt(x), (KAPPA * x + 16) / 116)
    fy = np.where(y > EPSILON, np.cbrt(y), (KAPPA * y + 16) / 116)
    fz = np.where(z > EPSILON, np.cbrt(z), (KAPPA * z + 16) / 116)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b_val = 200 * (fy - fz)

    return np.column_stack([L, a, b_val])


def to_lab(color: Color) -> LabColor:
    """Lab coordinates of a single colour (alpha is ignored)."""
    L, a, b = rgb_to_lab(np.array([color.rgb]))[0]
    return (float(L), float(a), float(b))


def lab_distance(lab_a: LabColor, lab_b: LabColor) -> float:
    return math.dist(lab_a, lab_b)


def delta_e(hex_a: str, hex_b: str) -> float:
    """
    CIE76 distance between two colour strings.

    Returns ``math.inf`` when either side is not a valid colour, so invalid
    input never looks "similar" to anything.
    """
    a = parse_color(hex_a)
    b = parse_color(hex_b)
    if a is None or b is None:
        return math.inf
    labs = rgb_to_lab(np.array([a.rgb, b.rgb]))
    return lab_distance(tuple(labs[0]), tuple(labs[1]))
