"""
color_extractor.py
──────────────────
Pulls candidate seed colours out of a raster image (logo, screenshot, mood
board) so a palette can be generated from it.

Handles transparency by compositing onto white before analysis, so images
with transparent backgrounds don't skew the palette toward white/grey.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import List

from PIL import Image
from colorthief import ColorThief

from .color_model import Color

# Luminance window for usable palette seeds
MIN_SEED_LUMINANCE = 0.05
MAX_SEED_LUMINANCE = 0.90


class ColorExtractor:
    """Extract seed colours from any raster image Pillow can open."""

    def __init__(self, image_path: str | Path) -> None:
        self.image_path = Path(image_path)
        if not self.image_path.exists():
            raise FileNotFoundError(f"Image not found: {self.image_path}")
        self._thief: ColorThief = self._build_thief()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _build_thief(self) -> ColorThief:
        """Load the image, flatten transparency, and prepare ColorThief."""
        img = Image.open(self.image_path).convert("RGBA")

        bg = Image.new("RGBA", img.size, (255, 255, 255, 255))
        bg.paste(img, mask=img.split()[3])
        flat = bg.convert("RGB")

        buf = io.BytesIO()
        flat.save(buf, format="PNG")
        buf.seek(0)
        return ColorThief(buf)

    # ── Public API ────────────────────────────────────────────────────────────

    def dominant(self) -> Color:
        """The single most dominant colour."""
        return Color(*self._thief.get_color(quality=1))

    def palette(self, count: int = 8) -> List[Color]:
        """Up to *count* colours representing the image."""
        return [Color(*rgb) for rgb in self._thief.get_palette(color_count=max(count, 2), quality=1)]

    def seed_color(self, count: int = 8) -> Color:
        """
        Best palette seed: the most saturated colour that is neither
        near-white nor near-black. Falls back to the dominant colour.
        """
        candidates = [
            c for c in self.palette(count)
            if MIN_SEED_LUMINANCE < c.luminance() < MAX_SEED_LUMINANCE
        ]
        if not candidates:
            return self.dominant()
        # Most vibrant first; sort is stable so palette order breaks ties
        candidates.sort(key=lambda c: c.to_hsl()[1], reverse=True)
        return candidates[0]
