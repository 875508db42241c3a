"""
swatch_sheet.py
───────────────
Renders a ``TonalPalette`` as a printable PDF swatch sheet.

Layout model
────────────
  • A "cursor" variable ``_y`` tracks the top of the next element to draw,
    measured in ReportLab points from the bottom of the page.
  • Each draw helper subtracts the element's height from ``_y``.
  • ``_ensure_space`` starts a new page when a row would run into the footer.

Coordinate system (ReportLab default)
────────────────────────────────────
  (0, 0) is the BOTTOM-LEFT corner of the page. Positive Y goes UP.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas as rl_canvas

from .palette import PaletteShade, TonalPalette, contrast_pairs

# ── Layout constants ───────────────────────────────────────────────────────────
MARGIN        = 1.80 * cm
HEADER_H      = 2.60 * cm   # Header band on the first page
CONT_HEADER_H = 1.40 * cm   # Compact header on continuation pages
FOOTER_H      = 0.90 * cm

SWATCH_H      = 1.30 * cm   # One shade row
SWATCH_W      = 4.20 * cm   # Coloured block on the left of each row
ROW_GAP       = 0.18 * cm
SECTION_GAP   = 0.70 * cm
PAIR_ROW_H    = 0.62 * cm

FONT          = "Helvetica"
FONT_BOLD     = "Helvetica-Bold"
FONT_ITALIC   = "Helvetica-Oblique"

TEXT_DARK     = HexColor("#1c1c1e")
TEXT_MUTED    = colors.Color(0.45, 0.45, 0.45)
RULE          = HexColor("#d2d4d8")
PASS          = HexColor("#1e7e34")
FAIL          = HexColor("#b02a37")


class SwatchSheetBuilder:
    """
    Build a PDF swatch sheet for *palette*.

    Parameters
    ----------
    palette : TonalPalette
        The palette to render (all 11 shades plus its contrast pairs).
    page_size : str
        ``"letter"`` (default) or ``"a4"``.
    """

    def __init__(self, palette: TonalPalette, page_size: str = "letter") -> None:
        self.palette   = palette
        self.page_size = A4 if page_size.lower() == "a4" else letter
        self.W, self.H = self.page_size
        self._usable_w = self.W - 2 * MARGIN
        self._c: Optional[rl_canvas.Canvas] = None
        self._y: float = 0.0

    # ── Public ────────────────────────────────────────────────────────────────

    def build(self, output_path: str | Path) -> Path:
        """Render the swatch sheet to *output_path* and return the path."""
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self._c = rl_canvas.Canvas(str(out), pagesize=self.page_size)
        self._c.setTitle(f"{self.palette.name} palette")
        self._begin_page(first=True)

        for shade in self.palette.shades:
            self._ensure_space(SWATCH_H + ROW_GAP)
            self._draw_shade(shade)

        self._draw_pairs()
        self._draw_footer()
        self._c.save()
        return out

    # ── Page management ───────────────────────────────────────────────────────

    def _begin_page(self, first: bool) -> None:
        self._draw_header(first)
        hh = HEADER_H if first else CONT_HEADER_H
        self._y = self.H - hh - MARGIN * 0.6

    def _new_page(self) -> None:
        self._draw_footer()
        self._c.showPage()
        self._begin_page(first=False)

    def _ensure_space(self, needed: float) -> None:
        if self._y - needed < FOOTER_H + MARGIN:
            self._new_page()

    # ── Header / footer ───────────────────────────────────────────────────────

    def _draw_header(self, first: bool) -> None:
        c, p = self._c, self.palette
        hh = HEADER_H if first else CONT_HEADER_H
        base = p.shade(p.target_shade_step)
        band = HexColor(p.base_color_hex)
        label = HexColor(base.label_color() if base else "#ffffff")

        c.setFillColor(band)
        c.rect(0, self.H - hh, self.W, hh, fill=1, stroke=0)

        c.setFillColor(label)
        if first:
            c.setFont(FONT_BOLD, 16)
            c.drawString(MARGIN, self.H - hh + 1.45 * cm, p.name)
            c.setFont(FONT, 9.5)
            c.drawString(
                MARGIN, self.H - hh + 0.70 * cm,
                f"Base {p.base_color_hex} at {p.target_shade_step}  –  {p.curve_type} curve",
            )
        else:
            c.setFont(FONT_BOLD, 10)
            c.drawString(MARGIN, self.H - hh + CONT_HEADER_H * 0.35, f"{p.name} (continued)")

    def _draw_footer(self) -> None:
        c = self._c
        c.setStrokeColor(RULE)
        c.setLineWidth(0.5)
        c.line(MARGIN, FOOTER_H + 0.15 * cm, self.W - MARGIN, FOOTER_H + 0.15 * cm)
        c.setFillColor(TEXT_MUTED)
        c.setFont(FONT, 7.5)
        c.drawString(MARGIN, FOOTER_H * 0.45, "Contrast ratios per WCAG 2.1 (normal text: AA 4.5:1, AAA 7:1)")
        c.drawRightString(self.W - MARGIN, FOOTER_H * 0.45, f"Page {c.getPageNumber()}")

    # ── Shade rows ────────────────────────────────────────────────────────────

    def _draw_shade(self, shade: PaletteShade) -> None:
        c = self._c
        top = self._y
        y = top - SWATCH_H

        c.setFillColor(HexColor(shade.hex))
        c.setStrokeColor(RULE)
        c.setLineWidth(0.4)
        c.roundRect(MARGIN, y, SWATCH_W, SWATCH_H, 3, fill=1, stroke=1)

        c.setFillColor(HexColor(shade.label_color()))
        c.setFont(FONT_BOLD, 11)
        c.drawString(MARGIN + 0.35 * cm, y + SWATCH_H / 2 - 0.15 * cm, str(shade.step))

        tx = MARGIN + SWATCH_W + 0.50 * cm
        c.setFillColor(TEXT_DARK)
        c.setFont(FONT_BOLD, 10)
        c.drawString(tx, y + SWATCH_H - 0.50 * cm, shade.hex.upper())
        c.setFillColor(TEXT_MUTED)
        c.setFont(FONT, 8)
        c.drawString(
            tx, y + 0.28 * cm,
            f"hsl({shade.hue:.0f}, {shade.saturation_pct:.0f}%, {shade.lightness_pct:.0f}%)",
        )

        col = MARGIN + self._usable_w * 0.55
        self._draw_contrast(col, y + SWATCH_H - 0.50 * cm, "vs white",
                            shade.contrast_vs_white, shade.wcag_vs_white.aa, shade.wcag_vs_white.aaa)
        self._draw_contrast(col, y + 0.28 * cm, "vs black",
                            shade.contrast_vs_black, shade.wcag_vs_black.aa, shade.wcag_vs_black.aaa)

        self._y = y - ROW_GAP

    def _draw_contrast(self, x: float, y: float, label: str,
                       ratio: float, aa: bool, aaa: bool) -> None:
        c = self._c
        c.setFillColor(TEXT_DARK)
        c.setFont(FONT, 8.5)
        c.drawString(x, y, f"{label}  {ratio:.2f}:1")
        self._draw_badge(x + 3.60 * cm, y, "AA", aa)
        self._draw_badge(x + 4.60 * cm, y, "AAA", aaa)

    def _draw_badge(self, x: float, y: float, text: str, passed: bool) -> None:
        c = self._c
        c.setFillColor(PASS if passed else FAIL)
        c.roundRect(x, y - 0.08 * cm, 0.85 * cm, 0.38 * cm, 2, fill=1, stroke=0)
        c.setFillColor(colors.white)
        c.setFont(FONT_BOLD, 6.5)
        c.drawCentredString(x + 0.425 * cm, y + 0.03 * cm, text)

    # ── Contrast pairs ────────────────────────────────────────────────────────

    def _draw_pairs(self) -> None:
        pairs = contrast_pairs(self.palette)
        if not pairs:
            return
        c = self._c
        self._ensure_space(SECTION_GAP + PAIR_ROW_H * 2)
        self._y -= SECTION_GAP

        c.setFillColor(TEXT_DARK)
        c.setFont(FONT_BOLD, 11)
        c.drawString(MARGIN, self._y - 0.40 * cm, "Text / background pairs")
        self._y -= PAIR_ROW_H + 0.20 * cm

        for pair in pairs:
            self._ensure_space(PAIR_ROW_H)
            light = self.palette.shade(pair.light_step)
            dark = self.palette.shade(pair.dark_step)
            y = self._y - PAIR_ROW_H

            c.setFillColor(HexColor(light.hex))
            c.rect(MARGIN, y + 0.08 * cm, 2.40 * cm, PAIR_ROW_H - 0.16 * cm, fill=1, stroke=0)
            c.setFillColor(HexColor(dark.hex))
            c.setFont(FONT_BOLD, 8.5)
            c.drawString(MARGIN + 0.25 * cm, y + 0.22 * cm, f"{pair.dark_step} on {pair.light_step}")

            c.setFillColor(TEXT_DARK)
            c.setFont(FONT, 8.5)
            c.drawString(MARGIN + 2.90 * cm, y + 0.22 * cm, f"{pair.ratio:.2f}:1")
            self._draw_badge(MARGIN + 5.00 * cm, y + 0.22 * cm, "AA", pair.aa)
            self._draw_badge(MARGIN + 6.00 * cm, y + 0.22 * cm, "AAA", pair.aaa)

            self._y = y
