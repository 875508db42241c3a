"""
exporters.py
────────────
Text renderings of a ``TonalPalette``: Tailwind config, CSS custom properties
and JSON. The PDF swatch sheet lives in ``swatch_sheet.py``.
"""

from __future__ import annotations

import json
from typing import Callable, Dict

from .palette import TonalPalette

EXPORT_FORMATS = ("tailwind", "css", "json")


def export_as_tailwind_config(palette: TonalPalette) -> str:
    entries = "\n".join(f"          {s.step}: '{s.hex}'," for s in palette.shades)
    return (
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        f"        {palette.name}: {{\n"
        f"{entries}\n"
        "        }\n"
        "      }\n"
        "    }\n"
        "  }\n"
        "}"
    )


def export_as_css(palette: TonalPalette) -> str:
    variables = "\n".join(
        f"  --color-{palette.name}-{s.step}: {s.hex};" for s in palette.shades
    )
    return f":root {{\n{variables}\n}}"


def export_as_json(palette: TonalPalette) -> str:
    return json.dumps({palette.name: palette.as_dict()}, indent=2)


_EXPORTERS: Dict[str, Callable[[TonalPalette], str]] = {
    "tailwind": export_as_tailwind_config,
    "css":      export_as_css,
    "json":     export_as_json,
}


def export_palette(palette: TonalPalette, fmt: str = "tailwind") -> str:
    """Render *palette* in one of ``EXPORT_FORMATS``."""
    try:
        exporter = _EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown export format {fmt!r}; expected one of {EXPORT_FORMATS}") from None
    return exporter(palette)
