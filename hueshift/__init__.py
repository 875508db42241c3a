"""HueShift – colour-literal parsing, replacement, contrast auditing and palettes."""
from .color_model import Color, InvalidColorError, is_valid_color, parse_color
from .color_space import delta_e, rgb_to_lab, to_lab
from .contrast import (
    Suggestion,
    WCAGCompliance,
    contrast_ratio,
    suggest_accessible_alternative,
    wcag_compliance,
)
from .exporters import export_as_css, export_as_json, export_as_tailwind_config, export_palette
from .history import EditSession, TextHistory
from .palette import (
    LIGHTNESS_CURVES,
    SHADE_STEPS,
    PaletteShade,
    TonalPalette,
    contrast_pairs,
    generate_palette,
)
from .parser import (
    ColorDiff,
    ColorPair,
    ParsedColor,
    compare_colors,
    detect_color_pairs,
    parse_colors,
    unique_colors,
)
from .replacer import merge_similar_colors, replace_color
from .similarity import SimilarColor, SimilarColorGroup, find_similar_color_groups

__version__ = "0.1.0"

__all__ = [
    "Color",
    "InvalidColorError",
    "is_valid_color",
    "parse_color",
    "delta_e",
    "rgb_to_lab",
    "to_lab",
    "Suggestion",
    "WCAGCompliance",
    "contrast_ratio",
    "suggest_accessible_alternative",
    "wcag_compliance",
    "export_as_css",
    "export_as_json",
    "export_as_tailwind_config",
    "export_palette",
    "EditSession",
    "TextHistory",
    "LIGHTNESS_CURVES",
    "SHADE_STEPS",
    "PaletteShade",
    "TonalPalette",
    "contrast_pairs",
    "generate_palette",
    "ColorDiff",
    "ColorPair",
    "ParsedColor",
    "compare_colors",
    "detect_color_pairs",
    "parse_colors",
    "unique_colors",
    "merge_similar_colors",
    "replace_color",
    "SimilarColor",
    "SimilarColorGroup",
    "find_similar_color_groups",
]
