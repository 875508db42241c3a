"""
config.py
─────────
Configuration loading, validation, and defaults for the command-line tool.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict

from .color_model import is_valid_color
from .contrast import TARGET_RATIOS
from .palette import LIGHTNESS_CURVES, SHADE_STEPS

Config = Dict[str, Any]

PALETTE_FORMATS = ("tailwind", "css", "json", "pdf")


# ── Defaults ───────────────────────────────────────────────────────────────────

def default_config() -> Config:
    """Settings used when no config file is given, or for keys it omits."""
    return {
        "similarity_threshold": 8.0,
        "background":           "#ffffff",
        "target_level":         "AA",
        "palette": {
            "name":         "primary",
            "target_shade": 500,
            "curve":        "natural",
            "format":       "tailwind",
            "page_size":    "letter",
        },
    }


# ── Config I/O ─────────────────────────────────────────────────────────────────

def load_config(path: str | Path) -> Config:
    """
    Load a JSON configuration file and merge it over ``default_config()``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or fails validation.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    if p.suffix.lower() != ".json":
        raise ValueError(f"Config file must be a .json file, got: {p.suffix}")

    with p.open("r", encoding="utf-8") as fh:
        try:
            raw = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in config file: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError("Config root must be a JSON object.")

    cfg = merge_config(default_config(), raw)
    validate_config(cfg)
    return cfg


def merge_config(base: Config, overrides: Config) -> Config:
    """Recursively overlay *overrides* onto a copy of *base*."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(cfg: Config) -> None:
    threshold = cfg.get("similarity_threshold")
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) or threshold < 0:
        raise ValueError("'similarity_threshold' must be a non-negative number.")
    if not isinstance(cfg.get("background"), str) or not is_valid_color(cfg["background"]):
        raise ValueError(f"'background' is not a valid colour: {cfg.get('background')!r}")
    if cfg.get("target_level") not in TARGET_RATIOS:
        raise ValueError("'target_level' must be 'AA' or 'AAA'.")

    palette = cfg.get("palette")
    if not isinstance(palette, dict):
        raise ValueError("'palette' must be a JSON object.")
    if not isinstance(palette.get("name"), str) or not palette["name"].strip():
        raise ValueError("'palette.name' must be a non-empty string.")
    if palette.get("target_shade") not in SHADE_STEPS:
        raise ValueError(f"'palette.target_shade' must be one of {list(SHADE_STEPS)}.")
    if palette.get("curve") not in LIGHTNESS_CURVES:
        raise ValueError(f"'palette.curve' must be one of {sorted(LIGHTNESS_CURVES)}.")
    if palette.get("format") not in PALETTE_FORMATS:
        raise ValueError(f"'palette.format' must be one of {list(PALETTE_FORMATS)}.")
    if str(palette.get("page_size", "")).lower() not in ("a4", "letter"):
        raise ValueError("'palette.page_size' must be 'a4' or 'letter'.")
