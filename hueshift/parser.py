"""
parser.py
─────────
Finds colour literals in arbitrary text (CSS, SCSS, JSON, source code, ...).

Scanning model
──────────────
  • Four independent regex scans: hex, rgb/rgba, hsl/hsla, CSS colour names.
  • Every candidate is validated through ``Color``; anything that does not
    parse (``rgb(999,0,0)``, ``#ggg``) is dropped silently.
  • A named-colour match that starts inside an accepted hex/rgb/hsl match is
    discarded: structured formats win at a given position.
  • After the scan each instance is stamped with the number of instances that
    share its normalised hex, and the list is ordered by start offset.

Parsing is a pure function of the text: nothing is cached between calls.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Dict, List, Literal, Optional, Pattern, Tuple

from .color_model import parse_color
from .named_colors import CSS_NAMED_COLORS

logger = logging.getLogger(__name__)

ColorFormat = Literal["hex", "rgb", "hsl", "named"]

# ── Patterns ───────────────────────────────────────────────────────────────────

HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})\b")

RGB_PATTERN = re.compile(
    r"rgba?\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)",
    re.IGNORECASE,
)

HSL_PATTERN = re.compile(
    r"hsla?\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*(?:,\s*([\d.]+)\s*)?\)",
    re.IGNORECASE,
)

NAMED_PATTERN = re.compile(
    r"\b(" + "|".join(CSS_NAMED_COLORS) + r")\b",
    re.IGNORECASE,
)

_STRUCTURED: List[Tuple[Pattern[str], ColorFormat]] = [
    (HEX_PATTERN, "hex"),
    (RGB_PATTERN, "rgb"),
    (HSL_PATTERN, "hsl"),
]

_RULE_PATTERN = re.compile(r"\{([^}]+)\}")
_FOREGROUND_PATTERN = re.compile(r"(?<![\w-])color\s*:\s*([^;]+)", re.IGNORECASE)
_BACKGROUND_PATTERN = re.compile(r"background(?:-color)?\s*:\s*([^;]+)", re.IGNORECASE)

CONTEXT_LENGTH = 50


# ── Result types ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ParsedColor:
    """One occurrence of a colour literal in a text snapshot."""

    id:               str          # "<normalized_hex>-<start_offset>"
    original_text:    str          # exact substring matched
    normalized_hex:   str          # "#rrggbb", used for equality / grouping
    format:           ColorFormat  # literal syntax found
    start_offset:     int
    end_offset:       int          # exclusive
    occurrence_count: int = 1      # instances sharing normalized_hex


@dataclass(frozen=True)
class ColorPair:
    """A foreground/background pair declared in the same CSS rule."""

    foreground_hex:  str
    background_hex:  str
    context_snippet: str


@dataclass
class ColorDiff:
    """Unique colours before and after an edit, by normalised hex."""

    added:    List[str] = field(default_factory=list)
    removed:  List[str] = field(default_factory=list)
    retained: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


# ── Scanning ───────────────────────────────────────────────────────────────────

def _instance(match: "re.Match[str]", fmt: ColorFormat) -> Optional[ParsedColor]:
    original = match.group(0)
    color = parse_color(original)
    if color is None:
        return None
    normalized = color.to_hex()
    start = match.start()
    return ParsedColor(
        id=f"{normalized}-{start}",
        original_text=original,
        normalized_hex=normalized,
        format=fmt,
        start_offset=start,
        end_offset=match.end(),
    )


def parse_colors(text: str) -> List[ParsedColor]:
    """
    Return every valid colour literal in *text*, ordered by start offset.

    Each instance carries ``occurrence_count``: how many instances in the
    whole text normalise to the same hex.
    """
    found: List[ParsedColor] = []

    for pattern, fmt in _STRUCTURED:
        for match in pattern.finditer(text):
            inst = _instance(match, fmt)
            if inst is not None:
                found.append(inst)

    structured = [(c.start_offset, c.end_offset) for c in found]
    for match in NAMED_PATTERN.finditer(text):
        start = match.start()
        if any(lo <= start < hi for lo, hi in structured):
            continue
        inst = _instance(match, "named")
        if inst is not None:
            found.append(inst)

    counts = Counter(c.normalized_hex for c in found)
    found.sort(key=lambda c: c.start_offset)

    logger.debug("parsed %d colour literals (%d unique)", len(found), len(counts))
    return [replace(c, occurrence_count=counts[c.normalized_hex]) for c in found]


def unique_colors(instances: List[ParsedColor]) -> List[ParsedColor]:
    """One representative instance per normalised hex, in first-seen order."""
    seen: Dict[str, ParsedColor] = {}
    for inst in instances:
        seen.setdefault(inst.normalized_hex, inst)
    return list(seen.values())


# ── Derived views ──────────────────────────────────────────────────────────────

def detect_color_pairs(text: str) -> List[ColorPair]:
    """
    Find ``color`` / ``background`` declarations that share a CSS rule.

    The first colour literal of each declaration value is used; rules where
    either value holds no colour are skipped.
    """
    pairs: List[ColorPair] = []
    for rule in _RULE_PATTERN.finditer(text):
        body = rule.group(1)
        fg_decl = _FOREGROUND_PATTERN.search(body)
        bg_decl = _BACKGROUND_PATTERN.search(body)
        if not fg_decl or not bg_decl:
            continue

        fg = parse_colors(fg_decl.group(1).strip())
        bg = parse_colors(bg_decl.group(1).strip())
        if fg and bg:
            pairs.append(ColorPair(
                foreground_hex=fg[0].normalized_hex,
                background_hex=bg[0].normalized_hex,
                context_snippet=rule.group(0)[:CONTEXT_LENGTH] + "...",
            ))
    return pairs


def compare_colors(original: str, current: str) -> ColorDiff:
    """Which unique colours an edit introduced, removed or kept."""
    before = [c.normalized_hex for c in unique_colors(parse_colors(original))]
    after = [c.normalized_hex for c in unique_colors(parse_colors(current))]
    before_set, after_set = set(before), set(after)
    return ColorDiff(
        added=[h for h in after if h not in before_set],
        removed=[h for h in before if h not in after_set],
        retained=[h for h in before if h in after_set],
    )
