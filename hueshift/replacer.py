"""
replacer.py
───────────
Rewrites colour literals in text using the positions found by ``parse_colors``.

Replacements keep the literal's format family: an ``rgba(...)`` stays
``rgba(...)``, an 8-digit hex stays 8-digit, and so on. Splices are applied
right-to-left so earlier offsets are never shifted by later edits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Literal, Optional

from .color_model import Color, parse_color
from .parser import ParsedColor, parse_colors

if TYPE_CHECKING:
    from .similarity import SimilarColorGroup

logger = logging.getLogger(__name__)

ReplaceMode = Literal["all", "selective"]


def format_like(instance: ParsedColor, color: Color) -> str:
    """Serialise *color* in the same syntax family as *instance*."""
    original = instance.original_text.lower()
    if instance.format == "rgb":
        return color.to_rgb_string(alpha="rgba" in original)
    if instance.format == "hsl":
        return color.to_hsl_string(alpha="hsla" in original)
    if instance.format == "hex" and len(instance.original_text) == 9:
        return color.to_hex(with_alpha=True)
    return color.to_hex()


def replace_color(
    text: str,
    instances: List[ParsedColor],
    target_hex: str,
    replacement: str,
    mode: ReplaceMode = "all",
    selected_ids: Optional[Iterable[str]] = None,
) -> str:
    """
    Replace occurrences of *target_hex* in *text* with *replacement*.

    Parameters
    ----------
    instances : list of ParsedColor
        The result of ``parse_colors(text)`` for this exact text.
    mode : "all" | "selective"
        ``"all"`` replaces every instance normalising to *target_hex*;
        ``"selective"`` only those whose id is in *selected_ids*.

    Returns *text* unchanged when *replacement* is not a valid colour.
    """
    if mode not in ("all", "selective"):
        raise ValueError(f"Unknown replace mode: {mode!r}")

    color = parse_color(replacement)
    if color is None:
        logger.debug("replacement %r is not a colour; text left unchanged", replacement)
        return text

    target = parse_color(target_hex)
    target_norm = target.to_hex() if target is not None else target_hex
    wanted = set(selected_ids or ()) if mode == "selective" else None

    chosen = [
        c for c in instances
        if c.normalized_hex == target_norm and (wanted is None or c.id in wanted)
    ]
    chosen.sort(key=lambda c: c.start_offset, reverse=True)

    result = text
    for inst in chosen:
        result = result[:inst.start_offset] + format_like(inst, color) + result[inst.end_offset:]

    logger.debug("replaced %d instance(s) of %s with %s", len(chosen), target_norm, color.to_hex())
    return result


def merge_similar_colors(text: str, group: "SimilarColorGroup") -> str:
    """
    Collapse a similarity group onto its representative.

    The text is re-parsed before each member is replaced, so offsets always
    match the text being edited.
    """
    merged = text
    for member in group.members:
        merged = replace_color(
            merged,
            parse_colors(merged),
            member.hex,
            group.representative_hex,
            "all",
        )
    return merged
