"""
similarity.py
─────────────
Groups near-duplicate colours by CIE76 Delta-E.

Greedy single pass: colours are visited by descending occurrence count (ties
keep their input order); each unclaimed colour claims every other unclaimed
colour within the threshold. A colour that claims nothing stays ungrouped and
can still be claimed by a later representative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from .color_model import parse_color
from .color_space import lab_distance, rgb_to_lab
from .parser import ParsedColor

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 8.0


@dataclass(frozen=True)
class SimilarColor:
    hex:              str
    distance:         float   # Delta-E from the group representative
    occurrence_count: int


@dataclass
class SimilarColorGroup:
    representative_hex:     str
    members:                List[SimilarColor] = field(default_factory=list)
    total_occurrence_count: int = 0


def find_similar_color_groups(
    unique: List[ParsedColor],
    threshold: float = DEFAULT_THRESHOLD,
) -> List[SimilarColorGroup]:
    """
    Cluster *unique* colours (one ``ParsedColor`` per normalised hex).

    Two colours whose distance equals *threshold* are grouped. Only groups
    with at least one member are returned. O(n²) in the number of colours.
    """
    candidates = [c for c in unique if parse_color(c.normalized_hex) is not None]
    if len(candidates) < 2:
        return []

    order = sorted(candidates, key=lambda c: c.occurrence_count, reverse=True)
    labs = rgb_to_lab(np.array([parse_color(c.normalized_hex).rgb for c in order]))
    points = [tuple(row) for row in labs]

    claimed = [False] * len(order)
    groups: List[SimilarColorGroup] = []

    for i, rep in enumerate(order):
        if claimed[i]:
            continue

        members: List[SimilarColor] = []
        for j, other in enumerate(order):
            if j == i or claimed[j]:
                continue
            distance = lab_distance(points[i], points[j])
            if distance <= threshold:
                claimed[j] = True
                members.append(SimilarColor(other.normalized_hex, distance, other.occurrence_count))

        if members:
            claimed[i] = True
            members.sort(key=lambda m: m.distance)
            groups.append(SimilarColorGroup(
                representative_hex=rep.normalized_hex,
                members=members,
                total_occurrence_count=rep.occurrence_count + sum(m.occurrence_count for m in members),
            ))

    logger.debug("%d similarity group(s) at threshold %.1f", len(groups), threshold)
    return groups
