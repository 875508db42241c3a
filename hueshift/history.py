"""
history.py
──────────
Bounded undo/redo history and an editing session built on top of it.

The engine functions are pure; ``EditSession`` is the stateful object a
front end keeps around. It holds the original text, the current text and a
``TextHistory``, and re-parses on demand.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional

from .parser import ParsedColor, parse_colors, unique_colors
from .replacer import ReplaceMode, merge_similar_colors, replace_color
from .similarity import SimilarColorGroup

MAX_HISTORY_SIZE = 50


class TextHistory:
    """Linear history of text snapshots with a movable cursor."""

    def __init__(self, initial: str, max_size: int = MAX_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._entries: Deque[str] = deque([initial], maxlen=max_size)
        self._index = 0

    @property
    def current(self) -> str:
        return self._entries[self._index]

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, text: str) -> bool:
        """
        Record *text* as the newest snapshot.

        Drops any redo tail; the oldest snapshot falls off once the history
        is full. Returns False (and records nothing) if *text* is unchanged.
        """
        if text == self.current:
            return False
        while len(self._entries) - 1 > self._index:
            self._entries.pop()
        self._entries.append(text)
        self._index = len(self._entries) - 1
        return True

    def undo(self) -> Optional[str]:
        if not self.can_undo:
            return None
        self._index -= 1
        return self.current

    def redo(self) -> Optional[str]:
        if not self.can_redo:
            return None
        self._index += 1
        return self.current


class EditSession:
    """A text being recoloured, with undo/redo."""

    def __init__(self, text: str, max_history: int = MAX_HISTORY_SIZE) -> None:
        self.original = text
        self.history = TextHistory(text, max_size=max_history)

    @property
    def text(self) -> str:
        return self.history.current

    @property
    def colors(self) -> List[ParsedColor]:
        return parse_colors(self.text)

    @property
    def unique_colors(self) -> List[ParsedColor]:
        return unique_colors(self.colors)

    def instances_of(self, hex_value: str) -> List[ParsedColor]:
        return [c for c in self.colors if c.normalized_hex == hex_value]

    def edit(self, text: str) -> bool:
        """Record a free-form edit of the text."""
        return self.history.push(text)

    def replace(
        self,
        target_hex: str,
        replacement: str,
        mode: ReplaceMode = "all",
        selected_ids: Optional[Iterable[str]] = None,
    ) -> bool:
        updated = replace_color(self.text, self.colors, target_hex, replacement, mode, selected_ids)
        return self.history.push(updated)

    def apply_suggestion(self, original_hex: str, suggested_hex: str) -> bool:
        return self.replace(original_hex, suggested_hex, "all")

    def merge_group(self, group: SimilarColorGroup) -> bool:
        return self.history.push(merge_similar_colors(self.text, group))

    def undo(self) -> bool:
        return self.history.undo() is not None

    def redo(self) -> bool:
        return self.history.redo() is not None

    def reset(self) -> bool:
        """Return to the original text as a new, undoable step."""
        return self.history.push(self.original)
