"""Tests for undo/redo history and editing sessions."""

import pytest

from hueshift.history import EditSession, TextHistory
from hueshift.similarity import SimilarColor, SimilarColorGroup


class TestTextHistory:
    def test_undo_redo(self) -> None:
        history = TextHistory("a")
        history.push("b")
        history.push("c")

        assert history.undo() == "b"
        assert history.undo() == "a"
        assert history.undo() is None
        assert history.redo() == "b"
        assert history.current == "b"

    def test_push_drops_redo_tail(self) -> None:
        history = TextHistory("a")
        history.push("b")
        history.push("c")
        history.undo()
        history.push("d")

        assert not history.can_redo
        assert history.undo() == "b"

    def test_unchanged_text_is_not_recorded(self) -> None:
        history = TextHistory("a")
        assert history.push("a") is False
        assert len(history) == 1

    def test_bounded(self) -> None:
        history = TextHistory("0", max_size=3)
        for i in range(1, 6):
            history.push(str(i))

        assert len(history) == 3
        assert history.current == "5"
        assert history.undo() == "4"
        assert history.undo() == "3"
        assert history.undo() is None

    def test_max_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TextHistory("", max_size=0)


class TestEditSession:
    def test_replace_and_undo(self, sample_css: str) -> None:
        session = EditSession(sample_css)
        assert session.replace("#1a73e8", "#0b57d0")
        assert "#0b57d0" in session.text
        assert not session.instances_of("#1a73e8")

        assert session.undo()
        assert session.text == sample_css
        assert session.redo()
        assert "#0b57d0" in session.text

    def test_no_op_replace_is_not_recorded(self, sample_css: str) -> None:
        session = EditSession(sample_css)
        assert session.replace("#123456", "#000000") is False
        assert not session.history.can_undo

    def test_selective_replace(self) -> None:
        session = EditSession("a { color: #fff; } b { color: white; }")
        (first, second) = session.instances_of("#ffffff")
        session.replace("#ffffff", "#eeeeee", "selective", [second.id])
        assert session.text == "a { color: #fff; } b { color: #eeeeee; }"
        assert len(session.unique_colors) == 2

    def test_apply_suggestion(self) -> None:
        session = EditSession("p { color: #777777; }")
        assert session.apply_suggestion("#777777", "#757575")
        assert session.text == "p { color: #757575; }"

    def test_merge_group(self) -> None:
        session = EditSession("#ff0000 #fe0000")
        group = SimilarColorGroup("#ff0000", [SimilarColor("#fe0000", 0.5, 1)], 2)
        assert session.merge_group(group)
        assert session.text == "#ff0000 #ff0000"
        assert len(session.colors) == 2

    def test_edit_and_reset(self) -> None:
        session = EditSession("a { color: red; }")
        session.edit("a { color: blue; }")
        assert session.reset()
        assert session.text == "a { color: red; }"
        assert session.undo()
        assert session.text == "a { color: blue; }"

    def test_nothing_to_undo(self) -> None:
        session = EditSession("")
        assert session.undo() is False
        assert session.redo() is False
