"""Shared pytest fixtures for hueshift tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hueshift.parser import ParsedColor

SAMPLE_CSS = """/* Sample CSS with colors */
.header {
  background: #1a73e8;
  color: #ffffff;
  border: 1px solid rgb(200, 200, 200);
}

.button {
  background-color: #34a853;
  color: white;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}

.alert {
  background: hsl(0, 70%, 50%);
  color: #fff;
}

.link {
  color: royalblue;
  text-decoration: none;
}"""


@pytest.fixture
def sample_css() -> str:
    return SAMPLE_CSS


@pytest.fixture
def css_file(tmp_path: Path) -> Path:
    path = tmp_path / "styles.css"
    path.write_text(SAMPLE_CSS, encoding="utf-8")
    return path


def _unique(hex_value: str, count: int = 1, start: int = 0) -> ParsedColor:
    return ParsedColor(
        id=f"{hex_value}-{start}",
        original_text=hex_value,
        normalized_hex=hex_value,
        format="hex",
        start_offset=start,
        end_offset=start + len(hex_value),
        occurrence_count=count,
    )


@pytest.fixture
def make_unique():
    """Factory for stand-ins of one ``unique_colors(...)`` entry."""
    return _unique
