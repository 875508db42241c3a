"""Tests for palette text exports."""

import json

import pytest

from hueshift.exporters import (
    export_as_css,
    export_as_json,
    export_as_tailwind_config,
    export_palette,
)
from hueshift.palette import SHADE_STEPS, generate_palette


@pytest.fixture
def palette():
    return generate_palette("#3b82f6", name="brand")


def test_tailwind_config(palette) -> None:
    out = export_as_tailwind_config(palette)
    lines = out.splitlines()
    assert lines[0] == "module.exports = {"
    assert "        brand: {" in lines
    assert f"          500: '{palette.shade(500).hex}'," in lines
    assert out.endswith("}")
    assert sum(1 for line in lines if line.strip().endswith("',")) == len(SHADE_STEPS)


def test_css_variables(palette) -> None:
    out = export_as_css(palette)
    assert out.startswith(":root {\n")
    assert out.endswith("\n}")
    assert f"  --color-brand-950: {palette.shade(950).hex};" in out.splitlines()


def test_json(palette) -> None:
    data = json.loads(export_as_json(palette))
    assert list(data) == ["brand"]
    assert data["brand"] == palette.as_dict()
    assert data["brand"]["500"] == "#3b82f6"


def test_export_palette_dispatch(palette) -> None:
    assert export_palette(palette, "css") == export_as_css(palette)
    assert export_palette(palette) == export_as_tailwind_config(palette)


def test_unknown_format(palette) -> None:
    with pytest.raises(ValueError, match="yaml"):
        export_palette(palette, "yaml")
