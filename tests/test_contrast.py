"""Tests for WCAG contrast and accessible-colour suggestions."""

import pytest

from hueshift.color_model import Color
from hueshift.contrast import (
    LevelCompliance,
    contrast_ratio,
    suggest_accessible_alternative,
    wcag_compliance,
)


class TestContrastRatio:
    def test_black_on_white_is_maximal(self) -> None:
        assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    @pytest.mark.parametrize("color", ["#ffffff", "#1a73e8", "rgb(12, 34, 56)", "teal"])
    def test_same_color_is_one(self, color: str) -> None:
        assert contrast_ratio(color, color) == pytest.approx(1.0)

    def test_accepts_color_objects(self) -> None:
        assert contrast_ratio(Color(0, 0, 0), "white") == pytest.approx(21.0)

    def test_known_value(self) -> None:
        assert contrast_ratio("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)

    def test_invalid_is_zero(self) -> None:
        assert contrast_ratio("#ffffff", "nope") == 0.0
        assert contrast_ratio("rgb(999,0,0)", "#000") == 0.0


class TestWCAGCompliance:
    def test_aa_boundary_is_inclusive(self) -> None:
        assert wcag_compliance(4.5).aa.normal is True
        assert wcag_compliance(4.49).aa.normal is False

    def test_levels(self) -> None:
        result = wcag_compliance(4.5)
        assert result.aa == LevelCompliance(normal=True, large=True)
        assert result.aaa == LevelCompliance(normal=False, large=True)

        result = wcag_compliance(3.0)
        assert result.aa == LevelCompliance(normal=False, large=True)
        assert result.aaa == LevelCompliance(normal=False, large=False)

        result = wcag_compliance(7.0)
        assert result.aaa.normal is True

    def test_total_for_odd_input(self) -> None:
        result = wcag_compliance(0.0)
        assert not result.aa.large and not result.aaa.large


class TestSuggestAccessibleAlternative:
    def test_already_passing_returns_same_color(self) -> None:
        suggestion = suggest_accessible_alternative("#000", "#ffffff", "AA")
        assert suggestion.suggested_hex == "#000000"
        assert suggestion.ratio == pytest.approx(21.0)

    def test_darkens_on_light_background(self) -> None:
        suggestion = suggest_accessible_alternative("#777777", "#ffffff", "AA")
        assert suggestion is not None
        assert suggestion.ratio >= 4.5
        assert Color.parse(suggestion.suggested_hex).luminance() < Color.parse("#777777").luminance()

    def test_lightens_on_dark_background(self) -> None:
        suggestion = suggest_accessible_alternative("#333333", "#000000", "AAA")
        assert suggestion is not None
        assert suggestion.ratio >= 7.0
        assert Color.parse(suggestion.suggested_hex).luminance() > Color.parse("#333333").luminance()

    def test_hue_is_preserved(self) -> None:
        suggestion = suggest_accessible_alternative("#6699ff", "#ffffff", "AAA")
        hue, _, _ = Color.parse(suggestion.suggested_hex).to_hsl()
        assert hue == pytest.approx(Color.parse("#6699ff").to_hsl()[0], abs=2.0)

    def test_none_when_nothing_improves(self) -> None:
        # White is already as light as it gets on a mid-grey background.
        assert suggest_accessible_alternative("#ffffff", "#767676", "AAA") is None

    def test_best_effort_when_target_unreachable(self) -> None:
        original = contrast_ratio("#808080", "#808080")
        suggestion = suggest_accessible_alternative("#808080", "#808080", "AA")
        assert suggestion is not None
        assert suggestion.ratio < 4.5
        assert suggestion.ratio > original

    @pytest.mark.parametrize(
        "color, background, level",
        [
            ("#777777", "#ffffff", "AA"),
            ("#ff0000", "#0000ff", "AAA"),
            ("#ffff00", "#ffffff", "AAA"),
            ("#222222", "#333333", "AA"),
            ("#1a73e8", "#000000", "AAA"),
        ],
    )
    def test_never_worse_than_original(self, color: str, background: str, level: str) -> None:
        suggestion = suggest_accessible_alternative(color, background, level)
        if suggestion is not None:
            assert suggestion.ratio >= contrast_ratio(color, background)

    def test_invalid_input_returns_none(self) -> None:
        assert suggest_accessible_alternative("nope", "#fff") is None
        assert suggest_accessible_alternative("#fff", "nope") is None

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError):
            suggest_accessible_alternative("#777", "#fff", "AAAA")
