"""Tests for colour-literal scanning and derived views."""

from hueshift.parser import (
    CONTEXT_LENGTH,
    ColorPair,
    compare_colors,
    detect_color_pairs,
    parse_colors,
    unique_colors,
)


class TestParseColors:
    def test_minified_rule(self) -> None:
        colors = parse_colors(".x{color:#fff;background:#000}")
        assert [c.format for c in colors] == ["hex", "hex"]
        assert [c.normalized_hex for c in colors] == ["#ffffff", "#000000"]
        assert [c.occurrence_count for c in colors] == [1, 1]

    def test_offsets_are_half_open(self) -> None:
        text = "color: royalblue;"
        (c,) = parse_colors(text)
        assert c.format == "named"
        assert c.normalized_hex == "#4169e1"
        assert (c.start_offset, c.end_offset) == (7, 16)
        assert text[c.start_offset:c.end_offset] == c.original_text == "royalblue"

    def test_same_color_different_formats_share_count(self) -> None:
        colors = parse_colors("rgb(255,0,0) red")
        assert [c.format for c in colors] == ["rgb", "named"]
        assert [c.normalized_hex for c in colors] == ["#ff0000", "#ff0000"]
        assert all(c.occurrence_count == 2 for c in colors)

    def test_ids_combine_hex_and_offset(self) -> None:
        colors = parse_colors("a: #f00; b: #f00;")
        assert [c.id for c in colors] == ["#ff0000-3", "#ff0000-12"]
        assert len({c.id for c in colors}) == 2

    def test_all_formats_sorted_by_position(self, sample_css: str) -> None:
        colors = parse_colors(sample_css)
        offsets = [c.start_offset for c in colors]
        assert offsets == sorted(offsets)
        assert {c.format for c in colors} == {"hex", "rgb", "hsl", "named"}
        for c in colors:
            assert sample_css[c.start_offset:c.end_offset] == c.original_text

    def test_sample_counts(self, sample_css: str) -> None:
        by_hex = {c.normalized_hex: c.occurrence_count for c in parse_colors(sample_css)}
        # "#ffffff", "white" and "#fff"
        assert by_hex["#ffffff"] == 3
        assert by_hex["#1a73e8"] == 1
        assert by_hex["#c8c8c8"] == 1
        assert by_hex["#000000"] == 1
        assert by_hex["#4169e1"] == 1

    def test_case_insensitive_functions_and_names(self) -> None:
        colors = parse_colors("RGBA(0, 0, 0, 0.5) WHITE Hsl(0, 100%, 50%)")
        assert [(c.format, c.normalized_hex) for c in colors] == [
            ("rgb", "#000000"),
            ("named", "#ffffff"),
            ("hsl", "#ff0000"),
        ]

    def test_eight_digit_hex(self) -> None:
        (c,) = parse_colors("fill: #11223380;")
        assert c.original_text == "#11223380"
        assert c.normalized_hex == "#112233"

    def test_invalid_literals_are_dropped(self) -> None:
        assert parse_colors("rgb(999,0,0)") == []
        assert parse_colors("rgba(0,0,0,7)") == []
        assert parse_colors("hsl(400, 50%, 50%)") == []
        assert parse_colors("#12345 #ffff #ggg") == []

    def test_hex_needs_word_boundary(self) -> None:
        assert parse_colors("#ffffffzz") == []
        assert [c.normalized_hex for c in parse_colors("#abc-def")] == ["#aabbcc"]

    def test_names_match_whole_words_only(self) -> None:
        assert parse_colors("redirect to tangent") == []
        colors = parse_colors("darkred")
        assert [c.original_text for c in colors] == ["darkred"]

    def test_structured_and_named_side_by_side(self) -> None:
        colors = parse_colors("rgb(0, 0, 0) black")
        assert [c.format for c in colors] == ["rgb", "named"]

    def test_deterministic(self, sample_css: str) -> None:
        assert parse_colors(sample_css) == parse_colors(sample_css)

    def test_empty_text(self) -> None:
        assert parse_colors("") == []


def test_unique_colors_first_seen_order() -> None:
    colors = parse_colors("#000 red #000000 blue rgb(255,0,0)")
    uniques = unique_colors(colors)
    assert [c.normalized_hex for c in uniques] == ["#000000", "#ff0000", "#0000ff"]
    assert uniques[0].original_text == "#000"
    assert uniques[0].occurrence_count == 2


class TestDetectColorPairs:
    def test_rules_with_both_declarations(self, sample_css: str) -> None:
        pairs = detect_color_pairs(sample_css)
        assert [(p.foreground_hex, p.background_hex) for p in pairs] == [
            ("#ffffff", "#1a73e8"),
            ("#ffffff", "#34a853"),
            ("#ffffff", "#d92626"),
        ]

    def test_background_color_alone_is_not_a_pair(self) -> None:
        assert detect_color_pairs(".a { background-color: #ffffff; }") == []

    def test_declaration_without_color_is_skipped(self) -> None:
        assert detect_color_pairs(".a { color: inherit; background: #fff; }") == []

    def test_context_snippet(self) -> None:
        css = ".card { background-color: #fafafa; color: #333333; padding: 12px 16px; }"
        (pair,) = detect_color_pairs(css)
        assert pair == ColorPair(
            foreground_hex="#333333",
            background_hex="#fafafa",
            context_snippet=css[len(".card "):][:CONTEXT_LENGTH] + "...",
        )


def test_compare_colors() -> None:
    diff = compare_colors("a { color: #fff; background: #000; }", "a { color: #fff; background: navy; }")
    assert diff.added == ["#000080"]
    assert diff.removed == ["#000000"]
    assert diff.retained == ["#ffffff"]
    assert diff.changed


def test_compare_identical_text_is_unchanged(sample_css: str) -> None:
    assert not compare_colors(sample_css, sample_css).changed
