"""
cli.py
──────
HueShift – command-line entry point.

Usage examples
──────────────
  # List every colour in a stylesheet
  hueshift scan styles.css

  # Swap a colour everywhere, keeping each literal's syntax
  hueshift replace styles.css --target "#1a73e8" --with "#0b57d0" -o out.css

  # Check and fix contrast
  hueshift contrast "#777777" "#ffffff"
  hueshift suggest "#777777" --background "#ffffff" --level AAA

  # Merge near-duplicates
  hueshift similar styles.css --threshold 6 --merge -o merged.css

  # Generate a tonal palette (from a colour or from an image)
  hueshift palette "#3b82f6" --name brand --format css
  hueshift palette --from-image logo.png --format pdf -o brand.pdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .color_model import InvalidColorError, parse_color
from .config import Config, default_config, load_config
from .contrast import contrast_ratio, suggest_accessible_alternative, wcag_compliance
from .exporters import export_palette
from .palette import LIGHTNESS_CURVES, SHADE_STEPS, contrast_pairs, generate_palette
from .parser import compare_colors, detect_color_pairs, parse_colors, unique_colors
from .replacer import merge_similar_colors, replace_color
from .similarity import find_similar_color_groups


# ── CLI definition ─────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hueshift",
        description="Find, replace, audit and generate colours in CSS and other text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument("--config", "-c", metavar="PATH",
                   help="JSON config file with default settings.")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Enable debug logging.")
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    s = sub.add_parser("scan", help="List the colours found in a file.")
    s.add_argument("file", help="Text file to scan ('-' for stdin).")
    s.add_argument("--json", action="store_true", help="Emit JSON instead of a table.")

    s = sub.add_parser("replace", help="Replace one colour with another.")
    s.add_argument("file", help="Text file to edit ('-' for stdin).")
    s.add_argument("--target", required=True, metavar="COLOR", help="Colour to replace.")
    s.add_argument("--with", dest="replacement", required=True, metavar="COLOR",
                   help="Replacement colour.")
    s.add_argument("--ids", nargs="+", metavar="ID",
                   help="Only replace these instance ids (see 'scan --json').")
    s.add_argument("--output", "-o", metavar="PATH", help="Write result here (default: stdout).")

    s = sub.add_parser("contrast", help="WCAG contrast ratio of two colours.")
    s.add_argument("foreground")
    s.add_argument("background")

    s = sub.add_parser("suggest", help="Suggest an accessible variant of a colour.")
    s.add_argument("color")
    s.add_argument("--background", "-b", metavar="COLOR")
    s.add_argument("--level", choices=("AA", "AAA"))

    s = sub.add_parser("similar", help="Group near-duplicate colours.")
    s.add_argument("file", help="Text file to scan ('-' for stdin).")
    s.add_argument("--threshold", type=float, metavar="DELTA_E")
    s.add_argument("--merge", action="store_true",
                   help="Replace every group member with its representative.")
    s.add_argument("--output", "-o", metavar="PATH", help="Where to write merged text.")

    s = sub.add_parser("pairs", help="Audit color/background pairs declared in CSS rules.")
    s.add_argument("file", help="CSS file ('-' for stdin).")

    s = sub.add_parser("compare", help="Colours added or removed between two files.")
    s.add_argument("original")
    s.add_argument("current")

    s = sub.add_parser("palette", help="Generate an 11-shade tonal palette.")
    s.add_argument("base", nargs="?", metavar="COLOR", help="Seed colour.")
    s.add_argument("--from-image", metavar="PATH", help="Take the seed colour from an image.")
    s.add_argument("--name", "-n")
    s.add_argument("--shade", type=int, choices=SHADE_STEPS,
                   help="Step that should match the seed's lightness.")
    s.add_argument("--curve", choices=sorted(LIGHTNESS_CURVES))
    s.add_argument("--format", "-f", dest="fmt", choices=("tailwind", "css", "json", "pdf"))
    s.add_argument("--output", "-o", metavar="PATH",
                   help="Output file (required for pdf; default stdout otherwise).")
    return p


# ── I/O helpers ────────────────────────────────────────────────────────────────

def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        Path(output).write_text(text, encoding="utf-8")
        print(f"  ✓ Wrote {output}", file=sys.stderr)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _flags(aa: bool, aaa: bool) -> str:
    return f"AA {'✓' if aa else '✗'}  AAA {'✓' if aaa else '✗'}"


# ── Commands ───────────────────────────────────────────────────────────────────

def _cmd_scan(args: argparse.Namespace, cfg: Config) -> int:
    instances = parse_colors(_read(args.file))
    if args.json:
        print(json.dumps([asdict(c) for c in instances], indent=2))
        return 0
    uniques = unique_colors(instances)
    print(f"  {len(instances)} colour literal(s), {len(uniques)} unique\n")
    for c in uniques:
        print(f"  {c.normalized_hex}  ×{c.occurrence_count:<3}  {c.format:<6} {c.original_text}")
    return 0


def _cmd_replace(args: argparse.Namespace, cfg: Config) -> int:
    if parse_color(args.replacement) is None:
        print(f"[error] Not a valid colour: {args.replacement}", file=sys.stderr)
        return 1
    target = parse_color(args.target)
    if target is None:
        print(f"[error] Not a valid colour: {args.target}", file=sys.stderr)
        return 1

    text = _read(args.file)
    mode = "selective" if args.ids else "all"
    result = replace_color(text, parse_colors(text), target.to_hex(), args.replacement, mode, args.ids)
    if result == text:
        print(f"  [warning] No instances of {target.to_hex()} were replaced.", file=sys.stderr)
    _emit(result, args.output)
    return 0


def _cmd_contrast(args: argparse.Namespace, cfg: Config) -> int:
    for value in (args.foreground, args.background):
        if parse_color(value) is None:
            print(f"[error] Not a valid colour: {value}", file=sys.stderr)
            return 1
    ratio = contrast_ratio(args.foreground, args.background)
    wcag = wcag_compliance(ratio)
    print(f"  Contrast {ratio:.2f}:1")
    print(f"  Normal text  {_flags(wcag.aa.normal, wcag.aaa.normal)}")
    print(f"  Large text   {_flags(wcag.aa.large, wcag.aaa.large)}")
    return 0


def _cmd_suggest(args: argparse.Namespace, cfg: Config) -> int:
    background = args.background or cfg["background"]
    for value in (args.color, background):
        if parse_color(value) is None:
            print(f"[error] Not a valid colour: {value}", file=sys.stderr)
            return 1
    level = args.level or cfg["target_level"]
    suggestion = suggest_accessible_alternative(args.color, background, level)
    if suggestion is None:
        print(f"  No lighter/darker variant of {args.color} improves contrast on {background}.")
        return 1
    print(f"  {suggestion.suggested_hex}  ({suggestion.ratio:.2f}:1 on {background}, target {level})")
    return 0


def _cmd_similar(args: argparse.Namespace, cfg: Config) -> int:
    text = _read(args.file)
    threshold = args.threshold if args.threshold is not None else cfg["similarity_threshold"]
    groups = find_similar_color_groups(unique_colors(parse_colors(text)), threshold)

    if not groups:
        print(f"  No similar colours within ΔE {threshold:g}.", file=sys.stderr)
    for g in groups:
        print(f"  {g.representative_hex}  ({g.total_occurrence_count} uses)", file=sys.stderr)
        for m in g.members:
            print(f"      ← {m.hex}  ΔE {m.distance:.2f}  ×{m.occurrence_count}", file=sys.stderr)

    if args.merge:
        for g in groups:
            text = merge_similar_colors(text, g)
        _emit(text, args.output)
    return 0


def _cmd_pairs(args: argparse.Namespace, cfg: Config) -> int:
    pairs = detect_color_pairs(_read(args.file))
    if not pairs:
        print("  No color/background pairs detected.")
        return 0
    for pair in pairs:
        ratio = contrast_ratio(pair.foreground_hex, pair.background_hex)
        wcag = wcag_compliance(ratio)
        print(f"  {pair.foreground_hex} on {pair.background_hex}  {ratio:5.2f}:1  "
              f"{_flags(wcag.aa.normal, wcag.aaa.normal)}")
        print(f"      {pair.context_snippet}")
    return 0


def _cmd_compare(args: argparse.Namespace, cfg: Config) -> int:
    diff = compare_colors(_read(args.original), _read(args.current))
    print(f"  Retained  {len(diff.retained)}")
    for label, values in (("Added", diff.added), ("Removed", diff.removed)):
        print(f"  {label:<8}  {len(values)}" + (f"  {' '.join(values)}" if values else ""))
    return 0


def _cmd_palette(args: argparse.Namespace, cfg: Config) -> int:
    opts = cfg["palette"]
    if args.from_image:
        # Imported lazily: Pillow/colorthief are only needed for this path
        from .color_extractor import ColorExtractor

        base = ColorExtractor(args.from_image).seed_color().to_hex()
        print(f"  Seed colour from {args.from_image}: {base}", file=sys.stderr)
    elif args.base:
        base = args.base
    else:
        print("[error] Give a seed colour or --from-image.", file=sys.stderr)
        return 1

    palette = generate_palette(
        base,
        name=args.name or opts["name"],
        target_shade=args.shade or opts["target_shade"],
        curve=args.curve or opts["curve"],
    )
    fmt = args.fmt or opts["format"]

    if fmt == "pdf":
        if not args.output:
            print("[error] --output is required for pdf.", file=sys.stderr)
            return 1
        from .swatch_sheet import SwatchSheetBuilder

        SwatchSheetBuilder(palette, page_size=opts.get("page_size", "letter")).build(args.output)
        print(f"  ✓ Wrote {args.output}", file=sys.stderr)
    else:
        _emit(export_palette(palette, fmt), args.output)

    for pair in contrast_pairs(palette):
        print(f"  {pair.dark_step:>3} on {pair.light_step:<3}  {pair.ratio:5.2f}:1  "
              f"{_flags(pair.aa, pair.aaa)}", file=sys.stderr)
    return 0


_COMMANDS = {
    "scan":     _cmd_scan,
    "replace":  _cmd_replace,
    "contrast": _cmd_contrast,
    "suggest":  _cmd_suggest,
    "similar":  _cmd_similar,
    "pairs":    _cmd_pairs,
    "compare":  _cmd_compare,
    "palette":  _cmd_palette,
}


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(args.config) if args.config else default_config()
    except (FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    try:
        return _COMMANDS[args.command](args, cfg)
    except (FileNotFoundError, InvalidColorError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
