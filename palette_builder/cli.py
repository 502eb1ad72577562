import argparse
import logging
import os

from . import config
from .accessibility import (
    accessibility_score,
    best_contrast,
    check_accessibility,
    generate_accessible_palette,
    readability_report,
)
from .color import InvalidColor, parse_hex
from .convert import convert_color, hex_to_hsv, random_color, round_half_up
from .export import export_csv, export_json, export_pdf, palette_filename
from .palette import extract_palette, load_palette_from_json
from .vision import BLINDNESS_TYPES, describe, simulate


def _color_arg(value):
    try:
        return parse_hex(value)
    except InvalidColor as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _count_arg(value):
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1, got {count}")
    return count


def build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-builder",
        description="Convert, check and export color palettes",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Show a color in every format")
    p.add_argument("color", type=_color_arg, help="Hex color, 3 or 6 digits")

    p = sub.add_parser("contrast", help="WCAG contrast of a foreground/background pair")
    p.add_argument("foreground", type=_color_arg)
    p.add_argument("background", type=_color_arg)

    p = sub.add_parser("simulate", help="Simulate color vision deficiencies")
    p.add_argument("color", type=_color_arg)
    p.add_argument(
        "--type",
        dest="blindness_type",
        choices=BLINDNESS_TYPES,
        default=None,
        help="Deficiency to simulate (default: all)",
    )

    p = sub.add_parser("accessible", help="Generate an accessible lightness ramp")
    p.add_argument("base", type=_color_arg, help="Base color")
    p.add_argument(
        "--count", "-n", type=_count_arg, default=config.DEFAULT_ACCESSIBLE_COUNT
    )
    p.add_argument(
        "--output", "-o", metavar="JSON", help="Write the ramp as palette JSON"
    )
    p.add_argument("--name", default="Accessible Palette", help="Palette name")

    p = sub.add_parser("random", help="Print random colors")
    p.add_argument("--count", "-n", type=_count_arg, default=1)

    p = sub.add_parser("report", help="Readability report for a palette JSON file")
    p.add_argument("palette", metavar="JSON")

    p = sub.add_parser("export", help="Export a palette JSON file")
    p.add_argument("palette", metavar="JSON")
    p.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    p.add_argument("--csv", action="store_true", help="Write CSV")
    p.add_argument("--pdf", action="store_true", help="Write PDF document")
    p.add_argument("--json", action="store_true", help="Write normalized JSON")
    p.add_argument("--name", help="Override the palette name")

    p = sub.add_parser("extract", help="Extract a palette from an image")
    p.add_argument("image_path", help="Path to the source image")
    p.add_argument(
        "--count", "-n", type=_count_arg, default=config.DEFAULT_ACCESSIBLE_COUNT
    )
    p.add_argument(
        "--name", help="Palette name (default: derived from the image filename)"
    )
    p.add_argument(
        "--output",
        "-o",
        metavar="JSON",
        help="Output file (default: palette JSON next to the image)",
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "convert": _run_convert,
        "contrast": _run_contrast,
        "simulate": _run_simulate,
        "accessible": _run_accessible,
        "random": _run_random,
        "report": _run_report,
        "export": _run_export,
        "extract": _run_extract,
    }
    return handlers[args.command](args)


def _print_formats(hex_color):
    formats = convert_color(hex_color)
    h, s, v = hex_to_hsv(hex_color)
    print(f"HEX:  {formats.hex}")
    print(f"RGB:  {formats.rgb}")
    print(f"HSL:  {formats.hsl}")
    h, s, v = (round_half_up(c) for c in (h, s, v))
    print(f"HSV:  hsv({h}, {s}%, {v}%)")
    print(f"CMYK: {formats.cmyk}")
    print(f"LAB:  {formats.lab}")


def _run_convert(args):
    _print_formats(args.color)
    print(f"Best text color: {best_contrast(args.color)}")
    return 0


def _run_contrast(args):
    result = check_accessibility(args.foreground, args.background)
    status = "✓ Passes" if result.score == "pass" else "✗ Fails"
    print(f"{args.foreground} on {args.background}")
    print(f"Contrast ratio: {result.ratio:.2f}:1")
    print(f"Level: {result.level}")
    print(f"{status} WCAG Guidelines")
    return 0


def _run_simulate(args):
    types = [args.blindness_type] if args.blindness_type else BLINDNESS_TYPES
    print(f"Original: {args.color}")
    for blindness_type in types:
        info = describe(blindness_type)
        simulated = simulate(args.color, blindness_type)
        print(f"  {info['name']:14} {simulated}  ({info['prevalence']})")
    return 0


def _run_accessible(args):
    colors = generate_accessible_palette(args.base, args.count)
    for color in colors:
        text = best_contrast(color.hex)
        result = check_accessibility(text, color.hex)
        print(
            f"  {color.name:14} {color.hex}  text {text}  "
            f"{result.ratio:4.1f}:1  {result.level}"
        )
    if args.output:
        export_json(colors, args.output, args.name)
        print(f"\nExported: {args.output}")
    return 0


def _run_random(args):
    for _ in range(args.count):
        print(random_color())
    return 0


def _run_report(args):
    palette, name = load_palette_from_json(args.palette)
    report, _issues = readability_report(palette, name)
    print(report)
    return 0


def _run_export(args):
    palette_path = args.palette
    output_dir = args.output or os.path.dirname(palette_path) or "."
    os.makedirs(output_dir, exist_ok=True)

    palette, name = load_palette_from_json(palette_path)
    name = args.name or name

    # Nothing selected means everything
    selected = {"csv": args.csv, "pdf": args.pdf, "json": args.json}
    if not any(selected.values()):
        selected = dict.fromkeys(selected, True)

    exported = []
    if selected["csv"]:
        path = os.path.join(output_dir, palette_filename(name, "csv"))
        export_csv(palette, name, path)
        exported.append(path)
    if selected["pdf"]:
        path = os.path.join(output_dir, palette_filename(name, "pdf"))
        export_pdf(palette, name, path)
        exported.append(path)
    if selected["json"]:
        path = os.path.join(output_dir, palette_filename(name, "json"))
        export_json(palette, path, name)
        exported.append(path)

    print("\n" + "=" * 60)
    print(f"Palette: {name} ({len(palette)} colors)")
    print(f"Accessibility score: {accessibility_score(palette)}%")
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)
    return 0


def _run_extract(args):
    image_path = args.image_path
    name = args.name or os.path.splitext(os.path.basename(image_path))[0]
    output_path = args.output or os.path.join(
        os.path.dirname(image_path) or ".", palette_filename(name, "json")
    )

    print(f"Analyzing: {image_path}")
    colors = extract_palette(image_path, args.count)
    for color in colors:
        print(f"  {color.name:14} {color.hex}")

    export_json(colors, output_path, name)
    print(f"\nExported: {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
