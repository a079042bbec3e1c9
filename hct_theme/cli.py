"""
Command line front end: build a theme from an image or a seed color.

Usage:
    hct-theme --input photo.jpg
    hct-theme --color "#4285f4" --variant vibrant --contrast 0.5 --output theme.json
    hct-theme --color "#4285f4" --tertiary "#ff8a00" --color-match
"""

import argparse
import json
import sys
from pathlib import Path

from .color_utils import argb_from_hex, hex_from_argb
from .dynamic_scheme import PALETTE_ROLES, Variant
from .image import load_pixels
from .theme import CustomColor, Theme, source_colors_from_pixels, theme_from_source_color, theme_to_dict


def parse_custom_color(text: str) -> CustomColor:
    """
    Parse NAME=HEX into a custom color.

    Raises:
        ValueError: If the text has no '=' or the color is invalid
    """
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise ValueError(f"Custom color must look like NAME=HEX, got {text!r}")
    return CustomColor(name=name.strip(), value=argb_from_hex(value))


def render(theme: Theme, seeds: list) -> str:
    """Plain text report: seed colors and the role table for both modes."""
    lines = []
    lines.append("Seed colors:")
    for i, seed in enumerate(seeds):
        marker = " (source)" if seed == theme.source else ""
        lines.append(f"  {i + 1}. {hex_from_argb(seed)}{marker}")

    lines.append("")
    lines.append(f"Variant: {theme.variant.value}, contrast level: {theme.contrast_level:g}")
    lines.append("")

    light = theme.schemes['light']
    dark = theme.schemes['dark']
    width = max(len(role) for role in light)
    lines.append(f"  {'role':<{width}}  light    dark")
    for role in light:
        lines.append(f"  {role:<{width}}  {hex_from_argb(light[role])}  {hex_from_argb(dark[role])}")

    if theme.custom_colors:
        lines.append("")
        lines.append("Custom colors:")
        for group in theme.custom_colors:
            lines.append(f"  {group.color.name}: {hex_from_argb(group.color.value)} -> "
                         f"{hex_from_argb(group.value)} "
                         f"(light {hex_from_argb(group.light.color)}, dark {hex_from_argb(group.dark.color)})")

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Derive an accessible color theme from an image or a seed color.'
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--input', '-i',
        help='Path to the image file'
    )
    source.add_argument(
        '--color', '-c',
        help='Seed color as hex (#RGB, #RRGGBB or #AARRGGBB)'
    )
    parser.add_argument(
        '--variant', '-v',
        default=Variant.TONAL_SPOT.value,
        help=f"Scheme variant: {', '.join(v.value for v in Variant)} (default: tonal_spot)"
    )
    parser.add_argument(
        '--contrast',
        type=float,
        default=0.0,
        help='Contrast level from -1 (reduced) to 1 (high) (default: 0)'
    )
    parser.add_argument(
        '--custom',
        action='append',
        default=[],
        metavar='NAME=HEX',
        help='Custom color to harmonize into the theme; may be repeated'
    )
    parser.add_argument(
        '--color-match',
        action='store_true',
        help='Stay close to the seed color (uses the fidelity variant)'
    )
    for role in PALETTE_ROLES:
        parser.add_argument(
            f"--{role.replace('_', '-')}",
            dest=role,
            metavar='HEX',
            help=f"Build the {role.replace('_', ' ')} palette from this color instead of the seed"
        )
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Write the theme as JSON to this path'
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        variant = Variant.from_name(args.variant)
        if not -1.0 <= args.contrast <= 1.0:
            raise ValueError(f"Contrast level must be between -1 and 1, got {args.contrast}")
        custom_colors = [parse_custom_color(text) for text in args.custom]
        overrides = {
            role: argb_from_hex(getattr(args, role))
            for role in PALETTE_ROLES if getattr(args, role) is not None
        }

        if args.input:
            print(f"Loading {args.input}...")
            pixels = load_pixels(args.input)
            print(f"Quantizing {len(pixels):,} pixels...")
            seeds = source_colors_from_pixels(pixels)
        else:
            seeds = [argb_from_hex(args.color)]
        theme = theme_from_source_color(seeds[0], variant, args.contrast, custom_colors,
                                        color_match=args.color_match, **overrides)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(theme, seeds))

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(json.dumps(theme_to_dict(theme), indent=2))
            print(f"\nWrote: {output_path}")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
