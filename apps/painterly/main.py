#!/usr/bin/env python3
"""Painterly image renderer CLI."""

import logging
import sys
from pathlib import Path

import click

from image_grid import LabeledImage, SheetLayout, create_grid
from visual.painterly import (
    LoadError,
    RenderParams,
    all_style_names,
    load_image,
    parse_style_name,
    render_multiple,
    save_png,
)

DEFAULTS = RenderParams()


@click.command()
@click.argument('input', type=click.Path(), required=False)
@click.option('--style', type=str, help='Single style to apply')
@click.option('--styles', type=str, help='Comma-separated styles or "all"')
@click.option('-o', '--output', type=click.Path(), help='Output path (single style only)')
@click.option('--density', type=float, default=DEFAULTS.density, show_default=True, help='Stroke density multiplier')
@click.option('--size', type=float, default=DEFAULTS.base_size, show_default=True, help='Base stroke size in pixels')
@click.option('--seed', type=int, default=None, help='Random seed for reproducible output')
@click.option('--levels', type=int, default=DEFAULTS.levels, show_default=True, help='Posterize levels per channel')
@click.option('--max-side', type=int, default=DEFAULTS.max_side, show_default=True, help='Longest side of the output')
@click.option('--list-styles', is_flag=True, help='List available styles')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def main(input, style, styles, output, density, size, seed, levels, max_side, list_styles, debug):
    """Painterly image renderer."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)

    if list_styles:
        click.echo("Available styles:")
        for name in all_style_names():
            click.echo(f"  - {name}")
        return

    # Require input if not listing styles
    if not input:
        raise click.UsageError("INPUT argument is required (unless using --list-styles)")

    # Validate mutually exclusive options
    if style and styles:
        raise click.UsageError("Cannot use both --style and --styles")

    if not style and not styles:
        raise click.UsageError("Must specify either --style or --styles")

    if output and styles:
        raise click.UsageError("--output can only be used with --style")

    try:
        img = load_image(input)
    except LoadError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    input_path = Path(input)

    if style:
        style_names = [style]
    elif styles.lower() == "all":
        style_names = all_style_names()
    else:
        style_names = [s.strip() for s in styles.split(',')]

    style_list = []
    for style_name in style_names:
        try:
            style_list.append((parse_style_name(style_name), None))
        except ValueError as e:
            if style:
                click.echo(str(e), err=True)
                sys.exit(1)
            click.echo(f"Warning: Skipping invalid style '{style_name}': {e}", err=True)

    if not style_list:
        click.echo("No valid styles to render", err=True)
        sys.exit(1)

    params = RenderParams(density=density, base_size=size, levels=levels, max_side=max_side, seed=seed)
    try:
        results = render_multiple(img, style_list, params)
    except ValueError as e:
        click.echo(f"Error rendering image: {e}", err=True)
        sys.exit(1)

    # Always output PNG
    for style_name, result_img in results.items():
        output_path = Path(output) if output else input_path.parent / f"{input_path.stem}_{style_name}.png"
        try:
            save_png(result_img, output_path)
            click.echo(f"Saved: {output_path}")
        except OSError as e:
            click.echo(f"Error saving {style_name}: {e}", err=True)
            sys.exit(1)

    if style:
        return

    # Side-by-side comparison sheet
    try:
        labeled = [LabeledImage(image=result_img, label=name) for name, result_img in results.items()]
        sheet = create_grid(labeled, SheetLayout.for_count(len(labeled)))
        comparison_path = save_png(sheet, input_path.parent / f"{input_path.stem}_comparison.png")
        click.echo(f"Saved comparison: {comparison_path}")
    except (ValueError, OSError) as e:
        click.echo(f"Error creating comparison sheet: {e}", err=True)


if __name__ == '__main__':
    main()
