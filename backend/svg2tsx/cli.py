"""
svg2tsx — convert SVG files to React TSX components.

Usage:
  svg2tsx icon.svg                       # prints TSX to terminal
  svg2tsx icon.svg -o Icon.tsx           # saves TSX
  svg2tsx icons/ -o components/          # batch convert a folder
  svg2tsx icon.svg --memo --forward-ref --name AlertIcon
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svg2tsx.converter import convert_svg
from svg2tsx.errors import ConversionError, FileIOError, SvgParseError
from svg2tsx.files import derive_component_name, read_svg_file, save_tsx_file
from svg2tsx.models.options import DEFAULT_OPTIMIZER_OPTIONS, ConversionOptions, OptimizerOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svg2tsx", description="Convert SVG to a React TSX component")
    parser.add_argument("input", help="SVG file or folder of SVG files")
    parser.add_argument("-o", "--output", help="Output .tsx file (or folder when input is a folder)")
    parser.add_argument("--name", help="Component name for a single file (default: from file name)")
    parser.add_argument("--no-typescript", action="store_true", help="Omit type annotations")
    parser.add_argument("--no-spread", action="store_true", help="Do not spread props onto <svg>")
    parser.add_argument("--memo", action="store_true", help="Wrap the component in React.memo")
    parser.add_argument("--forward-ref", action="store_true", help="Use React.forwardRef")
    parser.add_argument("--no-optimize", action="store_true", help="Skip SVG optimization")

    opt = parser.add_argument_group("optimizer")
    opt.add_argument("--remove-ids", action="store_true", help="Remove id attributes")
    opt.add_argument("--keep-data-attrs", action="store_true", help="Keep data-* attributes")
    opt.add_argument("--keep-empty-groups", action="store_true", help="Keep empty <g> elements")
    opt.add_argument("--keep-defaults", action="store_true", help='Keep fill="black" / stroke="none"')
    opt.add_argument("--keep-transforms", action="store_true", help="Keep no-op translate(0,0)")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion details")
    return parser


def _optimizer_options(args: argparse.Namespace) -> OptimizerOptions:
    return DEFAULT_OPTIMIZER_OPTIONS.model_copy(
        update={
            "remove_ids": args.remove_ids,
            "remove_data_attrs": not args.keep_data_attrs,
            "remove_empty_groups": not args.keep_empty_groups,
            "remove_default_attrs": not args.keep_defaults,
            "optimize_transforms": not args.keep_transforms,
        }
    )


def _conversion_options(args: argparse.Namespace, svg_path: Path) -> ConversionOptions:
    return ConversionOptions(
        component_name=args.name or derive_component_name(svg_path),
        typescript=not args.no_typescript,
        spread_props=not args.no_spread,
        use_memo=args.memo,
        use_forward_ref=args.forward_ref,
        optimize=not args.no_optimize,
    )


def convert_file(svg_path: Path, args: argparse.Namespace) -> str:
    svg_text = read_svg_file(svg_path)
    result = convert_svg(svg_text, _conversion_options(args, svg_path), _optimizer_options(args))
    return result.code


def _error_message(exc: Exception) -> str:
    return exc.message if isinstance(exc, SvgParseError) else str(exc)


def convert_folder(input_dir: Path, out_dir: Path, args: argparse.Namespace) -> int:
    """Convert every .svg in ``input_dir``. A failing file is reported and skipped."""
    out_dir.mkdir(parents=True, exist_ok=True)
    svgs = sorted(p for p in input_dir.iterdir() if p.suffix.lower() == ".svg")

    written: dict[str, Path] = {}
    failed = 0
    for svg_path in svgs:
        name = derive_component_name(svg_path)
        if name in written:
            print(
                f"Error: {svg_path.name}: component {name} already written from {written[name].name}",
                file=sys.stderr,
            )
            failed += 1
            continue
        try:
            code = convert_file(svg_path, args)
            target = out_dir / f"{name}.tsx"
            save_tsx_file(target, code + "\n")
        except (SvgParseError, ConversionError, FileIOError) as e:
            print(f"Error: {svg_path.name}: {_error_message(e)}", file=sys.stderr)
            failed += 1
            continue
        written[name] = svg_path
        print(f"  {svg_path.name} -> {target}")

    if failed:
        print(f"Converted {len(written)} of {len(svgs)} files ({failed} failed)")
        return 1
    print(f"Converted {len(written)} files")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    input_path = Path(args.input)
    if input_path.is_dir():
        if not args.output:
            print("Error: --output folder is required when input is a folder", file=sys.stderr)
            return 1
        if args.name:
            print("Error: --name applies to a single file only", file=sys.stderr)
            return 1
        return convert_folder(input_path, Path(args.output), args)

    try:
        code = convert_file(input_path, args)
        if args.output:
            save_tsx_file(args.output, code + "\n")
        else:
            print(code)
        return 0
    except (SvgParseError, ConversionError, FileIOError) as e:
        print(f"Error: {_error_message(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
