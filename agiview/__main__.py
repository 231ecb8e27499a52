"""
__main__.py – CLI entry-point for the agiview package.

Usage:  python -m agiview <command> [options] <files…>

Commands
--------
convert FILE…   Convert View resources to bitmaps (FILE.png by default).
info    FILE…   Print the loop/cel layout of View resources.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_convert(args: argparse.Namespace) -> int:
    """Convert View resources to BMP or PNG."""
    from agiview.convert import convert_views

    errors = 0
    for result in convert_views(args.files, outdir=args.outdir, fmt=args.format):
        if result.ok:
            if args.verbose:
                print(f"Converting {result.source.name} → {result.dest}")
        else:
            print(f"Error converting {result.source.name}: {result.error}",
                  file=sys.stderr)
            errors += 1
    if args.verbose:
        print(f"Converted {len(args.files) - errors} of {len(args.files)} file(s).")
    return 1 if errors else 0


def _print_cel_rows(rows) -> None:
    for row in rows:
        print("      " + "".join(f"{c:x}" for c in row))


def cmd_info(args: argparse.Namespace) -> int:
    """List loops and cels of View resources."""
    from agiview.cel import decode_cel_indices
    from agiview.cursor import ByteCursor
    from agiview.view import measure_view, parse_view

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            cur  = ByteCursor.from_path(fp)
            view = parse_view(cur)
            width, height = measure_view(view)
            print(f"{fp.name}: {view.num_loops} loop(s), canvas {width}x{height}")
            for i, loop in enumerate(view.loops):
                print(f"  loop {i:3d} @ {loop.offset:#06x}: {len(loop.cels)} cel(s), "
                      f"{loop.total_width}x{loop.total_height}")
                for j, cel in enumerate(loop.cels):
                    mirror = (f", mirrored (home loop {cel.home_loop_index})"
                              if cel.is_mirrored else "")
                    print(f"    cel {j:3d} @ {cel.header_offset:#06x}: "
                          f"{cel.width}x{cel.height}, "
                          f"transparent {cel.transparency_color}{mirror}")
                    if args.dump:
                        _print_cel_rows(decode_cel_indices(cur, cel))
        except ValueError as exc:
            print(f"Error reading {fp.name}: {exc}", file=sys.stderr)
            errors += 1
    return 1 if errors else 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    from agiview import __version__

    parser = argparse.ArgumentParser(
        prog="python -m agiview",
        description="Convert Sierra Adventure Game Interpreter (AGI) View resources to bitmaps.",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print progress messages.")
    parser.add_argument("-o", "--outdir", metavar="DIR",
                        help="Output directory (default: same as input).")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    # convert
    p_conv = sub.add_parser("convert", help="Convert View resources to bitmaps.")
    p_conv.add_argument("files", nargs="+", metavar="FILE",
                        help="View resource files, e.g. VIEW.001.")
    p_conv.add_argument("--format", default="png", choices=["png", "bmp"],
                        help="Output image format (default: png; bmp has no alpha).")
    p_conv.add_argument("-o", "--outdir", metavar="DIR", default=argparse.SUPPRESS,
                        help="Output directory (default: same as input).")

    # info
    p_info = sub.add_parser("info", help="Print the loop/cel layout of View resources.")
    p_info.add_argument("files", nargs="+", metavar="FILE")
    p_info.add_argument("--dump", action="store_true",
                        help="Also print each cel's pixels as hex palette indices.")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

_COMMANDS = {
    "convert": cmd_convert,
    "info":    cmd_info,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if not hasattr(args, "verbose"):
        args.verbose = False
    if not hasattr(args, "outdir"):
        args.outdir = None

    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
