"""framesequence CLI — expand frame sequence strings from the shell.

Usage:
    framesequence expand <notation> [--json] [--separator <sep>] [--max-frames <n>]
    framesequence check <notation> [--max-frames <n>]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from framesequence import __version__
from framesequence.core.config import get_config
from framesequence.core.types import FrameSequenceError


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framesequence",
        description="Expand frame sequence strings such as 1-100@b into frame numbers",
        epilog="Grammar: parts separated by ',', ranges 'a-b', optional '@step' or '@b'.",
    )
    parser.add_argument("--version", action="version", version=f"framesequence {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- expand ---
    expand_parser = subparsers.add_parser("expand", help="Print the frames of a sequence")
    expand_parser.add_argument("notation", type=str, help="Frame sequence string, e.g. 10-20@2")
    expand_parser.add_argument(
        "--json", action="store_true", help="Print a JSON document instead of a frame list"
    )
    expand_parser.add_argument(
        "--separator", "-s", type=str, default=None, help="Separator between printed frames"
    )
    expand_parser.add_argument(
        "--max-frames", type=int, default=None, help="Refuse sequences larger than this"
    )

    # --- check ---
    check_parser = subparsers.add_parser("check", help="Parse a sequence and report diagnostics")
    check_parser.add_argument("notation", type=str, help="Frame sequence string")
    check_parser.add_argument(
        "--max-frames", type=int, default=None, help="Report sequences larger than this"
    )

    return parser


def cmd_expand(args: argparse.Namespace, console: Console) -> int:
    """Expand a sequence and print its frames."""
    from framesequence.pipeline import expand_frame_sequence

    result = expand_frame_sequence(args.notation, max_frames=args.max_frames)

    if args.json:
        document = json.dumps(result.to_dict(), indent=2)
        console.print(document, markup=False, highlight=False, soft_wrap=True)
        return 0

    separator = args.separator if args.separator is not None else get_config().separator
    console.print(
        separator.join(str(frame) for frame in result.frames),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    return 0


def cmd_check(args: argparse.Namespace, console: Console) -> int:
    """Parse a sequence and print its parts and validator diagnostics."""
    from framesequence.dsl.ast_nodes import FrameRange
    from framesequence.dsl.validator import validate_sequence
    from framesequence.expander.strategies import expansion_size
    from framesequence.pipeline import parse_tree

    max_frames = args.max_frames if args.max_frames is not None else get_config().max_frames
    tree = parse_tree(args.notation)
    diagnostics = validate_sequence(tree, max_frames=max_frames)

    table = Table(title=f"{len(tree.parts)} parts")
    table.add_column("Pos", justify="right")
    table.add_column("Part")
    table.add_column("Frames", justify="right")
    for part in tree.parts:
        if isinstance(part, FrameRange):
            table.add_row(str(part.position), str(part), str(expansion_size(part)))
        else:
            table.add_row(str(part.position), str(part.value), "1")
    console.print(table)

    for diagnostic in diagnostics:
        console.print(Text(str(diagnostic)), soft_wrap=True)

    if any(d.severity == "error" for d in diagnostics):
        return 1
    console.print("OK")
    return 0


def _print_error(err: FrameSequenceError, notation: str, console: Console) -> None:
    console.print(Text(f"Error: {err}", style="bold red"), soft_wrap=True)
    position = getattr(err, "position", None)
    if position is not None:
        console.print(Text(f"  {notation}"))
        console.print(Text(f"  {' ' * position}^", style="red"))


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    config = get_config()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        return 0

    dispatch = {
        "expand": cmd_expand,
        "check": cmd_check,
    }

    console = Console()
    try:
        return dispatch[args.command](args, console)
    except FrameSequenceError as err:
        _print_error(err, args.notation, Console(stderr=True))
        return 1


if __name__ == "__main__":
    sys.exit(main())
