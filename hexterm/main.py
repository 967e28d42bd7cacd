#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/main.py

import argparse
import sys

from hexterm import __version__
from hexterm.core import config as c
from hexterm.core.errors import CapabilityLookupError
from hexterm.logic.style.renderer import render
from hexterm.logic.style.request import StyleRequest
from hexterm.subcommands.command_registry import SUBCOMMANDS
from hexterm.shared.logger import log, HextermArgumentParser
from hexterm.shared.sanitizer import INPUT_HANDLERS
from hexterm.shared.terminfo import TerminfoResolver


def get_style_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main styled-print command."""
    parser = HextermArgumentParser(
        prog="hexterm",
        description="hexterm: print text in the terminal color closest to a hex color",
        epilog=(
            "shorthand:\n"
            "  hexterm <hex> <text>     same as hexterm -f <hex> <text>\n"
            "subcommands:\n"
            "  hexterm test             print the terminal palette\n"
            "  hexterm code <hex>       show the palette index for a color"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"hexterm {__version__}",
        help="show program version and exit",
    )

    color_group = parser.add_argument_group("colors")
    color_group.add_argument(
        "-f",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="foreground color, 3 or 6 digit hex",
    )
    color_group.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="background color, 3 or 6 digit hex",
    )

    attr_group = parser.add_argument_group("attributes")
    attr_group.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        action="append",
        type=INPUT_HANDLERS["attribute"],
        default=None,
        help="text attribute, may be repeated\n"
        "one of: bold ul rev blink invis so",
    )
    attr_group.add_argument(
        "-n",
        "--no-reset",
        action="store_true",
        help="do not reset attributes after the text",
    )

    parser.add_argument(
        "-T",
        "--term",
        type=INPUT_HANDLERS["term"],
        default=None,
        help="terminal type to query (default: $TERM)",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="text to print",
    )
    return parser


def resolve_style_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    """Apply the '<hex> <text>' shorthand and return the text to print."""
    words = list(args.words)
    # unknown -a values arrive as None and must not disable the shorthand
    known_attributes = [a for a in (args.attributes or []) if a is not None]
    shorthand = (
        args.foreground is None
        and args.background is None
        and not known_attributes
        and len(words) >= 2
    )
    if shorthand:
        try:
            args.foreground = INPUT_HANDLERS["hex"](words.pop(0))
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

    if not words:
        parser.error("no text given")
    return " ".join(words)


def handle_style_command(args: argparse.Namespace, parser: argparse.ArgumentParser, term) -> None:
    text = resolve_style_args(args, parser)
    render(StyleRequest.from_args(args), text, term)


def main() -> None:
    """Main entry point for hexterm CLI"""
    try:
        if len(sys.argv) > 1:
            cmd = sys.argv[1].lower()
            if cmd in SUBCOMMANDS:
                sys.argv.pop(1)
                SUBCOMMANDS[cmd].main()
                sys.exit(c.EXIT_OK)

        parser = get_style_parser()
        args = parser.parse_args()
        handle_style_command(args, parser, TerminfoResolver(args.term))
    except CapabilityLookupError as e:
        log("error", str(e))
        sys.exit(c.EXIT_CAPABILITY)


if __name__ == "__main__":
    main()
