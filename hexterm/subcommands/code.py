#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/subcommands/code.py

import argparse
import sys

from hexterm.logic.code.renderer import print_code
from hexterm.shared.logger import HextermArgumentParser
from hexterm.shared.sanitizer import INPUT_HANDLERS
from hexterm.shared.terminfo import TerminfoResolver


def handle_code_command(args: argparse.Namespace, term) -> None:
    """Print the palette index a hex color maps to, in fg and bg form."""
    print_code(args.color, term, verbose=args.verbose)


def get_code_parser() -> argparse.ArgumentParser:
    """Create argument parser for code command.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """
    parser = HextermArgumentParser(
        prog="hexterm code",
        description="hexterm code: show the terminal color index for a hex color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "color",
        type=INPUT_HANDLERS["hex"],
        help="3 or 6 digit hex color, '#' optional\n"
        "a 3 digit code expands each digit d to d0: 70f -> 7000f0",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="also print the rgb channels and the palette region",
    )
    parser.add_argument(
        "-T",
        "--term",
        type=INPUT_HANDLERS["term"],
        default=None,
        help="terminal type to query (default: $TERM)",
    )
    return parser


def main() -> None:
    parser = get_code_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_code_command(args, TerminfoResolver(args.term))
