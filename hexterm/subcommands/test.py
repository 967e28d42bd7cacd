#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/subcommands/test.py

import argparse
import sys

from hexterm.logic.probe.renderer import print_palette
from hexterm.shared.logger import HextermArgumentParser
from hexterm.shared.sanitizer import INPUT_HANDLERS
from hexterm.shared.terminfo import TerminfoResolver


def handle_test_command(args: argparse.Namespace, term) -> None:
    print_palette(term)


def get_test_parser() -> argparse.ArgumentParser:
    parser = HextermArgumentParser(
        prog="hexterm test",
        description="hexterm test: print every palette index in its own color",
        formatter_class=argparse.RawTextHelpFormatter,
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
    parser = get_test_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_test_command(args, TerminfoResolver(args.term))
