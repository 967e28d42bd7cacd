#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/logic/code/renderer.py

from hexterm.core import config as c
from hexterm.core.mapper import classify, hex_to_rgb


def compose_code(hex_code: str, term, verbose: bool = False) -> str:
    """Show the mapped index as foreground text and on a background fill."""
    index, subspace = classify(hex_code)
    reset = term.reset()
    label = f"{index:>{c.INDEX_FIELD_WIDTH}}"
    swatch = f"{term.foreground(index)}{label}{reset} {term.background(index)}{label}{reset}"

    if not verbose:
        return swatch

    r, g, b = hex_to_rgb(hex_code)
    arrow = f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"
    info = (
        f"{c.BOLD_WHITE}#{r:02X}{g:02X}{b:02X}{c.RESET} rgb({r}, {g}, {b}) "
        f"{arrow} {c.BOLD_WHITE}{index}{c.RESET} ({subspace})"
    )
    return f"{info} {swatch}"


def print_code(hex_code: str, term, verbose: bool = False) -> None:
    print(compose_code(hex_code, term, verbose))
