#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/logic/probe/renderer.py

from hexterm.core import config as c


def compose_palette(term) -> str:
    """One swatch entry per palette index the terminal reports, then a reset."""
    # direct-color entries report millions of colors; only the indexed palette is probed
    count = min(term.colors(), c.PALETTE_SIZE)
    swatch = [f"{term.foreground(i)}{i:>{c.INDEX_FIELD_WIDTH}}" for i in range(count)]
    return "".join(swatch) + term.reset()


def print_palette(term) -> None:
    print(compose_palette(term))
