#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/core/mapper.py

from typing import Tuple

from . import config as c
from .errors import InvalidCharacterError, InvalidLengthError


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color into a lowercase 6-character string.
    A leading '#' is dropped. A 3-digit code expands each digit d to 'd0',
    so '70f' becomes '7000f0' (not '7700ff').
    """
    if value is None:
        raise InvalidLengthError(value, "no color given")

    s = str(value)
    if s.startswith("#"):
        s = s[1:]

    if len(s) not in (c.SHORT_HEX_LEN, c.FULL_HEX_LEN):
        raise InvalidLengthError(
            value, f"expected {c.SHORT_HEX_LEN} or {c.FULL_HEX_LEN} hex digits, got {len(s)}"
        )

    s = s.lower()
    bad = [ch for ch in s if ch not in c.HEX_DIGITS]
    if bad:
        raise InvalidCharacterError(value, f"non-hex character '{bad[0]}'")

    if len(s) == c.SHORT_HEX_LEN:
        return "".join(ch + c.SHORT_HEX_FILL for ch in s)
    return s


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(value)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def _grey_index(level: int) -> int:
    return level * c.GREY_STEPS // c.CHANNEL_RANGE + c.GREY_BASE


def _cube_index(r: int, g: int, b: int) -> int:
    r6, g6, b6 = (ch * c.CUBE_LEVELS // c.CHANNEL_RANGE for ch in (r, g, b))
    return c.CUBE_BASE + 36 * r6 + 6 * g6 + b6


def _classify_rgb(hex_code: str, r: int, g: int, b: int) -> Tuple[int, str]:
    index = c.PRIMARY_COLORS.get(hex_code)
    if index is not None:
        return index, c.SUBSPACE_ANSI16
    if r == g == b:
        return _grey_index(r), c.SUBSPACE_GREY
    return _cube_index(r, g, b), c.SUBSPACE_RGB216


def classify(value: str) -> Tuple[int, str]:
    """
    Map a hex color to a terminal palette index and report which part of
    the palette produced it.

    Precedence: exact match in the 16-color table, then the greyscale ramp
    for r == g == b, then the 6x6x6 cube.

    Raises:
        ParseError: if value is not a 3- or 6-digit hex code.
    """
    h = normalize_hex(value)
    r, g, b = (int(h[i : i + 2], 16) for i in (0, 2, 4))
    return _classify_rgb(h, r, g, b)


def map_hex(value: str) -> int:
    """Map a hex color to a terminal palette index (0-255)."""
    return classify(value)[0]


def rgb_to_index(r: int, g: int, b: int) -> int:
    """Map an RGB triple (0-255 per channel) to a terminal palette index."""
    for ch in (r, g, b):
        if not 0 <= ch < c.CHANNEL_RANGE:
            raise ValueError(f"channel out of range: {ch}")
    return _classify_rgb(f"{r:02x}{g:02x}{b:02x}", r, g, b)[0]
