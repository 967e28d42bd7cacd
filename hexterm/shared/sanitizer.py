#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/shared/sanitizer.py

import argparse
import re
from typing import Optional

from hexterm.core import config as c
from hexterm.core.errors import ParseError
from hexterm.core.mapper import normalize_hex


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex color arguments. Returns the normalized 6-digit form."""
    try:
        return normalize_hex(v)
    except ParseError as e:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex color '{raw}': {e.reason}")


def handle_attribute(v: str) -> Optional[str]:
    """
    Validator for text attributes. Unknown names resolve to None and are
    dropped by the caller without any diagnostic.
    """
    return c.ATTRIBUTE_ALIASES.get(str(v).strip().lower())


def handle_term(v: str) -> str:
    """Validator for terminfo entry names."""
    cleaned = str(v).strip()
    if not cleaned or not re.fullmatch(r"[A-Za-z0-9._+-]+", cleaned):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid terminal type: '{raw}'")
    return cleaned


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "attribute": handle_attribute,
    "term": handle_term,
}
