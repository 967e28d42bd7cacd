#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/core/config.py

# ==========================================
# Hex Input
# ==========================================

HEX_DIGITS = "0123456789abcdef"
SHORT_HEX_LEN = 3                  # 'XYZ' expands to 'X0Y0Z0'
FULL_HEX_LEN = 6
SHORT_HEX_FILL = "0"               # Appended to each digit of a 3-digit code

# Best-effort value reported alongside a parse failure, never a valid index
UNMAPPED = 256

# ==========================================
# Terminal Palette Layout (xterm 256)
# ==========================================

PALETTE_SIZE = 256

# Greyscale ramp: index = r * GREY_STEPS // CHANNEL_RANGE + GREY_BASE
GREY_STEPS = 25
GREY_BASE = 231

# RGB cube: index = CUBE_BASE + 36 * r' + 6 * g' + b'
CUBE_LEVELS = 6
CUBE_BASE = 16
CHANNEL_RANGE = 256

SUBSPACE_ANSI16 = "ansi16"
SUBSPACE_GREY = "grey"
SUBSPACE_RGB216 = "rgb216"

# Exact matches for the 16 standard colors. Some indices accept both the
# 'f0' and 'ff' spelling of a saturated channel.
PRIMARY_COLORS = {
    "000000": 0,
    "d00000": 1,
    "00d000": 2,
    "d0d000": 3,
    "0000f0": 4, "0000ff": 4,
    "d000d0": 5,
    "00d0d0": 6,
    "e0e0e0": 7,
    "808080": 8,
    "f00000": 9, "ff0000": 9,
    "00f000": 10, "00ff00": 10,
    "f0f000": 11, "ffff00": 11,
    "5050f0": 12, "5050ff": 12,
    "f000f0": 13, "ff00ff": 13,
    "00f0f0": 14, "00ffff": 14,
    "f0f0f0": 15, "ffffff": 15,
}

# ==========================================
# Text Attributes
# ==========================================

# Emission order of attribute sequences
ATTRIBUTE_ORDER = (
    "bold",
    "underline",
    "reverse",
    "blink",
    "invisible",
    "standout",
)

# Accepted CLI spellings -> canonical attribute name
ATTRIBUTE_ALIASES = {
    "bold": "bold",
    "ul": "underline",
    "underline": "underline",
    "rev": "reverse",
    "reverse": "reverse",
    "blink": "blink",
    "invis": "invisible",
    "invisible": "invisible",
    "so": "standout",
    "standout": "standout",
}

# Canonical attribute name -> terminfo capability
ATTRIBUTE_CAPABILITIES = {
    "bold": "bold",
    "underline": "smul",
    "reverse": "rev",
    "blink": "blink",
    "invisible": "invis",
    "standout": "smso",
}

# ==========================================
# Terminfo Capabilities
# ==========================================

CAP_COLORS = "colors"
CAP_FOREGROUND = "setaf"
CAP_BACKGROUND = "setab"
CAP_RESET = "sgr0"
TERMINFO_ENCODING = "latin-1"

# Width of the index field in the palette swatch and code output
INDEX_FIELD_WIDTH = 4

# ==========================================
# CLI Exit Codes
# ==========================================

EXIT_OK = 0
EXIT_CAPABILITY = 1
EXIT_USAGE = 2

# ANSI Terminal Styling for diagnostics
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
