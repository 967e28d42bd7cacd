#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/logic/style/renderer.py

from hexterm.core import config as c
from hexterm.core.mapper import map_hex
from .request import StyleRequest


def compose_styled(request: StyleRequest, text: str, term) -> str:
    """
    Build the styled output: foreground, background, then attributes in
    fixed order, the text as given, and the reset sequence unless
    suppressed.
    """
    parts = []
    if request.foreground is not None:
        parts.append(term.foreground(map_hex(request.foreground)))
    if request.background is not None:
        parts.append(term.background(map_hex(request.background)))
    for name in c.ATTRIBUTE_ORDER:
        if name in request.attributes:
            parts.append(term.attribute(name))

    parts.append(text)

    if not request.suppress_reset:
        parts.append(term.reset())
    return "".join(parts)


def render(request: StyleRequest, text: str, term) -> None:
    print(compose_styled(request, text, term))
