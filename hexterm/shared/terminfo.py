#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/shared/terminfo.py

import curses
import sys
from typing import Optional

from hexterm.core import config as c
from hexterm.core.errors import CapabilityLookupError


def _output_fd() -> int:
    try:
        return sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # stdout replaced by an in-memory stream
        return 1


class TerminfoResolver:
    """
    Resolves terminal control sequences through the terminfo database,
    the way `tput` does. The database is loaded on first use.
    """

    def __init__(self, term: Optional[str] = None):
        self.term = term
        self._ready = False

    def _setup(self) -> None:
        if self._ready:
            return
        try:
            curses.setupterm(self.term, _output_fd())
        except curses.error as e:
            name = self.term or "$TERM"
            raise CapabilityLookupError("setupterm", f"cannot load terminfo entry for {name}: {e}")
        self._ready = True

    def _string(self, capability: str) -> bytes:
        self._setup()
        try:
            value = curses.tigetstr(capability)
        except curses.error as e:
            raise CapabilityLookupError(capability, f"terminfo lookup failed for '{capability}': {e}")
        if not value:
            raise CapabilityLookupError(capability, f"terminal does not support '{capability}'")
        return value

    def _decode(self, value: bytes) -> str:
        return value.decode(c.TERMINFO_ENCODING)

    def _indexed(self, capability: str, index: int) -> str:
        template = self._string(capability)
        try:
            return self._decode(curses.tparm(template, index))
        except curses.error as e:
            raise CapabilityLookupError(capability, f"cannot expand '{capability}' for {index}: {e}")

    def colors(self) -> int:
        self._setup()
        count = curses.tigetnum(c.CAP_COLORS)
        if count < 0:
            raise CapabilityLookupError(c.CAP_COLORS, "terminal does not report a color count")
        return count

    def foreground(self, index: int) -> str:
        return self._indexed(c.CAP_FOREGROUND, index)

    def background(self, index: int) -> str:
        return self._indexed(c.CAP_BACKGROUND, index)

    def attribute(self, name: str) -> str:
        capability = c.ATTRIBUTE_CAPABILITIES.get(name)
        if capability is None:
            raise CapabilityLookupError(name, f"unknown attribute '{name}'")
        return self._decode(self._string(capability))

    def reset(self) -> str:
        return self._decode(self._string(c.CAP_RESET))
