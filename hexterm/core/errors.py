#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/core/errors.py

from . import config as c


class ParseError(ValueError):
    """Raised when a color string is not a 3- or 6-digit hex code."""

    sentinel = c.UNMAPPED

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid hex color '{value}': {reason}")


class InvalidLengthError(ParseError):
    pass


class InvalidCharacterError(ParseError):
    pass


class CapabilityLookupError(RuntimeError):
    """The terminal capability database could not resolve a sequence."""

    def __init__(self, capability: str, message: str):
        self.capability = capability
        super().__init__(message)
