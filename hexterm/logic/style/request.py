#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/logic/style/request.py

import argparse
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class StyleRequest:
    """Every option the styled printer understands."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    attributes: FrozenSet[str] = field(default_factory=frozenset)
    suppress_reset: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "StyleRequest":
        # unknown -a values were resolved to None by the validator
        attrs = frozenset(a for a in (args.attributes or []) if a is not None)
        return cls(
            foreground=args.foreground,
            background=args.background,
            attributes=attrs,
            suppress_reset=args.no_reset,
        )
