#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/subcommands/command_registry.py

from . import (
    code,
    test,
)

SUBCOMMANDS = {
    'code': code,
    'test': test,
}
