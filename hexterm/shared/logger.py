#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexterm/shared/logger.py

import sys
import argparse

from hexterm.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    # raw color arguments may carry newlines or control characters
    text = " ".join(str(message).split())
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{text}{c.RESET}", file=stream)


class HextermArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Reports a usage error through the color-coded logger, tagged with
        the (sub)command name, and exits with the usage error code.
        """
        log('error', f"{self.prog}: {message}")
        sys.exit(c.EXIT_USAGE)
