#!/usr/bin/env python3
"""
ipsh.py - One-shot `ip` command interpreter

Parses `ip [-4] [-6] OBJECT COMMAND...` with abbreviated keywords and runs
the result through iproute2.
"""

import sys

from ipsh_lib.cli import main


if __name__ == "__main__":
    sys.exit(main())
