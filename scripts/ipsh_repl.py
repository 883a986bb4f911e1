#!/usr/bin/env python3
"""
ipsh_repl.py - Interactive shell for the ip command language

Every line is an `ip` invocation without the leading `ip`, with tab
completion of abbreviated keywords.
"""

import sys

from ipsh_lib.repl import run_repl


if __name__ == "__main__":
    sys.exit(run_repl())
