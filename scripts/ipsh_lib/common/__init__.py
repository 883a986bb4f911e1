"""
ipsh_lib.common - Shared utilities for ipsh tools

This module provides:
- colors: ANSI color codes and logging functions
"""

from .colors import Colors, log, warn, error, info, fatal

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'fatal',
]
