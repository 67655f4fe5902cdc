"""
Logging style constants for consistent visual hierarchy.
"""

from __future__ import annotations


class LogStyle:
    """Unified logging style constants for fetch and staging reports."""

    # Symbols
    ARROW = "»"
    SUCCESS = "✓"

    INDENT = "  "

    # ANSI Colors (applied by ColorFormatter to console output only)
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
