"""
Logging style constants for consistent visual hierarchy.

Provides the divider vocabulary used by debugger sections together with the
indentation units and ANSI colors shared by the console formatter.
"""

from __future__ import annotations

from enum import Enum


class LogStyle:
    """Unified logging style constants for consistent visual hierarchy."""

    # Divider width (chars)
    DIVIDER_WIDTH = 40

    # Level 1: Heavy separators
    THICK = "=" * DIVIDER_WIDTH

    # Level 2: Light separators
    THIN = "-" * DIVIDER_WIDTH

    # Level 3: Underlines / footers
    UNDERSCORE = "_" * DIVIDER_WIDTH

    # Level 4: Attention separators
    STAR = "*" * DIVIDER_WIDTH

    # Spacer line
    BLANK = " "

    # Section banners
    BEGIN_BANNER = "Debugger Section beginning"
    END_BANNER = "Debugger Section complete"

    # Indentation
    INDENT = "  "

    # ANSI Colors (applied by ColorFormatter to console output only)
    RESET = "\033[0m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


class DividerType(Enum):
    """
    Named divider styles, each bound to one fixed banner literal.

    Example:
        >>> DividerType.THIN.divider
        '----------------------------------------'
    """

    THICK = LogStyle.THICK
    THIN = LogStyle.THIN
    UNDERSCORE = LogStyle.UNDERSCORE
    STAR = LogStyle.STAR
    BLANK = LogStyle.BLANK

    @property
    def divider(self) -> str:
        """The literal banner string for this style."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "DividerType":
        """
        Resolve a divider style from its case-insensitive member name.

        Raises:
            ValueError: If no style carries that name.
        """
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown divider type '{name}' (expected one of: {choices})") from None
