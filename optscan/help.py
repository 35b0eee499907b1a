"""
optscan.help - Help table rendering

Lays out registered options as a two-column listing: the option names on
the left, padded to a shared width, and the description on the right.
"""

from dataclasses import dataclass, field
from typing import List

from .config import DEFAULT_MAX_LEFT_COLUMN_WIDTH
from .validator import OptionValidator


@dataclass
class HelpEntry:
    """Names and description of one registration"""

    help_text: str
    names: List[str] = field(default_factory=list)

    def left_column(self) -> str:
        return ", ".join(
            f"-{name}" if OptionValidator.is_short(name) else f"--{name}"
            for name in self.names
        )

    def left_column_width(self) -> int:
        # ", " between names, "-x" for short names, "--" plus the name for long ones
        width = (len(self.names) - 1) * 2
        for name in self.names:
            width += 2
            if not OptionValidator.is_short(name):
                width += len(name)
        return width


class HelpFormatter:
    """Formats help entries into output lines"""

    PADDING = 4

    def __init__(self, max_left_column_width: int = DEFAULT_MAX_LEFT_COLUMN_WIDTH):
        self.max_left_column_width = max_left_column_width

    def column_width(self, entries: List[HelpEntry]) -> int:
        widest = max((entry.left_column_width() for entry in entries), default=0)
        return min(widest + self.PADDING, self.max_left_column_width)

    def format_lines(self, entries: List[HelpEntry], banner: str = "") -> List[str]:
        """
        Build the help listing

        Args:
            entries: Help entries in display order
            banner: Optional description printed above the table

        Returns:
            List of lines without trailing newlines
        """
        lines = []
        if banner:
            lines.append(banner)

        column = self.column_width(entries)
        for entry in entries:
            left = entry.left_column()
            # Names wider than a capped column push the description right
            spaces = max(column - len(left) - self.PADDING, 0)
            lines.append("  " + left + " " * spaces + "  " + entry.help_text)

        return lines
