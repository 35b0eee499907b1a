"""
optscan.config - Parser configuration

Holds the tunables that used to be process-wide: the help column width,
the auto-generated help description and the output sink for help text.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO

DEFAULT_MAX_LEFT_COLUMN_WIDTH = 40
DEFAULT_HELP_TEXT = "show help"


@dataclass
class ParserConfig:
    """Settings read by OptionParser when parsing and rendering help"""

    max_left_column_width: int = DEFAULT_MAX_LEFT_COLUMN_WIDTH
    help_text: str = DEFAULT_HELP_TEXT
    output: TextIO = field(default_factory=lambda: sys.stdout)

    def __post_init__(self):
        if self.max_left_column_width < 0:
            raise ValueError(
                f"max_left_column_width must be >= 0, got: {self.max_left_column_width}"
            )
