"""
optscan - In-place command line option parser

Registers short (-x) and long (--name) options against typed destinations,
removes recognized options from the argument list in place and leaves the
positional arguments compacted at its front. Generates -h/--help.
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0"

from .config import ParserConfig
from .errors import (
    CommandLineError,
    InvalidValueError,
    MalformedArgumentError,
    MissingValueError,
    OptionSpecError,
    UnknownOptionError,
)
from .parser import OptionParser
from .values import Flag, Many, Number, Text

__all__ = [
    "OptionParser",
    "ParserConfig",
    "Flag",
    "Text",
    "Number",
    "Many",
    "CommandLineError",
    "MalformedArgumentError",
    "UnknownOptionError",
    "MissingValueError",
    "InvalidValueError",
    "OptionSpecError",
]
