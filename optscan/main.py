#!/usr/bin/env python3
"""
optscan - Command line inspection tool

Parses its own command line with OptionParser and prints what each option
received and which positional arguments were left over.
"""

import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ParserConfig
from .errors import CommandLineError
from .parser import OptionParser
from .values import Flag, Many, Number, Text


def setup_logging(debug: bool = False, console: bool = False):
    """Setup logging: warnings by default, everything with --debug"""
    level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Console logging only if --console is specified
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    else:
        root_logger.addHandler(logging.NullHandler())


def logging_flags(args: List[str]) -> dict:
    """Find --debug and --console ahead of parsing, ignoring anything after '--'"""
    args = args[1:]
    if "--" in args:
        args = args[:args.index("--")]
    return {"debug": "--debug" in args, "console": "--console" in args}


class ToolOptions:
    """Destinations for the tool's own options"""

    def __init__(self):
        self.help = Flag()
        self.version = Flag()
        self.verbose = Flag()
        self.debug = Flag()
        self.console = Flag()
        self.output = Text()
        self.tags = Many(Text)
        self.count = Number(int)
        self.width = Number(int)

    def register(self, parser: OptionParser) -> OptionParser:
        return (
            parser.set_banner(f"optscan {__version__} - show how a command line is parsed")
            ("h,help", self.help, "show help")
            ("version", self.version, "show version and exit")
            ("v,verbose", self.verbose, "also print options that were not given")
            ("o,output", self.output, "text value")
            ("t,tag", self.tags, "text value, repeatable")
            ("n,count", self.count, "integer value")
            ("w,width", self.width, "help column width (default: 40)")
            ("debug", self.debug, "debug logging")
            ("console", self.console, "log to stderr")
        )

    def report(self, verbose: bool = False) -> List[str]:
        """Lines describing the parsed values"""
        values = [
            ("output", self.output.value or None),
            ("tag", self.tags.values or None),
            ("count", self.count.value),
        ]
        return [f"{name}: {value}" for name, value in values if verbose or value is not None]


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    args = list(sys.argv if argv is None else argv)
    options = ToolOptions()
    parser = options.register(OptionParser())

    # Logging is needed while parsing, before --debug/--console are bound
    setup_logging(**logging_flags(args))

    try:
        parser.parse(args)
    except CommandLineError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Try 'optscan --help' for more information.", file=sys.stderr)
        return 2

    if options.width.value is not None:
        try:
            parser.config = ParserConfig(max_left_column_width=options.width.value)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    if options.help:
        parser.show_help()
        return 0

    if options.version:
        print(__version__)
        return 0

    logging.debug("Parsed options: %s", vars(options))
    for line in options.report(verbose=options.verbose.value):
        print(line)
    for position, argument in enumerate(args[1:], start=1):
        print(f"arg[{position}]: {argument}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
