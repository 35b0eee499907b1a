"""
Option parser module for optscan

Keeps the option registry and help metadata, and drives a ScanCursor over
the argument list: options are dispatched to their binders and removed,
positional arguments are compacted to the front of the list.
"""

import logging
import sys
from typing import Dict, List, Optional

from .binders import Binder, HelpBinder, make_binder
from .config import ParserConfig
from .cursor import ScanCursor
from .errors import MalformedArgumentError, OptionSpecError, UnknownOptionError
from .help import HelpEntry, HelpFormatter
from .validator import OptionValidator
from .values import Destination


class OptionParser:
    """Command line option registry and parser"""

    HELP_NAMES = ("h", "help")

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.validator = OptionValidator()
        self._options: Dict[str, Binder] = {}
        self._helps: List[HelpEntry] = []
        self._banner = ""
        self._shown_help = False

    def register(self, names: str, destination: Destination, help_text: str = ""):
        """
        Register one option under one or more comma-separated names

        All names share a single binder writing into ``destination``.
        Registering a name again replaces its previous binder.

        Args:
            names: Comma-joined names, e.g. 'o,output'
            destination: Typed destination receiving the value
            help_text: One-line description for the help listing

        Returns:
            The parser, for chaining
        """
        split = self.validator.split_names(names)
        errors = self.validator.validate_all_names(split)
        if errors:
            raise OptionSpecError("; ".join(errors))

        binder = make_binder(destination)
        help_entry = HelpEntry(help_text)
        for name in split:
            if name in self._options:
                logging.debug("Option %s registered again, replacing previous binder", name)
            help_entry.names.append(name)
            self._options[name] = binder

        self._helps.append(help_entry)
        logging.debug("Registered option %s (%s)", help_entry.left_column(), destination.kind)
        return self

    __call__ = register

    def set_banner(self, banner: str):
        """Set the line printed above the help table"""
        self._banner = banner
        return self

    @property
    def banner(self) -> str:
        return self._banner

    def is_registered(self, name: str) -> bool:
        return name in self._options

    def _add_default_help_option(self):
        """Register -h/--help for whichever of the two names is still free"""
        missing = [name for name in self.HELP_NAMES if name not in self._options]
        if not missing:
            return

        help_binder = HelpBinder(self)
        help_entry = HelpEntry(self.config.help_text)
        for name in missing:
            help_entry.names.append(name)
            self._options[name] = help_binder

        self._helps.insert(0, help_entry)
        logging.debug("Added default help option: %s", help_entry.left_column())

    def _lookup(self, name: str, token: str) -> Binder:
        binder = self._options.get(name)
        if binder is None:
            raise UnknownOptionError(token)
        return binder

    def parse(self, args: Optional[List[str]] = None) -> List[str]:
        """
        Parse the command line in place

        Element 0 is the program name and is left alone. Recognized options
        are removed; positional arguments stay in order at the front.
        Also adds -h/--help if those names are not registered yet.

        Args:
            args: Mutable argument list (defaults to sys.argv)

        Returns:
            The same list, truncated to the positional arguments
        """
        if args is None:
            args = sys.argv

        self._add_default_help_option()
        cursor = ScanCursor(args)

        while not cursor.is_exhausted():
            token = cursor.current_argument()
            if not token.startswith("-"):
                cursor.save_argument()
                continue

            if len(token) == 1:
                raise MalformedArgumentError(token)

            cursor.option_token = token
            if cursor.char_at(1) == "-":
                if len(token) == 2:
                    # "--" ends option processing
                    cursor.pop_argument()
                    while not cursor.is_exhausted():
                        cursor.save_argument()
                    break

                name = token[2:]
                cursor.pop_argument()
                binder = self._lookup(name, token)
                logging.debug("Parsing long option --%s", name)
                binder.parse(cursor)
            else:
                # Short option, possibly several bundled in one token
                cursor.advance(1)
                while True:
                    name = cursor.char_at()
                    binder = self._lookup(name, token)
                    cursor.advance(1)
                    logging.debug("Parsing short option -%s", name)
                    binder.parse(cursor)
                    if cursor.offset == 0:
                        break

        cursor.truncate()
        logging.debug("Positional arguments: %s", args[1:])
        return args

    def format_help(self) -> List[str]:
        """Help listing as a list of lines"""
        formatter = HelpFormatter(self.config.max_left_column_width)
        return formatter.format_lines(self._helps, self._banner)

    def show_help(self):
        """Print the help listing (-h/--help)"""
        self._shown_help = True
        for line in self.format_help():
            print(line, file=self.config.output)

    def has_shown_help(self) -> bool:
        """Has the help been displayed yet?"""
        return self._shown_help

    @property
    def shown_help(self) -> bool:
        return self._shown_help
