"""
optscan.binders - Value binders

A binder consumes whatever it needs from the scan cursor and writes the
converted value into its destination. The set of variants is closed and
chosen from the destination kind by make_binder().
"""

import logging

from .cursor import ScanCursor
from .errors import InvalidValueError, MissingValueError, OptionSpecError
from .values import Destination


class Binder:
    """Base class for all binders"""

    def parse(self, cursor: ScanCursor):
        raise NotImplementedError


class FlagBinder(Binder):
    def __init__(self, destination: Destination):
        self.destination = destination

    def parse(self, cursor: ScanCursor):
        self.destination.value = True


class TextBinder(Binder):
    """Takes the rest of the current argument, or the next whole argument"""

    def __init__(self, destination: Destination):
        self.destination = destination

    def _consume(self, cursor: ScanCursor) -> str:
        if cursor.is_exhausted():
            raise MissingValueError(cursor.option_token)
        text = cursor.remainder()
        cursor.pop_argument()
        return text

    def parse(self, cursor: ScanCursor):
        self.destination.value = self._consume(cursor)


class NumberBinder(TextBinder):
    def parse(self, cursor: ScanCursor):
        text = self._consume(cursor)
        try:
            self.destination.value = self.destination.convert(text)
        except (TypeError, ValueError) as e:
            raise InvalidValueError(cursor.option_token, text) from e


class AccumulatorBinder(Binder):
    """Appends one element per occurrence, parsed by the element's own binder"""

    def __init__(self, destination: Destination):
        self.destination = destination
        # Rejects unsupported element kinds when the option is registered
        make_binder(destination.element())

    def parse(self, cursor: ScanCursor):
        element = self.destination.element()
        make_binder(element).parse(cursor)
        self.destination.value.append(element.value)
        logging.debug("Appended %r (%d values)", element.value, len(self.destination.value))


class HelpBinder(Binder):
    """Renders the parser help when triggered"""

    def __init__(self, parser):
        self.parser = parser

    def parse(self, cursor: ScanCursor):
        self.parser.show_help()


BINDERS = {
    "flag": FlagBinder,
    "text": TextBinder,
    "number": NumberBinder,
    "list": AccumulatorBinder,
}


def make_binder(destination: Destination) -> Binder:
    """Build the binder matching a destination's declared kind"""
    kind = getattr(destination, "kind", None)
    binder_class = BINDERS.get(kind)
    if binder_class is None:
        raise OptionSpecError(f"Unsupported destination {destination!r}")
    return binder_class(destination)
