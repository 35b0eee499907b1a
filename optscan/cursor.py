"""
optscan.cursor - Scan cursor over a mutable argument list

Tracks the argument being read, the character offset inside it, and the
slot where the next positional argument is written back. Positional
arguments are shifted left over consumed options as the scan goes, so the
list is compacted in place without a second buffer.
"""

from typing import List


class ScanCursor:
    """Reading and compaction state for one parse pass"""

    def __init__(self, args: List[str], start: int = 1):
        self.args = args
        # argument currently looked at
        self.index = start
        # position inside the current argument
        self.offset = 0
        # slot receiving the next saved argument, never past index
        self.save_index = start
        # full token of the option being dispatched, for diagnostics
        self.option_token = ""

    def is_exhausted(self) -> bool:
        return self.index >= len(self.args)

    def current_argument(self) -> str:
        return self.args[self.index]

    def char_at(self, delta: int = 0) -> str:
        return self.args[self.index][self.offset + delta]

    def remainder(self) -> str:
        """Rest of the current argument from the offset onward"""
        return self.args[self.index][self.offset:]

    def advance(self, by: int = 1):
        """Move within the current argument, rolling over to the next one at its end"""
        self.offset += by
        if self.offset >= len(self.args[self.index]):
            self.pop_argument()

    def save_argument(self):
        """Keep the current argument as positional and move past it"""
        if self.save_index < self.index:
            self.args[self.save_index] = self.args[self.index]
        self.save_index += 1
        self.pop_argument()

    def pop_argument(self):
        """Drop the current argument and move to the next one"""
        self.index += 1
        self.offset = 0

    def truncate(self):
        """Cut the list down to the saved arguments"""
        del self.args[self.save_index:]
