"""
optscan.validator - Option name validation

Checks names handed to OptionParser.register() before they reach the
registry, so that unreachable names are reported at registration time.
"""

import re
from typing import List, Optional, Tuple


class OptionValidator:
    """Validates option names and name lists"""

    # Validation patterns
    FORBIDDEN_PATTERN = re.compile(r"[\s=]")

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a single option name

        Args:
            name: Option name without dashes (e.g. 'v' or 'verbose')

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name:
            return False, "Option name cannot be empty"

        if name.startswith("-"):
            return False, f"Option name must not start with '-', got: {name}"

        if cls.FORBIDDEN_PATTERN.search(name):
            return False, f"Option name must not contain whitespace or '=', got: {name}"

        return True, None

    @classmethod
    def split_names(cls, names: str) -> List[str]:
        """Split a comma-joined name list such as 'o,output'"""
        return names.split(",")

    @classmethod
    def validate_all_names(cls, names: List[str]) -> list:
        """
        Validate every name of one registration

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []
        for name in names:
            valid, error = cls.validate_name(name)
            if not valid:
                errors.append(error)
        return errors

    @staticmethod
    def is_short(name: str) -> bool:
        return len(name) == 1
