"""
optscan.errors - Exception hierarchy

Parse errors all derive from CommandLineError so callers can catch a single
type, while each failure kind stays distinguishable for diagnostics.
"""


class CommandLineError(Exception):
    """Base class for every error raised while parsing a command line"""

    def __init__(self, token: str, message: str = None):
        self.token = token
        super().__init__(message or f"Bad command line argument '{token}'")


class MalformedArgumentError(CommandLineError):
    """A lone '-' with no option name after it"""

    def __init__(self, token: str):
        super().__init__(token, f"Malformed argument '{token}'")


class UnknownOptionError(CommandLineError):
    """An option name that was never registered"""

    def __init__(self, token: str):
        super().__init__(token, f"Unknown option '{token}'")


class MissingValueError(CommandLineError):
    """An option that takes a value was given none"""

    def __init__(self, token: str):
        super().__init__(token, f"Option '{token}' requires a value")


class InvalidValueError(CommandLineError):
    """An option value could not be converted to the destination type"""

    def __init__(self, token: str, value: str):
        self.value = value
        super().__init__(token, f"Option '{token}' got invalid value '{value}'")


class OptionSpecError(ValueError):
    """Raised at registration time for bad option names or destinations"""
