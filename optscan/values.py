"""
optscan.values - Typed destinations for option values

A destination is a small caller-owned holder; its ``kind`` decides which
binder is built for it at registration time and ``value`` receives the
parsed result.
"""

from typing import Any, Callable, List, Optional


class Destination:
    """Caller-owned location an option writes into"""

    kind: Optional[str] = None

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value!r})"


class Flag(Destination):
    """Boolean switch, set to True when the option is seen"""

    kind = "flag"

    def __init__(self, default: bool = False):
        super().__init__(default)

    def __bool__(self):
        return bool(self.value)


class Text(Destination):
    """String value"""

    kind = "text"

    def __init__(self, default: str = ""):
        super().__init__(default)

    def __str__(self):
        return self.value


class Number(Destination):
    """Numeric value converted with ``type_`` (int by default)"""

    kind = "number"

    def __init__(self, type_: Callable[[str], Any] = int, default: Any = None):
        super().__init__(default)
        self.type_ = type_

    def convert(self, text: str) -> Any:
        return self.type_(text)


class Many(Destination):
    """
    Repeatable option collecting one element per occurrence

    Args:
        element: Zero-argument factory returning a fresh element destination,
                 e.g. ``Text``, ``Flag`` or ``lambda: Number(float)``
    """

    kind = "list"

    def __init__(self, element: Callable[[], Destination] = Text):
        super().__init__([])
        self.element = element

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    @property
    def values(self) -> List[Any]:
        return self.value
