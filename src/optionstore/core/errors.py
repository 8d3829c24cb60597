"""
Exceptions raised when storing options.

Only the mutation boundary raises: lookups report a missing or unusable
option through their ``found`` flag instead.
"""

from typing import Optional

from .types import TypeTag


class OptionError(Exception):
    """Base class for errors raised by :meth:`OptionsStore.set`."""

    def __init__(self, message: str, name: Optional[str] = None):
        """
        Initialize the option error.

        Args:
            message: Error message
            name: Name of the option that was being stored
        """
        super().__init__(message)
        self.message = message
        self.name = name


class UnknownOptionError(OptionError):
    """The option name is not on the whitelist."""

    def __init__(self, name: str):
        super().__init__(f"unknown option: {name!r}", name)


class WrongTypeError(OptionError):
    """The value's type does not match the whitelist declaration."""

    def __init__(self, name: str, expected: TypeTag, actual: TypeTag):
        super().__init__(
            f"wrong type for value of option {name!r}: "
            f"expected {expected.name}, got {actual.name}",
            name,
        )
        self.expected = expected
        self.actual = actual
