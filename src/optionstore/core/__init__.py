"""Whitelist, type tags, coercion rules and the option store itself."""

from .errors import OptionError, UnknownOptionError, WrongTypeError
from .store import OptionsMixin, OptionsStore
from .types import TypeTag, qualified_type_name, type_tag_for, type_tag_of
from .whitelist import Whitelist

__all__ = [
    "OptionError",
    "OptionsMixin",
    "OptionsStore",
    "TypeTag",
    "UnknownOptionError",
    "Whitelist",
    "WrongTypeError",
    "qualified_type_name",
    "type_tag_for",
    "type_tag_of",
]
