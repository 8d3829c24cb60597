"""
optionstore: a typesafe bag of named options.

Build a :class:`Whitelist` naming each option and the type it must hold,
hand it to an :class:`OptionsStore`, then ``set`` and ``get`` values::

    store = OptionsStore({"verbose": bool, "retries": int})
    store.set("verbose", True)
    store.get_as_int("verbose")   # (1, True)
"""

from optionstore.core import (
    OptionError,
    OptionsMixin,
    OptionsStore,
    TypeTag,
    UnknownOptionError,
    Whitelist,
    WrongTypeError,
    qualified_type_name,
    type_tag_for,
    type_tag_of,
)

__version__ = "0.1.0"

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
