"""Type tags and runtime type identity for stored options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

# Go-style spellings accepted in whitelist declarations.
_ALIASES = {
    "string": "str",
}


@dataclass(frozen=True)
class TypeTag:
    """
    Identifies the type an option must hold.

    Tags compare by ``name``. The built-in tags ``BOOL``, ``INT`` and
    ``STRING`` drive coercion in the typed getters; any other name is an
    opaque tag for a caller-defined type.
    """

    name: str

    BOOL: ClassVar["TypeTag"]
    INT: ClassVar["TypeTag"]
    STRING: ClassVar["TypeTag"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("type tag name must be a non-empty string")

    @classmethod
    def opaque(cls, identifier: str) -> "TypeTag":
        """Tag for a caller-defined type, e.g. ``"geometry.Point"``."""
        return cls(identifier)

    @property
    def is_builtin(self) -> bool:
        return self.name in _BUILTIN_NAMES

    def __str__(self) -> str:
        return self.name


TypeTag.BOOL = TypeTag("bool")
TypeTag.INT = TypeTag("int")
TypeTag.STRING = TypeTag("str")

_BUILTIN_BASES = {"bool": bool, "int": int, "str": str}
_BUILTIN_NAMES = frozenset(_BUILTIN_BASES)

TypeDecl = Union[TypeTag, str, type]


def qualified_type_name(cls: type) -> str:
    """
    Return the stable identifier for ``cls``.

    A class may pin its identifier with an ``__option_type__`` attribute
    declared on the class itself (subclasses do not inherit it). Pinning
    ``bool``, ``int`` or ``str`` is only allowed on a subclass of that
    builtin. Otherwise the identifier is ``<module>.<QualName>``, with the
    module omitted for builtins so that ``bool``, ``int`` and ``str`` map
    onto the built-in tags.

    Raises:
        TypeError: If ``__option_type__`` is empty, not a string, or claims
            a built-in type the class does not derive from
    """
    explicit = vars(cls).get("__option_type__")
    if explicit is not None:
        if not isinstance(explicit, str) or not explicit:
            raise TypeError(
                f"{cls.__qualname__}.__option_type__ must be a non-empty string"
            )
        pinned = _ALIASES.get(explicit, explicit)
        base = _BUILTIN_BASES.get(pinned)
        if base is not None and not issubclass(cls, base):
            raise TypeError(
                f"{cls.__qualname__} cannot claim the built-in type {pinned!r} "
                f"without subclassing {base.__name__}"
            )
        return pinned
    return default_type_name(cls)


def default_type_name(cls: type) -> str:
    """``<module>.<QualName>`` for ``cls``, ignoring any ``__option_type__``."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def type_tag_for(declared: TypeDecl) -> TypeTag:
    """Normalise a whitelist declaration (tag, identifier or class) into a tag."""
    if isinstance(declared, TypeTag):
        return declared
    if isinstance(declared, str):
        return TypeTag(_ALIASES.get(declared, declared))
    if isinstance(declared, type):
        return TypeTag(qualified_type_name(declared))
    raise TypeError(
        f"cannot use {type(declared).__name__} as a type declaration; "
        "expected TypeTag, str or a class"
    )


def type_tag_of(value: Any) -> TypeTag:
    """Runtime tag of ``value``, taken from its exact class."""
    return TypeTag(qualified_type_name(type(value)))
