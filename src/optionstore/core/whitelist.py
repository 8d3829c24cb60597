"""Whitelist of recognised option names and their required types."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from .types import TypeDecl, TypeTag, type_tag_for


class Whitelist(Mapping):
    """
    Read-only mapping from option name to :class:`TypeTag`.

    The entries are copied at construction, so later changes to the mapping
    the caller passed in never reach an existing whitelist (or the stores
    built from it).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, TypeDecl]] = None):
        normalised: Dict[str, TypeTag] = {}
        for name, declared in (entries or {}).items():
            if not isinstance(name, str):
                raise TypeError(
                    f"option names must be strings, got {type(name).__name__}"
                )
            normalised[name] = type_tag_for(declared)
        object.__setattr__(self, "_entries", MappingProxyType(normalised))

    @classmethod
    def from_names(cls, **entries: TypeDecl) -> "Whitelist":
        return cls(entries)

    def __getitem__(self, name: str) -> TypeTag:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __setattr__(self, name, value):
        raise TypeError("Whitelist is immutable")

    def __delattr__(self, name):
        raise TypeError("Whitelist is immutable")

    def __repr__(self) -> str:
        body = ", ".join(f"{name!r}: {tag.name!r}" for name, tag in self._entries.items())
        return f"Whitelist({{{body}}})"
