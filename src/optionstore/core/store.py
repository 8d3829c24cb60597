"""
Typesafe option storage.

An :class:`OptionsStore` holds named values whose types are fixed by a
:class:`Whitelist`. Values go in through :meth:`OptionsStore.set`, which
rejects unknown names and mistyped values, and come out either untouched
through :meth:`OptionsStore.get` or coerced through the typed getters.

Thread Safety:
    By default the store does no locking; populate it before starting any
    worker threads and treat it as read-only afterwards. Pass
    ``thread_safe=True`` (or set ``OPTIONSTORE_THREAD_SAFE``) to serialise
    every set and lookup behind a lock.
"""

from __future__ import annotations

import threading
from contextlib import nullcontext
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, TypeVar, Union

from . import coercion
from .errors import UnknownOptionError, WrongTypeError
from .types import TypeDecl, TypeTag, default_type_name, type_tag_of
from .utils.config import get_settings
from .utils.logger import log_debug, log_warning
from .whitelist import Whitelist

T = TypeVar("T")

WhitelistLike = Union[Whitelist, Mapping[str, TypeDecl], None]


class OptionsStore:
    """A bag of named values, each checked against a whitelisted type."""

    def __init__(self, whitelist: WhitelistLike = None, thread_safe: Optional[bool] = None):
        """
        Create an empty store bound to ``whitelist``.

        Args:
            whitelist: Allowed option names and their types. A plain mapping
                is copied into a new :class:`Whitelist`; ``None`` yields a
                store that accepts no options.
            thread_safe: Guard every operation with a lock. ``None`` uses
                the ``OPTIONSTORE_THREAD_SAFE`` setting.
        """
        if not isinstance(whitelist, Whitelist):
            whitelist = Whitelist(whitelist)
        if thread_safe is None:
            thread_safe = get_settings().thread_safe

        self._whitelist = whitelist
        self._options: Dict[str, Any] = {}
        self._lock = threading.RLock() if thread_safe else nullcontext()
        self.thread_safe = thread_safe

    @property
    def whitelist(self) -> Whitelist:
        return self._whitelist

    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only snapshot of the stored values."""
        with self._lock:
            return MappingProxyType(dict(self._options))

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._options

    def __repr__(self) -> str:
        return f"OptionsStore(whitelist={self._whitelist!r}, stored={sorted(self._options)!r})"

    def set(self, name: str, value: Any) -> None:
        """
        Store ``value`` under ``name``, replacing any previous value.

        Raises:
            UnknownOptionError: If ``name`` is not on the whitelist
            WrongTypeError: If ``value`` is not of the whitelisted type
        """
        required = self._whitelist.get(name)
        if required is None:
            log_warning("store", f"Rejected unknown option {name!r}")
            raise UnknownOptionError(name)

        try:
            actual = type_tag_of(value)
        except TypeError as exc:
            actual = TypeTag(default_type_name(type(value)))
            log_warning("store", f"Rejected value for option {name!r}", context=str(exc))
            raise WrongTypeError(name, required, actual) from exc
        if actual != required:
            log_warning(
                "store",
                f"Rejected value for option {name!r}",
                context=f"expected {required.name}, got {actual.name}",
            )
            raise WrongTypeError(name, required, actual)

        with self._lock:
            self._options[name] = value
        log_debug("store", f"Stored option {name!r}", context=required.name)

    def get(self, name: str) -> Tuple[Any, bool]:
        """
        Return ``(value, True)`` for a stored option, else ``(None, False)``.

        The value is guaranteed to be of the whitelisted type, so callers
        can use it without further checks.
        """
        if name not in self._whitelist:
            return None, False
        with self._lock:
            if name not in self._options:
                return None, False
            return self._options[name], True

    def _coerced(
        self,
        name: str,
        convert: Callable[[TypeTag, Any], Tuple[T, bool]],
        missing: T,
    ) -> Tuple[T, bool]:
        required = self._whitelist.get(name)
        if required is None:
            return missing, False
        with self._lock:
            if name not in self._options:
                return missing, False
            value = self._options[name]
        return convert(required, value)

    def get_as_bool(self, name: str) -> Tuple[bool, bool]:
        """
        Return the option as a bool.

        ints are true when non-zero; strings are false only for ``"0"`` and
        ``"false"`` (any case). Unknown, unset or non-coercible options give
        ``(False, False)``.
        """
        return self._coerced(name, coercion.as_bool, False)

    def get_as_int(self, name: str) -> Tuple[int, bool]:
        """Return the option as an int; strings must hold a base-10 integer."""
        return self._coerced(name, coercion.as_int, 0)

    def get_as_string(self, name: str) -> Tuple[str, bool]:
        """Return the option as a str; bools render as ``"true"``/``"false"``."""
        return self._coerced(name, coercion.as_string, "")


class OptionsMixin:
    """
    Gives a host class its own option store.

    Hosts either call :meth:`init_options` in their constructor or declare
    an ``option_whitelist`` class attribute; the store is created lazily on
    first use in the latter case.
    """

    option_whitelist: ClassVar[WhitelistLike] = None

    def init_options(self, whitelist: WhitelistLike = None, thread_safe: Optional[bool] = None) -> None:
        if whitelist is None:
            whitelist = type(self).option_whitelist
        self._options_store = OptionsStore(whitelist, thread_safe=thread_safe)

    @property
    def options_store(self) -> OptionsStore:
        store = self.__dict__.get("_options_store")
        if store is None:
            self.init_options()
            store = self._options_store
        return store

    def set_option(self, name: str, value: Any) -> None:
        self.options_store.set(name, value)

    def option(self, name: str) -> Tuple[Any, bool]:
        return self.options_store.get(name)

    def option_as_bool(self, name: str) -> Tuple[bool, bool]:
        return self.options_store.get_as_bool(name)

    def option_as_int(self, name: str) -> Tuple[int, bool]:
        return self.options_store.get_as_int(name)

    def option_as_string(self, name: str) -> Tuple[str, bool]:
        return self.options_store.get_as_string(name)
