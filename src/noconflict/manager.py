"""Conflict manager: claim global names and hand them back later."""

import inspect
import logging
from typing import Any, List, Optional, Protocol, Tuple, Union, runtime_checkable

from pydantic import ValidationError

from noconflict.config import ManagerOptions
from noconflict.errors import ConfigurationError, InvalidSymbolError
from noconflict.namespace import Namespace
from noconflict.resolution import (
    ABSENT,
    DEFAULT_CACHE,
    BindingCache,
    SymbolResolver,
    delete_member,
    set_member,
    split_symbol,
    symbol_name,
)
from noconflict.resolution.resolver import Symbol

logger = logging.getLogger(__name__)

VERSION = "0.1"

# Release every cached symbol at once.
ALL_SYMBOLS = "__all__"

# Global name the default manager is exposed under.
SLOT = "NoConflict"

_UNSET = object()


@runtime_checkable
class SelfRestoring(Protocol):
    """A value that knows how to give back the name it claimed."""

    def no_conflict(self, *args: Any) -> Any:
        ...


def is_self_restoring(value: Any) -> bool:
    """Check whether ``value`` offers a callable ``no_conflict`` of its own.

    Classes never qualify: their ``no_conflict`` belongs to their instances.
    """
    if value is ABSENT or inspect.isclass(value):
        return False
    return isinstance(value, SelfRestoring) and callable(getattr(value, "no_conflict", None))


def _build_options(options: Optional[ManagerOptions], overrides: dict) -> ManagerOptions:
    base = options.model_dump() if options is not None else {}
    try:
        return ManagerOptions(**{**base, **overrides})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid manager options: {exc}") from exc


class ConflictManager:
    """Caches symbol bindings and restores them on request.

    For most use cases the default instance suffices. Use ``context`` to get a
    sibling with custom options, or change ``use_native``/``ensure_defined``
    directly on an instance.

    Usage:
        nc = ConflictManager()
        nc.cache("json", context=namespace)
        namespace["json"] = my_json
        mine = nc.release_one("json")  # namespace["json"] is the old one again
    """

    VERSION = VERSION
    ALL = ALL_SYMBOLS
    SLOT = SLOT
    Namespace = Namespace

    def __init__(
        self,
        options: Optional[ManagerOptions] = None,
        *,
        bindings: Optional[BindingCache] = None,
        root: Optional[Any] = None,
        previous: Any = _UNSET,
        **overrides: bool,
    ) -> None:
        opts = _build_options(options, overrides)
        self.use_native = opts.use_native
        self.ensure_defined = opts.ensure_defined

        self.resolver = SymbolResolver(root)
        if bindings is not None:
            self.bindings = bindings
        else:
            self.bindings = BindingCache() if opts.private_cache else DEFAULT_CACHE

        # Whatever occupied our slot before we were created.
        if previous is _UNSET:
            previous = self.resolver.resolve(self.SLOT)
        self.previous = previous

    @property
    def root(self) -> Any:
        """The context used when an operation is given none."""
        return self.resolver.root

    def context(self, options: Optional[ManagerOptions] = None, **overrides: bool) -> "ConflictManager":
        """Create a sibling manager with its own options.

        The sibling shares the default binding cache unless ``private_cache``
        is set, and restores the same prior slot value as this manager.
        """
        opts = _build_options(options, overrides)
        bindings = BindingCache() if opts.private_cache else DEFAULT_CACHE
        return ConflictManager(opts, bindings=bindings, root=self.root, previous=self.previous)

    def resolve(self, symbol: Symbol, context: Optional[Any] = None) -> Any:
        """Match ``symbol`` (e.g. ``"json"``, ``"os.path.join"``) to the value it references.

        Returns ABSENT when any part of the path is missing.
        """
        return self.resolver.resolve(symbol, context)

    def check(self, symbol: Symbol, context: Optional[Any] = None) -> Any:
        """Cache the value at ``symbol`` if there is one.

        Returns:
            The value found, or False when the symbol is absent.
        """
        instance = self.resolve(symbol, context)
        if instance is ABSENT:
            return False
        self.bindings.record(symbol_name(symbol), instance, self.root if context is None else context)
        return instance

    def cache(self, symbols: Union[Symbol, List[Symbol]], context: Optional[Any] = None) -> "ConflictManager":
        """Cache the current values of one symbol or a list of symbols.

        Absent symbols are skipped.
        """
        if not isinstance(symbols, list):
            symbols = [symbols]
        for symbol in symbols:
            self.check(symbol, context)
        return self

    def reset(self, symbol: Symbol, instance: Any, context: Optional[Any] = None) -> "ConflictManager":
        """Replace the value at ``symbol`` with ``instance``.

        ``instance`` of ABSENT removes the member altogether. Nothing happens
        when the parent of the final segment cannot be resolved.
        """
        parts = split_symbol(symbol)
        parent = self.resolve(parts[:-1], context)

        if parent is ABSENT:
            logger.debug("Cannot reset %s: parent is unresolved", symbol_name(symbol))
            return self

        if instance is ABSENT:
            delete_member(parent, parts[-1])
        else:
            set_member(parent, parts[-1], instance)
        return self

    def clear(self) -> None:
        """Erase the binding cache."""
        self.bindings.clear()

    def release_self(self) -> "ConflictManager":
        """Give the manager's own global slot back to its previous occupant."""
        if self.ensure_defined and self.previous is ABSENT:
            logger.debug("Leaving %s in place: no previous value", self.SLOT)
        else:
            self.reset(self.SLOT, self.previous)
        return self

    def release_one(self, symbol: Symbol, *extra: Any, context: Optional[Any] = None) -> Any:
        """Restore the cached value of ``symbol`` and return its current value.

        When ``use_native`` is set and the current value has its own
        ``no_conflict``, that is called with ``extra`` instead and its result is
        returned. The context defaults to the one the symbol was cached in.
        """
        name = symbol_name(symbol)
        if context is None:
            context = self.bindings.context_of(name)

        instance = self.resolve(symbol, context)

        if self.use_native and is_self_restoring(instance):
            logger.debug("Delegating release of %s to its own no_conflict", name)
            result = instance.no_conflict(*extra)
            self.bindings.forget(name)
            return result

        self.reset(symbol, self.bindings.lookup(name), context)
        self.bindings.forget(name)
        logger.debug("Restored cached binding for %s", name)
        return instance

    def release_many(self, symbols: List[Any], context: Optional[Any] = None) -> Namespace:
        """Release several symbols, collecting current values into a Namespace.

        Each entry is a symbol, or a list ``[symbol, *extra]`` whose extra
        arguments go to the value's own ``no_conflict``.
        """
        ns = self.Namespace()
        for entry in symbols:
            symbol, extra = self._unpack(entry)
            ns.set(symbol_name(symbol), self.release_one(symbol, *extra, context=context))
        return ns

    def release_all(self) -> Namespace:
        """Release every symbol currently in the binding cache."""
        return self.release_many(self.bindings.names())

    def no_conflict(self, *args: Any) -> Any:
        """Normalized release entry point.

        - ``no_conflict()`` restores the manager's own slot and returns the manager.
        - ``no_conflict(symbol)`` or ``no_conflict([symbol, *extra])`` returns a single value.
        - ``no_conflict(ALL)`` or several arguments return a Namespace.
        """
        if not args:
            return self.release_self()

        if len(args) == 1:
            if _is_all(args[0]):
                return self.release_all()
            symbol, extra = self._unpack(args[0])
            return self.release_one(symbol, *extra)

        return self.release_many(list(args))

    def mixin(self, symbols: Union[Symbol, List[Symbol]], context: Optional[Any] = None) -> "Mixin":
        """Return an object providing a ``no_conflict`` for the given symbol(s).

        The symbols are cached immediately.
        """
        self.cache(symbols, context)
        return Mixin(self, symbols, context)

    @staticmethod
    def _unpack(entry: Any) -> Tuple[Symbol, Tuple[Any, ...]]:
        if isinstance(entry, list):
            if not entry:
                raise InvalidSymbolError("Release entry must start with a symbol")
            return entry[0], tuple(entry[1:])
        return entry, ()

    def __repr__(self) -> str:
        return (
            f"ConflictManager(use_native={self.use_native}, "
            f"ensure_defined={self.ensure_defined}, cached={len(self.bindings)})"
        )


def _is_all(arg: Any) -> bool:
    return isinstance(arg, str) and arg == ALL_SYMBOLS


class Mixin:
    """Per-library ``no_conflict`` provider returned by ``ConflictManager.mixin``."""

    def __init__(
        self,
        manager: ConflictManager,
        symbols: Union[Symbol, List[Symbol]],
        context: Optional[Any] = None,
    ) -> None:
        self.manager = manager
        self.symbols = symbols
        self.context = context

    def no_conflict(self) -> Any:
        """Release the symbol, or a mapping of symbol names to values for a list."""
        if isinstance(self.symbols, list):
            return self.manager.release_many(self.symbols, self.context).get()
        return self.manager.release_one(self.symbols, context=self.context)
