"""Symbol resolution against a namespace tree."""

import builtins
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional, Sequence, Tuple, Union

from noconflict.errors import InvalidSymbolError


class _Absent:
    """Marker for a symbol that resolves to nothing."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

# Shared root every module sees without an import.
GLOBAL_CONTEXT = builtins

Symbol = Union[str, Sequence[str]]


def split_symbol(symbol: Symbol) -> Tuple[str, ...]:
    """Split a symbol into an immutable tuple of path segments."""
    if isinstance(symbol, str):
        return tuple(symbol.split("."))
    if isinstance(symbol, (list, tuple)) and all(isinstance(part, str) for part in symbol):
        return tuple(symbol)
    raise InvalidSymbolError(f"Symbol must be a dotted string or a sequence of strings, got {symbol!r}")


def symbol_name(symbol: Symbol) -> str:
    """Return the dotted name used as the cache key for a symbol."""
    if isinstance(symbol, str):
        return symbol
    return ".".join(split_symbol(symbol))


def get_member(context: Any, name: str) -> Any:
    """Fetch ``name`` from a mapping or an object, or ABSENT."""
    if isinstance(context, Mapping):
        return context.get(name, ABSENT)
    return getattr(context, name, ABSENT)


def set_member(context: Any, name: str, value: Any) -> None:
    """Assign ``name`` on a mapping or an object."""
    if isinstance(context, MutableMapping):
        context[name] = value
    else:
        setattr(context, name, value)


def delete_member(context: Any, name: str) -> None:
    """Remove ``name`` from a mapping or an object; missing members are ignored."""
    if isinstance(context, MutableMapping):
        context.pop(name, None)
    elif hasattr(context, name):
        try:
            delattr(context, name)
        except AttributeError:
            # Inherited members cannot be removed from the instance.
            pass


class SymbolResolver:
    """Resolves dotted symbols to live values."""

    def __init__(self, root: Optional[Any] = None) -> None:
        self.root = GLOBAL_CONTEXT if root is None else root

    def resolve(self, symbol: Symbol, context: Optional[Any] = None) -> Any:
        """Resolve ``symbol`` against ``context`` (default: the root).

        Returns:
            The value found at the end of the path, or ABSENT as soon as a
            segment is missing. An empty segment sequence yields the context.
        """
        current = self.root if context is None else context
        for segment in split_symbol(symbol):
            current = get_member(current, segment)
            if current is ABSENT:
                return ABSENT
        return current


def resolve(symbol: Symbol, context: Optional[Any] = None) -> Any:
    """Resolve ``symbol`` against ``context`` or the global context."""
    return SymbolResolver().resolve(symbol, context)
