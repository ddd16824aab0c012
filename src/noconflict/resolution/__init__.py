"""Resolution module initialization."""

from .resolver import (
    ABSENT,
    GLOBAL_CONTEXT,
    SymbolResolver,
    resolve,
    split_symbol,
    symbol_name,
    get_member,
    set_member,
    delete_member,
)
from .cache import Binding, BindingCache, DEFAULT_CACHE

__all__ = [
    "ABSENT",
    "GLOBAL_CONTEXT",
    "SymbolResolver",
    "resolve",
    "split_symbol",
    "symbol_name",
    "get_member",
    "set_member",
    "delete_member",
    "Binding",
    "BindingCache",
    "DEFAULT_CACHE",
]
