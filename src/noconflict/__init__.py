"""Claim global names and restore their previous occupants later.

The module-level functions are bound to the process-wide default manager.
"""

from .errors import NoConflictError, InvalidSymbolError, ConfigurationError
from .resolution import ABSENT, BindingCache, SymbolResolver
from .namespace import Namespace
from .config import ManagerOptions, NoConflictConfig, load_config
from .manager import (
    ALL_SYMBOLS,
    VERSION,
    ConflictManager,
    Mixin,
    SelfRestoring,
    is_self_restoring,
)
from .exports import default, install, configure, uninstall

__version__ = VERSION
ALL = ALL_SYMBOLS

cache = default.cache
check = default.check
resolve = default.resolve
reset = default.reset
clear = default.clear
context = default.context
mixin = default.mixin
no_conflict = default.no_conflict
release_self = default.release_self
release_one = default.release_one
release_many = default.release_many
release_all = default.release_all

__all__ = [
    "NoConflictError",
    "InvalidSymbolError",
    "ConfigurationError",
    "ABSENT",
    "ALL",
    "BindingCache",
    "SymbolResolver",
    "Namespace",
    "ManagerOptions",
    "NoConflictConfig",
    "load_config",
    "ConflictManager",
    "Mixin",
    "SelfRestoring",
    "is_self_restoring",
    "default",
    "install",
    "configure",
    "uninstall",
    "cache",
    "check",
    "resolve",
    "reset",
    "clear",
    "context",
    "mixin",
    "no_conflict",
    "release_self",
    "release_one",
    "release_many",
    "release_all",
]
