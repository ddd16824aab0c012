"""Process-wide default manager and its global exposure."""

import logging
from typing import Any, Optional

from .config import NoConflictConfig
from .manager import ConflictManager
from .resolution import DEFAULT_CACHE, GLOBAL_CONTEXT, BindingCache, set_member

logger = logging.getLogger(__name__)

# Created on import, before anything is exposed, so it remembers what held
# the global slot beforehand.
default = ConflictManager()


def install(manager: Optional[ConflictManager] = None, root: Optional[Any] = None) -> ConflictManager:
    """Expose ``manager`` (default: the shared one) under its global slot name."""
    manager = manager or default
    target = GLOBAL_CONTEXT if root is None else root
    set_member(target, manager.SLOT, manager)
    logger.debug("Installed %r as %s", manager, manager.SLOT)
    return manager


def configure(
    config: NoConflictConfig,
    manager: Optional[ConflictManager] = None,
    context: Optional[Any] = None,
) -> ConflictManager:
    """Apply loaded configuration to a manager and cache its preload symbols.

    With ``private_cache`` set the manager is detached from the shared cache
    and starts over with an empty one.
    """
    manager = manager or default
    manager.use_native = config.options.use_native
    manager.ensure_defined = config.options.ensure_defined
    if config.options.private_cache and manager.bindings is DEFAULT_CACHE:
        manager.bindings = BindingCache()
    if config.preload:
        manager.cache(list(config.preload), context)
    return manager


def uninstall() -> ConflictManager:
    """Give the global slot back to whatever held it before import."""
    return default.release_self()
