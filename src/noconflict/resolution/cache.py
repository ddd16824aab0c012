"""Binding cache for previously observed symbol values."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .resolver import ABSENT

logger = logging.getLogger(__name__)


@dataclass
class Binding:
    """A value observed at a symbol, and the context it was observed in."""

    name: str
    value: Any
    context: Optional[Any] = None


class BindingCache:
    """Maps symbol names to the value they held when cached."""

    def __init__(self) -> None:
        self.bindings: Dict[str, Binding] = {}

    def record(self, name: str, value: Any, context: Optional[Any] = None) -> None:
        """Store ``value`` under ``name``, replacing any earlier entry."""
        self.bindings[name] = Binding(name=name, value=value, context=context)
        logger.debug("Cached binding for %s", name)

    def lookup(self, name: str) -> Any:
        """Get the cached value for ``name``, or ABSENT."""
        binding = self.bindings.get(name)
        return binding.value if binding is not None else ABSENT

    def context_of(self, name: str) -> Optional[Any]:
        """Get the context a cached value was observed in."""
        binding = self.bindings.get(name)
        return binding.context if binding is not None else None

    def forget(self, name: str) -> None:
        """Drop the entry for ``name`` if there is one."""
        if self.bindings.pop(name, None) is not None:
            logger.debug("Forgot binding for %s", name)

    def clear(self) -> None:
        """Drop every entry."""
        self.bindings.clear()

    def names(self) -> List[str]:
        """Cached symbol names in insertion order."""
        return list(self.bindings)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)


# Shared by every manager that does not ask for a private cache.
DEFAULT_CACHE = BindingCache()
