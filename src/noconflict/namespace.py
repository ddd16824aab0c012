"""Insertion-ordered namespace used to bundle released values."""

import inspect
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Union

from noconflict.resolution import ABSENT


def _accepts_this(handler: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(handler).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.kind is inspect.Parameter.VAR_KEYWORD
        or (p.name == "this" and p.kind is inspect.Parameter.KEYWORD_ONLY)
        for p in parameters
    )


class Namespace:
    """An insert-order preserving mapping of names to values.

    Use ``set`` and ``get`` rather than touching the internals. Re-setting an
    existing name updates its value without moving it.
    """

    def __init__(self) -> None:
        self._keys: List[str] = []
        self._data: Dict[str, Any] = {}

    def set(self, name: str, value: Any) -> "Namespace":
        """Set ``name`` to ``value``, remembering the order new names arrive in."""
        if name not in self._data:
            self._keys.append(name)
        self._data[name] = value
        return self

    def get(self, name: Optional[str] = None) -> Any:
        """Fetch the value for ``name``; without a name, the whole mapping."""
        if name is not None:
            return self._data.get(name, ABSENT)
        return dict(self._data)

    def apply(
        self,
        names: Union[Sequence[str], Callable[..., Any], None] = None,
        handler: Optional[Callable[..., Any]] = None,
        bound: Optional[Any] = None,
    ) -> None:
        """Call ``handler`` with the namespace values as positional arguments.

        Values are passed in insertion order, or in the order of ``names`` when
        given. ``names`` may be omitted by passing the handler first, in which
        case the second argument is taken as ``bound``.

        A handler declaring a keyword-only ``this`` parameter (or ``**kwargs``)
        receives ``bound`` through it, defaulting to the namespace itself. A
        positional ``this`` is treated like any other value slot, e.g.::

            ns.apply(lambda jq, *, this: this.get("jQuery"))

        Non-callable handlers are ignored.
        """
        if callable(names):
            names, handler, bound = None, names, handler

        if not callable(handler):
            return

        order = list(names) if names is not None else self._keys
        values = [self.get(name) for name in order]

        if _accepts_this(handler):
            handler(*values, this=self if bound is None else bound)
        else:
            handler(*values)

    def names(self) -> List[str]:
        """Names in insertion order."""
        return list(self._keys)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        items = ", ".join(f"{name}={self._data[name]!r}" for name in self._keys)
        return f"Namespace({items})"
