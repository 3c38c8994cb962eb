"""Owner-keyed resolver registry with weak ownership semantics."""

from __future__ import annotations

import threading
import weakref
from datetime import date
from typing import Callable, Dict, Generic, Iterator, Literal, Tuple, TypeVar

V = TypeVar("V")

HolidayResult = str | Literal[False]
Fallback = Callable[[], HolidayResult]
Resolver = Callable[[str, date, Fallback], HolidayResult]


class IdentityWeakMap(Generic[V]):
    """Maps objects to values by identity without keeping the objects alive.

    ``weakref.WeakKeyDictionary`` compares keys with ``__eq__``; equal dates
    would share a slot there. Entries here are keyed on ``id()`` and dropped
    by the weakref callback once the owner is collected.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Tuple[weakref.ref, V]] = {}
        self._lock = threading.RLock()

    def set(self, owner: object, value: V) -> None:
        key = id(owner)
        with self._lock:
            self._entries[key] = (weakref.ref(owner, self._make_reaper(key)), value)

    def get(self, owner: object, default: V | None = None) -> V | None:
        with self._lock:
            entry = self._entries.get(id(owner))
            if entry is None or entry[0]() is not owner:
                return default
            return entry[1]

    def pop(self, owner: object) -> V | None:
        with self._lock:
            entry = self._entries.get(id(owner))
            if entry is None or entry[0]() is not owner:
                return None
            del self._entries[id(owner)]
            return entry[1]

    def setdefault(self, owner: object, factory: Callable[[], V]) -> V:
        with self._lock:
            current = self.get(owner)
            if current is None:
                current = factory()
                self.set(owner, current)
            return current

    def __contains__(self, owner: object) -> bool:
        return self.get(owner) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for ref, _ in self._entries.values() if ref() is not None)

    def owners(self) -> Iterator[object]:
        with self._lock:
            alive = [ref() for ref, _ in self._entries.values()]
        return (owner for owner in alive if owner is not None)

    def _make_reaper(self, key: int) -> Callable[[weakref.ref], None]:
        def _reap(ref: weakref.ref) -> None:
            with self._lock:
                entry = self._entries.get(key)
                if entry is not None and entry[0] is ref:
                    del self._entries[key]

        return _reap


def is_weak_referenceable(owner: object) -> bool:
    try:
        weakref.ref(owner)
    except TypeError:
        return False
    return True


class StrategyRegistry:
    """Stores at most one custom resolver per owner."""

    def __init__(self) -> None:
        self._resolvers: IdentityWeakMap[Resolver] = IdentityWeakMap()

    def set_resolver(self, owner: object, resolver: Resolver | None) -> object:
        if not is_weak_referenceable(owner):
            raise TypeError(
                f"{type(owner).__name__} instances cannot own a resolver (not weak-referenceable)"
            )
        if resolver is None:
            self._resolvers.pop(owner)
        else:
            self._resolvers.set(owner, resolver)
        return owner

    def get_resolver(self, owner: object) -> Resolver | None:
        if owner is None or not is_weak_referenceable(owner):
            return None
        return self._resolvers.get(owner)

    def lookup(self, owner: object, default_owner: object) -> Resolver | None:
        """Return the owner's resolver, else the default owner's."""

        resolver = self.get_resolver(owner)
        if resolver is None and owner is not default_owner:
            resolver = self.get_resolver(default_owner)
        return resolver

    def __len__(self) -> int:
        return len(self._resolvers)


__all__ = [
    "Fallback",
    "HolidayResult",
    "IdentityWeakMap",
    "Resolver",
    "StrategyRegistry",
    "is_weak_referenceable",
]
