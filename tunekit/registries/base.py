from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, Type, TypeVar

V = TypeVar("V")


@dataclass
class TypeRegistry(Generic[V]):
    """Registry mapping config *types* to values (usually factories).

    Lookups walk the MRO so config subclasses inherit their parent's entry.
    Keys are classes, never strings: the set of variants is closed and known
    at import time.

    Typical usage:
        REG = TypeRegistry[Callable[..., Any]](_name="builders")

        @REG.register(KNNConfig)
        def make_knn(cfg, seed):
            ...

        make = REG.get(type(cfg))
    """

    _items: Dict[type, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: type) -> Callable[[V], V]:
        def deco(value: V) -> V:
            if key in self._items:
                raise KeyError(f"{self._name}: {key.__name__} registered twice")
            self._items[key] = value
            return value

        return deco

    def try_get(self, key: type) -> Optional[V]:
        for base in key.mro():
            if base in self._items:
                return self._items[base]
        return None

    def get(self, key: type) -> V:
        value = self.try_get(key)
        if value is None:
            raise KeyError(f"{self._name}: nothing registered for {key.__name__}")
        return value

    def keys(self) -> Iterable[Type]:
        return self._items.keys()

    def __contains__(self, key: type) -> bool:  # pragma: no cover
        return self.try_get(key) is not None
