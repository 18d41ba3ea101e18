from __future__ import annotations

from typing import Callable, Optional, Type

from tunekit.components.interfaces import Splitter
from tunekit.contracts.split_configs import SplitConfig

from tunekit.registries.base import TypeRegistry

# Factory takes (cfg, seed, stratify) and returns a Splitter.
SplitterFactory = Callable[[SplitConfig, Optional[int], bool], Splitter]

_SPLITTERS: TypeRegistry[SplitterFactory] = TypeRegistry(_name="splitters")

_BUILTINS_LOADED = False


def register_splitter(config_type: Type) -> Callable[[SplitterFactory], SplitterFactory]:
    return _SPLITTERS.register(config_type)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from tunekit.registries.builtins import splitters as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_splitter(cfg: SplitConfig, *, seed: Optional[int] = None, stratify: bool = True) -> Splitter:
    """Splitter for ``cfg``; ``stratify=False`` overrides the config (regression tasks)."""
    _ensure_builtins()
    factory = _SPLITTERS.try_get(type(cfg))
    if factory is None:
        raise TypeError(f"Unknown split config: {type(cfg).__name__}")
    return factory(cfg, seed, stratify)
