from __future__ import annotations

from typing import Callable, Optional, Type

from tunekit.components.interfaces import ModelBuilder
from tunekit.contracts.model_configs import ModelConfig

from tunekit.registries.base import TypeRegistry


# Factory takes (cfg, seed) and returns a ModelBuilder.
ModelBuilderFactory = Callable[[ModelConfig, Optional[int]], ModelBuilder]


_BUILDERS: TypeRegistry[ModelBuilderFactory] = TypeRegistry(_name="model_builders")

_BUILTINS_LOADED = False


def register_model_builder(
    config_type: Type[ModelConfig],
) -> Callable[[ModelBuilderFactory], ModelBuilderFactory]:
    """Decorator to register a ModelBuilder factory for a learner config type."""
    return _BUILDERS.register(config_type)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from tunekit.registries.builtins import models as _  # noqa: F401

    _BUILTINS_LOADED = True


def make_model_builder(cfg: ModelConfig, *, seed: Optional[int] = None) -> ModelBuilder:
    """Return a ModelBuilder for the provided config."""
    _ensure_builtins()

    factory = _BUILDERS.try_get(type(cfg))
    if factory is None:
        raise TypeError(f"Unsupported learner config: {type(cfg).__name__}")

    return factory(cfg, seed)


def list_model_configs() -> list[str]:
    _ensure_builtins()
    return sorted(t.__name__ for t in _BUILDERS.keys())
