from __future__ import annotations

from tunekit.contracts.model_configs import ModelConfig

from tunekit.registries.models import make_model_builder

from tunekit.components.interfaces import ModelBuilder


def make_model(cfg: ModelConfig, *, seed: int | None = None) -> ModelBuilder:
    """Thin wrapper around the model-builder registry."""
    return make_model_builder(cfg, seed=seed)
