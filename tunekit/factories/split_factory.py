from __future__ import annotations

from typing import Optional

from tunekit.contracts.split_configs import SplitConfig

from tunekit.registries.splitters import make_splitter as _make_splitter

from tunekit.components.interfaces import Splitter


def make_splitter(cfg: SplitConfig, seed: Optional[int] = None, *, stratify: bool = True) -> Splitter:
    """Thin wrapper around the splitter registry."""
    return _make_splitter(cfg, seed=seed, stratify=stratify)
