"""Config-type keyed registries for learner builders and splitters."""

from .models import list_model_configs, make_model_builder, register_model_builder
from .splitters import make_splitter, register_splitter

__all__ = [
    "make_model_builder",
    "register_model_builder",
    "list_model_configs",
    "make_splitter",
    "register_splitter",
]
