"""Readers turning files on disk into :class:`~tunekit.core.task.Task` objects."""

from .tabular_reader import TabularReader, load_delimited_table, load_task

__all__ = ["TabularReader", "load_delimited_table", "load_task"]
