from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT) with a header row."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from tunekit.contracts.choices import ProblemKind
from tunekit.core.task import Task


def _read_first_line(path: Path, encoding: Optional[str] = None) -> str:
    with path.open("r", encoding=encoding or "utf-8", errors="replace") as f:
        return f.readline().strip("\n")


def _infer_delimiter(sample_line: str) -> str:
    if "\t" in sample_line:
        return "\t"
    if "," in sample_line:
        return ","
    if ";" in sample_line:
        return ";"
    return "whitespace"


def load_delimited_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> pd.DataFrame:
    """Load a table whose first row names the columns.

    - If delimiter is None, it is inferred from the header line.
    - Cells are not imputed; missing values surface when a Task is built.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    delim = delimiter
    if delim is None:
        delim = _infer_delimiter(_read_first_line(path, encoding))
    if delim == "\\t":
        delim = "\t"
    sep = r"\s+" if delim == "whitespace" else delim

    df = pd.read_csv(path.as_posix(), sep=sep, header=0, encoding=encoding or "utf-8", engine="python")
    if df.shape[1] < 2:
        raise ValueError(f"{path.name}: expected a target and at least one feature column; got {list(df.columns)}")
    df.columns = [str(c).strip() for c in df.columns]
    return df


def load_task(
    file_path: Union[str, Path],
    *,
    target: str,
    problem: ProblemKind,
    task_id: Optional[str] = None,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> Task:
    """Read a delimited table and wrap it as a :class:`Task` (id defaults to the file stem)."""
    df = load_delimited_table(file_path, delimiter=delimiter, encoding=encoding)
    return Task(data=df, target=target, problem=problem, id=task_id or Path(file_path).stem)


@dataclass
class TabularReader:
    delimiter: Optional[str] = None
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        return load_delimited_table(
            path,
            delimiter=kwargs.get("delimiter", self.delimiter),
            encoding=kwargs.get("encoding", self.encoding),
        )
