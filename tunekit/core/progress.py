from __future__ import annotations

"""Progress reporting primitives.

Long-running use-cases (searches, benchmarks) accept an optional progress
callback. Notebooks or CLIs can adapt their own progress bars to this protocol.
"""

from typing import Optional, Protocol


class ProgressCallback(Protocol):
    """A minimal progress reporting interface."""

    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...
