from __future__ import annotations

"""UCI wine recognition data (178 rows, 13 chemical assays, 3 cultivars).

Shipped with scikit-learn, so no download is involved.
"""

from sklearn.datasets import load_wine

from tunekit.core.task import Task


def load_wine_task(*, target: str = "cultivar", task_id: str = "wine") -> Task:
    bunch = load_wine(as_frame=True)
    frame = bunch.frame.rename(columns={"target": target})
    return Task(data=frame, target=target, problem="classification", id=task_id)


__all__ = ["load_wine_task"]
