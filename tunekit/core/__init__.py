from .task import Task
from .model import TrainedModel
from .progress import ProgressCallback

__all__ = ["Task", "TrainedModel", "ProgressCallback"]
