from .common import JSONDict, Label, ResultModel
from .tuning import CandidateEvaluation, SearchResult
from .evaluation import Metrics, ResampleResult
from .benchmark import BenchmarkReport, BenchmarkRow

__all__ = [
    "ResultModel",
    "JSONDict",
    "Label",
    "CandidateEvaluation",
    "SearchResult",
    "Metrics",
    "ResampleResult",
    "BenchmarkRow",
    "BenchmarkReport",
]
