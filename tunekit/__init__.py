"""tunekit: hyperparameter tuning, resampling and benchmarking on scikit-learn learners."""

__version__ = "0.1.0"
