import numpy as np
import pandas as pd
import pytest

from tunekit.api import Task


class TestTask:
    def test_target_excluded_from_features(self, clf_task):
        assert "target" not in clf_task.feature_names
        assert clf_task.X.shape == (120, 5)
        assert clf_task.X.dtype == float

    def test_copies_input(self):
        df = pd.DataFrame({"a": [1.0, 2.0], "y": [0, 1]})
        task = Task(data=df, target="y", problem="classification")
        df.loc[0, "a"] = 99.0
        assert task.data.loc[0, "a"] == 1.0

    def test_subset(self, clf_task):
        sub = clf_task.subset([0, 5, 7], suffix="part")
        assert sub.n_rows == 3
        assert sub.id == "clf/part"
        np.testing.assert_array_equal(sub.X, clf_task.X[[0, 5, 7]])

    def test_regression_target_is_float(self, reg_task):
        assert reg_task.y.dtype == float
        assert reg_task.classes == []

    @pytest.mark.parametrize(
        "df, target, problem",
        [
            (pd.DataFrame({"a": [1.0], "y": [0]}), "missing", "classification"),
            (pd.DataFrame({"y": [0, 1]}), "y", "classification"),
            (pd.DataFrame({"a": ["x", "z"], "y": [0, 1]}), "y", "classification"),
            (pd.DataFrame({"a": [1.0, np.nan], "y": [0, 1]}), "y", "classification"),
            (pd.DataFrame({"a": [1.0], "y": [0]}), "y", "clustering"),
            (pd.DataFrame({"a": [], "y": []}), "y", "regression"),
        ],
    )
    def test_invalid(self, df, target, problem):
        with pytest.raises(ValueError):
            Task(data=df, target=target, problem=problem)
