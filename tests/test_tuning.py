import logging

import numpy as np
import pandas as pd
import pytest

from tunekit.api import Task, define_search_space, knn_grid, tune
from tunekit.components.tuning.search import RandomSearchStrategy
from tunekit.contracts.eval_configs import EvalModel
from tunekit.contracts.model_configs import KNNConfig, KNNRegressorConfig, LDAConfig, QDAConfig
from tunekit.contracts.search_space import CategoricalParam, ContinuousParam, IntegerParam, SearchSpace
from tunekit.contracts.split_configs import SplitCVModel
from tunekit.contracts.tuning_configs import GridSearchConfig, RandomizedSearchConfig
from tunekit.errors import EmptySearchSpaceError, InvalidDomainError, ResamplingFailureError

CV3 = SplitCVModel(n_splits=3)


class TestGridTuning:
    def test_knn_grid_on_wine(self, wine_task):
        result = tune(
            wine_task,
            KNNConfig(),
            knn_grid(12),
            GridSearchConfig(),
            SplitCVModel(n_splits=5, stratified=True),
            seed=0,
            n_jobs=1,
        )
        assert result.strategy == "grid_search"
        assert result.measure == "mmce"
        assert result.n_candidates == 12
        assert [c.assignment["n_neighbors"] for c in result.trace] == list(range(1, 13))
        assert all(len(c.fold_errors) == 5 for c in result.trace)

        errors = result.errors()
        assert result.best_error == min(errors)
        assert result.best_index == errors.index(min(errors))
        assert result.best_assignment == result.trace[result.best_index].assignment

    def test_ties_go_to_first_candidate(self, wine_task):
        # store_covariance does not change svd-LDA predictions
        space = define_search_space([CategoricalParam(name="store_covariance", values=(False, True))])
        result = tune(wine_task, LDAConfig(), space, resampling=CV3, seed=0)
        assert result.trace[0].mean_error == result.trace[1].mean_error
        assert result.best_index == 0
        assert result.best_assignment == {"store_covariance": False}

    def test_continuous_resolution(self, wine_task):
        space = define_search_space([ContinuousParam(name="reg_param", lower=0.0, upper=1.0)])
        result = tune(wine_task, QDAConfig(), space, GridSearchConfig(resolution=4), CV3, seed=0)
        assert result.n_candidates == 4
        assert [c.assignment["reg_param"] for c in result.trace] == pytest.approx([0.0, 1 / 3, 2 / 3, 1.0])

    def test_custom_measure(self, clf_task):
        result = tune(clf_task, KNNConfig(), knn_grid(3), resampling=CV3, eval=EvalModel(measure="ber", seed=0))
        assert result.measure == "ber"

    def test_regression_defaults_to_mse(self, reg_task):
        result = tune(reg_task, KNNRegressorConfig(), knn_grid(4), resampling=CV3, seed=0)
        assert result.measure == "mse"
        assert result.best_error > 0

    def test_knn_grid_on_regression(self, reg_task):
        result = tune(
            reg_task,
            KNNRegressorConfig(),
            knn_grid(12),
            GridSearchConfig(),
            SplitCVModel(n_splits=5),
            seed=0,
            n_jobs=1,
        )
        assert result.measure == "mse"
        assert result.n_candidates == 12
        assert [c.assignment["n_neighbors"] for c in result.trace] == list(range(1, 13))
        assert all(len(c.fold_errors) == 5 for c in result.trace)
        assert result.best_error == min(result.errors())


class TestRandomTuning:
    def test_exact_number_of_candidates(self, clf_task):
        space = define_search_space([IntegerParam(name="n_neighbors", lower=1, upper=15)])
        result = tune(clf_task, KNNConfig(), space, RandomizedSearchConfig(n_iter=5), CV3, seed=1)
        assert result.n_candidates == 5
        assert all(1 <= c.assignment["n_neighbors"] <= 15 for c in result.trace)

    def test_reproducible(self, clf_task):
        space = define_search_space(
            [
                IntegerParam(name="n_neighbors", lower=1, upper=15),
                CategoricalParam(name="weights", values=("uniform", "distance")),
            ]
        )
        a = tune(clf_task, KNNConfig(), space, RandomizedSearchConfig(n_iter=6), CV3, seed=5)
        b = tune(clf_task, KNNConfig(), space, RandomizedSearchConfig(n_iter=6), CV3, seed=5)
        assert a.model_dump() == b.model_dump()

    def test_random_state_pins_candidates(self, clf_task):
        space = define_search_space([IntegerParam(name="n_neighbors", lower=1, upper=15)])
        result = tune(clf_task, KNNConfig(), space, RandomizedSearchConfig(n_iter=4, random_state=11), CV3)
        expected = RandomSearchStrategy(n_iter=4, seed=11).candidates(space)
        assert [c.assignment for c in result.trace] == expected


class TestTuningErrors:
    def test_empty_space(self, clf_task):
        with pytest.raises(EmptySearchSpaceError):
            tune(clf_task, KNNConfig(), define_search_space([]), resampling=CV3)

    def test_no_random_draws(self, clf_task):
        with pytest.raises(EmptySearchSpaceError):
            tune(clf_task, KNNConfig(), knn_grid(3), RandomizedSearchConfig(n_iter=0), CV3)

    @pytest.mark.parametrize("search", [GridSearchConfig(), RandomizedSearchConfig(n_iter=3)])
    def test_inverted_domain_in_prebuilt_space(self, clf_task, search):
        with pytest.raises(InvalidDomainError) as exc:
            space = SearchSpace(params=(IntegerParam(name="n_neighbors", lower=5, upper=1),))
            tune(clf_task, KNNConfig(), space, search, CV3)
        assert exc.value.param_name == "n_neighbors"

    def test_inverted_domain_in_dict_specs(self, clf_task):
        specs = [{"kind": "integer", "name": "n_neighbors", "lower": 5, "upper": 1}]
        with pytest.raises(InvalidDomainError):
            tune(clf_task, KNNConfig(), specs, resampling=CV3)

    def test_unknown_hyperparameter(self, clf_task):
        space = define_search_space([IntegerParam(name="max_depth", lower=1, upper=3)])
        with pytest.raises(InvalidDomainError) as exc:
            tune(clf_task, KNNConfig(), space, resampling=CV3)
        assert exc.value.param_name == "max_depth"

    def test_value_invalid_for_learner(self, clf_task):
        space = define_search_space([ContinuousParam(name="n_neighbors", lower=1.5, upper=3.5)])
        with pytest.raises(InvalidDomainError):
            tune(clf_task, KNNConfig(), space, resampling=CV3)

    def test_learner_task_mismatch(self, reg_task):
        with pytest.raises(ValueError):
            tune(reg_task, KNNConfig(), knn_grid(3), resampling=CV3)

    def test_single_class_training_fold(self):
        df = pd.DataFrame(
            {
                "f0": [0.1, 0.2, 0.3, 0.4, 0.5, 0.6],
                "f1": [1.0, 0.9, 0.8, 0.7, 0.6, 0.5],
                "target": [0, 0, 0, 0, 1, 1],
            }
        )
        task = Task(data=df, target="target", problem="classification", id="tiny")
        with pytest.raises(ResamplingFailureError) as exc:
            tune(task, KNNConfig(), knn_grid(1), resampling=SplitCVModel(n_splits=3, shuffle=False))
        assert exc.value.fold_index == 2
        assert exc.value.repetition == 0
        assert exc.value.assignment == {"n_neighbors": 1}

    def test_estimator_error(self, clf_task):
        space = define_search_space([IntegerParam(name="n_neighbors", lower=100, upper=100)])
        with pytest.raises(ResamplingFailureError) as exc:
            tune(clf_task, KNNConfig(), space, resampling=CV3)
        assert exc.value.fold_index == 0
        assert exc.value.assignment == {"n_neighbors": 100}

    def test_too_many_folds(self, clf_task):
        with pytest.raises(ResamplingFailureError):
            tune(clf_task, KNNConfig(), knn_grid(2), resampling=SplitCVModel(n_splits=500))


class TestStratificationFallback:
    def test_regression_warns_and_uses_plain_folds(self, reg_task, caplog):
        caplog.set_level(logging.WARNING, logger="tunekit")
        result = tune(
            reg_task,
            KNNRegressorConfig(),
            knn_grid(3),
            resampling=SplitCVModel(n_splits=3, stratified=True),
            seed=0,
        )
        assert result.n_candidates == 3
        assert "unstratified" in caplog.text


class TestParallel:
    def test_two_workers_match_serial(self, clf_task):
        serial = tune(clf_task, KNNConfig(), knn_grid(6), resampling=CV3, seed=2, n_jobs=1)
        parallel = tune(clf_task, KNNConfig(), knn_grid(6), resampling=CV3, seed=2, n_jobs=2)
        assert np.allclose(serial.errors(), parallel.errors())
        assert serial.best_assignment == parallel.best_assignment


class TestProgress:
    def test_one_update_per_candidate(self, clf_task, progress):
        tune(clf_task, KNNConfig(), knn_grid(4), resampling=CV3, seed=0, progress=progress)
        assert progress.events[0] == ("init", 4)
        assert [e for e in progress.events if e[0] == "update"] == [("update", i) for i in range(1, 5)]
        assert progress.events[-1] == ("finalize", None)
