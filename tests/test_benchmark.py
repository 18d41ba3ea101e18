import pytest

from tunekit.api import forest_space, knn_grid, lda_solver_space, run_benchmark
from tunekit.contracts.benchmark_configs import TunedLearner
from tunekit.contracts.model_configs import KNNConfig, KNNRegressorConfig, LDAConfig, RandomForestRegressorConfig
from tunekit.contracts.search_space import IntegerParam, SearchSpace
from tunekit.contracts.split_configs import SplitCVModel
from tunekit.errors import InvalidDomainError

OUTER = SplitCVModel(n_splits=3, stratified=True)
INNER = SplitCVModel(n_splits=3)


def _learners():
    return [
        TunedLearner(learner=KNNConfig(), search_space=knn_grid(5), resampling=INNER),
        TunedLearner(learner=LDAConfig(), search_space=lda_solver_space(), resampling=INNER),
    ]


class TestBenchmark:
    def test_report_layout(self, clf_task):
        report = run_benchmark(clf_task, _learners(), OUTER, seed=0)
        assert report.task_id == "clf"
        assert report.measure == "mmce"
        assert report.n_outer_folds == 3
        assert list(report.rows) == ["knn.tuned", "lda.tuned"]
        for row in report.rows.values():
            assert row.ok
            assert len(row.fold_scores) == 3
            assert len(row.best_assignments) == 3
            assert 0.0 <= row.aggregate["mmce"] <= 1.0

        knn = report.rows["knn.tuned"]
        assert all(1 <= a["n_neighbors"] <= 5 for a in knn.best_assignments)

    def test_deterministic(self, clf_task):
        a = run_benchmark(clf_task, _learners(), OUTER, seed=3)
        b = run_benchmark(clf_task, _learners(), OUTER, seed=3)
        assert a.model_dump() == b.model_dump()

    def test_to_frame(self, clf_task):
        frame = run_benchmark(clf_task, _learners(), OUTER, seed=0).to_frame()
        assert list(frame.index) == ["knn.tuned", "lda.tuned"]
        assert "mmce.test.mean" in frame.columns
        assert "accuracy.test.mean" in frame.columns

    def test_divergence_is_recorded(self, clf_task):
        broken = TunedLearner(
            learner=KNNConfig(),
            search_space=SearchSpace(params=(IntegerParam(name="n_neighbors", lower=500, upper=500),)),
            resampling=INNER,
            learner_id="knn.broken",
        )
        report = run_benchmark(clf_task, [broken, *_learners()], OUTER, seed=0)

        row = report.rows["knn.broken"]
        assert not row.ok
        assert row.error_type == "LearnerDivergenceError"
        assert row.failed_folds == [0, 1, 2]
        assert row.fold_scores == [None, None, None]
        assert row.aggregate == {}

        assert report.rows["knn.tuned"].ok
        assert report.rows["lda.tuned"].ok

    def test_progress(self, clf_task, progress):
        run_benchmark(clf_task, _learners(), OUTER, seed=0, progress=progress)
        assert progress.events[0] == ("init", 6)
        assert progress.events[-1] == ("finalize", None)

    def test_regression(self, reg_task):
        learners = [
            TunedLearner(learner=KNNRegressorConfig(), search_space=knn_grid(4), resampling=INNER),
            TunedLearner(
                learner=RandomForestRegressorConfig(),
                search_space=forest_space(4, ntree=(10, 10)),
                resampling=INNER,
            ),
        ]
        report = run_benchmark(reg_task, learners, SplitCVModel(n_splits=3), seed=0)
        assert report.measure == "mse"
        assert report.rows["rfreg.tuned"].ok
        assert all(a["n_estimators"] == 10 for a in report.rows["rfreg.tuned"].best_assignments)


class TestBenchmarkValidation:
    def test_duplicate_ids(self, clf_task):
        with pytest.raises(ValueError):
            run_benchmark(clf_task, [*_learners(), *_learners()], OUTER)

    def test_no_learners(self, clf_task):
        with pytest.raises(ValueError):
            run_benchmark(clf_task, [], OUTER)

    def test_learner_for_other_problem(self, clf_task):
        wrong = TunedLearner(learner=KNNRegressorConfig(), search_space=knn_grid(3))
        with pytest.raises(ValueError):
            run_benchmark(clf_task, [wrong], OUTER)

    def test_inverted_domain_from_dict(self):
        with pytest.raises(InvalidDomainError) as exc:
            TunedLearner(
                learner=KNNConfig(),
                search_space={"params": [{"kind": "integer", "name": "n_neighbors", "lower": 5, "upper": 1}]},
            )
        assert exc.value.param_name == "n_neighbors"

    def test_duplicate_names_from_dict(self):
        params = [
            {"kind": "integer", "name": "n_neighbors", "lower": 1, "upper": 3},
            {"kind": "integer", "name": "n_neighbors", "lower": 4, "upper": 6},
        ]
        with pytest.raises(InvalidDomainError):
            TunedLearner(learner=KNNConfig(), search_space={"params": params})
