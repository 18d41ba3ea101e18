import pytest
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis, QuadraticDiscriminantAnalysis
from sklearn.ensemble import (
    GradientBoostingClassifier,
    GradientBoostingRegressor,
    RandomForestClassifier,
    RandomForestRegressor,
)
from sklearn.neighbors import KNeighborsClassifier, KNeighborsRegressor
from sklearn.pipeline import Pipeline

from tunekit.contracts.model_configs import (
    ForestConfig,
    GradientBoostingConfig,
    GradientBoostingRegressorConfig,
    KNNConfig,
    KNNRegressorConfig,
    LDAConfig,
    QDAConfig,
    RandomForestRegressorConfig,
    tunable_params,
    with_assignment,
)
from tunekit.core.sklearn_utils import unwrap_final_estimator
from tunekit.factories.model_factory import make_model
from tunekit.registries.models import list_model_configs, make_model_builder


class TestBuilders:
    @pytest.mark.parametrize(
        "cfg, expected",
        [
            (KNNConfig(), KNeighborsClassifier),
            (KNNRegressorConfig(), KNeighborsRegressor),
            (ForestConfig(), RandomForestClassifier),
            (RandomForestRegressorConfig(), RandomForestRegressor),
            (GradientBoostingConfig(), GradientBoostingClassifier),
            (GradientBoostingRegressorConfig(), GradientBoostingRegressor),
            (LDAConfig(), LinearDiscriminantAnalysis),
            (QDAConfig(), QuadraticDiscriminantAnalysis),
        ],
    )
    def test_builds_expected_estimator(self, cfg, expected):
        est = make_model(cfg, seed=3).make_estimator()
        assert isinstance(unwrap_final_estimator(est), expected)

    def test_knn_scaling_pipeline(self):
        est = make_model(KNNConfig(n_neighbors=7)).make_estimator()
        assert isinstance(est, Pipeline)
        assert [name for name, _ in est.steps] == ["scale", "clf"]
        assert est.named_steps["clf"].n_neighbors == 7

    def test_knn_without_scaling(self):
        est = make_model(KNNConfig(scale=False)).make_estimator()
        assert isinstance(est, KNeighborsClassifier)

    def test_seed_reaches_random_state(self):
        est = make_model(ForestConfig(n_estimators=10), seed=7).make_estimator()
        assert est.random_state == 7

    def test_explicit_random_state_wins(self):
        est = make_model(ForestConfig(random_state=1), seed=7).make_estimator()
        assert est.random_state == 1

    def test_forest_without_bootstrap_drops_oob(self):
        est = make_model(ForestConfig(bootstrap=False, oob_score=True)).make_estimator()
        assert est.oob_score is False

    def test_lda_svd_ignores_shrinkage(self):
        est = make_model(LDAConfig(solver="svd", shrinkage=0.5)).make_estimator()
        assert est.shrinkage is None

    def test_unknown_config(self):
        with pytest.raises(TypeError):
            make_model_builder(object())

    def test_registry_lists_all_learners(self):
        assert len(list_model_configs()) == 8
        assert "KNNConfig" in list_model_configs()


class TestConfigHelpers:
    def test_tunable_params_excludes_algo(self):
        params = tunable_params(KNNConfig())
        assert "n_neighbors" in params
        assert "scale" in params
        assert "algo" not in params

    def test_with_assignment_copies(self):
        base = KNNConfig()
        tuned = with_assignment(base, {"n_neighbors": 9})
        assert tuned.n_neighbors == 9
        assert base.n_neighbors == 5
