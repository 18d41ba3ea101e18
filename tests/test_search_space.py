import pytest

from tunekit.api import boosting_space, define_search_space, forest_space
from tunekit.components.tuning.space import grid_values
from tunekit.contracts.search_space import CategoricalParam, ContinuousParam, IntegerParam, SearchSpace
from tunekit.errors import InvalidDomainError


class TestDefineSearchSpace:
    def test_accepts_models_and_dicts(self):
        space = define_search_space(
            [
                IntegerParam(name="n_neighbors", lower=1, upper=12),
                {"kind": "categorical", "name": "weights", "values": ["uniform", "distance"]},
            ]
        )
        assert space.names == ["n_neighbors", "weights"]
        assert isinstance(space.params[1], CategoricalParam)
        assert len(space) == 2

    def test_inverted_bounds(self):
        with pytest.raises(InvalidDomainError) as exc:
            define_search_space([IntegerParam(name="k", lower=5, upper=1)])
        assert exc.value.param_name == "k"

    def test_empty_categorical(self):
        with pytest.raises(InvalidDomainError) as exc:
            define_search_space([CategoricalParam(name="weights", values=())])
        assert exc.value.param_name == "weights"

    def test_log_scale_needs_positive_lower(self):
        with pytest.raises(InvalidDomainError):
            define_search_space([ContinuousParam(name="lr", lower=0.0, upper=1.0, log=True)])

    def test_duplicate_names(self):
        with pytest.raises(InvalidDomainError) as exc:
            define_search_space(
                [
                    IntegerParam(name="k", lower=1, upper=3),
                    IntegerParam(name="k", lower=4, upper=6),
                ]
            )
        assert exc.value.param_name == "k"

    def test_malformed_dict(self):
        with pytest.raises(InvalidDomainError) as exc:
            define_search_space([{"kind": "integer", "name": "k", "lower": "low", "upper": 3}])
        assert exc.value.param_name == "k"

    def test_unknown_kind(self):
        with pytest.raises(InvalidDomainError):
            define_search_space([{"kind": "ordinal", "name": "x"}])

    def test_single_point_domain(self):
        space = define_search_space([IntegerParam(name="k", lower=3, upper=3)])
        assert space.grid() == {"k": [3]}


class TestContractInvariants:
    def test_param_rejects_inverted_bounds(self):
        with pytest.raises(InvalidDomainError) as exc:
            IntegerParam(name="n_neighbors", lower=5, upper=1)
        assert exc.value.param_name == "n_neighbors"

    def test_param_rejects_empty_values(self):
        with pytest.raises(InvalidDomainError):
            CategoricalParam(name="weights", values=())

    def test_param_rejects_non_finite_bound(self):
        with pytest.raises(InvalidDomainError):
            ContinuousParam(name="c", lower=0.0, upper=float("inf"))

    def test_space_rejects_duplicate_names(self):
        with pytest.raises(InvalidDomainError) as exc:
            SearchSpace(
                params=(
                    IntegerParam(name="k", lower=1, upper=3),
                    CategoricalParam(name="k", values=("a",)),
                )
            )
        assert exc.value.param_name == "k"

    def test_space_validates_nested_dicts(self):
        with pytest.raises(InvalidDomainError):
            SearchSpace.model_validate({"params": [{"kind": "continuous", "name": "c", "lower": 2.0, "upper": 1.0}]})


class TestGrid:
    def test_integer_enumerates_bounds(self):
        space = define_search_space([IntegerParam(name="k", lower=1, upper=12)])
        assert space.grid() == {"k": list(range(1, 13))}
        assert space.grid_size() == 12

    def test_integer_with_resolution(self):
        values = grid_values(IntegerParam(name="k", lower=1, upper=100), 5)
        assert len(values) == 5
        assert values[0] == 1 and values[-1] == 100
        assert values == sorted(values)
        assert all(isinstance(v, int) for v in values)

    def test_continuous_default_resolution(self):
        values = grid_values(ContinuousParam(name="c", lower=0.0, upper=1.0))
        assert len(values) == 10
        assert values[0] == pytest.approx(0.0)
        assert values[-1] == pytest.approx(1.0)

    def test_log_spacing(self):
        values = grid_values(ContinuousParam(name="lr", lower=1e-3, upper=10.0, log=True), 5)
        assert values == pytest.approx([1e-3, 1e-2, 1e-1, 1.0, 10.0])

    def test_grid_size_is_product(self):
        space = define_search_space(
            [
                IntegerParam(name="k", lower=1, upper=3),
                CategoricalParam(name="weights", values=("uniform", "distance")),
            ]
        )
        assert space.grid_size() == 6

    def test_empty_space(self):
        assert define_search_space([]).grid_size() == 0


class TestPresetSizes:
    def test_forest_space_full_grid_is_large(self):
        space = forest_space(13)
        assert space.grid_size() == 13 * 451
        assert space.grid_size(resolution=5) == 25

    def test_boosting_space_coarse_grid(self):
        space = boosting_space()
        assert space.grid_size() > 20_000
        assert space.grid_size(resolution=3) == 27
