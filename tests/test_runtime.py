import logging

import pytest
from joblib import cpu_count

from tunekit.components.tuning.executor import resolve_n_jobs
from tunekit.core.logging import configure_logging
from tunekit.runtime.random.rng import RngManager
from tunekit.runtime.settings import get_default_n_jobs, get_log_level


class TestRngManager:
    def test_child_seeds_are_stable_and_named(self):
        a, b = RngManager(1), RngManager(1)
        assert a.child_seed("tuning/split") == b.child_seed("tuning/split")
        assert a.child_seed("tuning/split") != a.child_seed("tuning/model")
        assert RngManager(2).child_seed("tuning/split") != a.child_seed("tuning/split")

    def test_seed_fits_31_bits(self):
        assert 0 <= RngManager(123).child_seed("x") < 2**31


class TestSettings:
    def test_default_n_jobs(self, monkeypatch):
        monkeypatch.delenv("TUNEKIT_N_JOBS", raising=False)
        assert get_default_n_jobs() == 1
        monkeypatch.setenv("TUNEKIT_N_JOBS", "3")
        assert get_default_n_jobs() == 3

    def test_bad_n_jobs(self, monkeypatch):
        monkeypatch.setenv("TUNEKIT_N_JOBS", "many")
        with pytest.raises(ValueError):
            get_default_n_jobs()

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("TUNEKIT_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_worker_bound(self):
        assert resolve_n_jobs(-1) == cpu_count()
        assert resolve_n_jobs(10_000) == cpu_count()
        assert resolve_n_jobs(1) == 1
        with pytest.raises(ValueError):
            resolve_n_jobs(0)


class TestLogging:
    def test_configure_is_idempotent(self):
        logger = configure_logging(logging.WARNING)
        n = len(logger.handlers)
        configure_logging(logging.INFO)
        assert len(logger.handlers) == n
        assert logger.level == logging.INFO
