"""
Tests for settings, configuration, logging setup and errors.
"""

import logging

import pytest


class TestConfig:
    def test_default_config_loads(self):
        from stock_predictor.config import PredictionConfig
        cfg = PredictionConfig()
        assert cfg.model.z_score == 1.96
        assert cfg.model.singular_threshold == 1e-10
        assert cfg.model.accuracy_tolerance == 0.05
        assert cfg.analysis.trend_threshold == 0.05
        assert len(cfg.popular_symbols) == 8

    def test_risk_thresholds_ordered(self):
        from stock_predictor.config import PredictionConfig
        cfg = PredictionConfig()
        assert cfg.analysis.risk_medium_threshold < cfg.analysis.risk_high_threshold

    def test_config_is_frozen(self):
        import dataclasses
        from stock_predictor.config import config
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.model.z_score = 2.0


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "STOCK_PREDICTOR_HISTORY_DAYS",
            "STOCK_PREDICTOR_HORIZON_DAYS",
            "STOCK_PREDICTOR_RANDOM_SEED",
        ):
            monkeypatch.delenv(var, raising=False)
        from stock_predictor.settings import Settings
        s = Settings(_env_file=None)
        assert s.history_days == 180
        assert s.horizon_days == 30
        assert s.moving_average_window == 20
        assert s.random_seed is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STOCK_PREDICTOR_HORIZON_DAYS", "10")
        monkeypatch.setenv("STOCK_PREDICTOR_RANDOM_SEED", "99")
        from stock_predictor.settings import Settings
        s = Settings(_env_file=None)
        assert s.horizon_days == 10
        assert s.random_seed == 99


class TestLogging:
    def test_configure_logging_sets_level(self):
        from stock_predictor.utils.logging import configure_logging
        root = logging.getLogger()
        previous_level = root.level
        previous_handlers = root.handlers[:]
        try:
            configure_logging("DEBUG")
            assert root.level == logging.DEBUG
            configure_logging("not-a-level")
            assert root.level == logging.INFO
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in previous_handlers:
                root.addHandler(handler)
            root.setLevel(previous_level)


class TestErrors:
    def test_hierarchy(self):
        from stock_predictor.errors import (
            EmptySeriesError,
            InvalidHorizonError,
            InvalidInputError,
            PredictionError,
        )
        assert issubclass(EmptySeriesError, InvalidInputError)
        assert issubclass(InvalidHorizonError, PredictionError)

    def test_messages(self):
        from stock_predictor.errors import InsufficientDataError, InvalidHorizonError
        assert "0" in InvalidHorizonError(0).message
        err = InsufficientDataError(2, 1)
        assert err.required == 2
        assert err.available == 1
        assert str(err) == err.message
