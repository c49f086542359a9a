"""
Tests for the analysis pass and model comparison.
"""

from datetime import date, timedelta

import pytest


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _series(prices, start=date(2024, 1, 1)):
    from stock_predictor.entities import Observation
    return [
        Observation(date=start + timedelta(days=i), price=float(p))
        for i, p in enumerate(prices)
    ]


@pytest.fixture
def quadratic_series():
    return _series([100 + 0.5 * i * i for i in range(30)])


@pytest.fixture
def service():
    from stock_predictor.analysis import AnalysisService
    from stock_predictor.data.synthetic import SyntheticSeriesGenerator
    return AnalysisService(generator=SyntheticSeriesGenerator(seed=123))


# ---------------------------------------------------------------------------
# Labelling tests
# ---------------------------------------------------------------------------


class TestTrend:
    def test_bullish(self):
        from stock_predictor.analysis import classify_trend
        from stock_predictor.entities import Trend
        assert classify_trend(100.0, 106.0) == Trend.BULLISH

    def test_bearish(self):
        from stock_predictor.analysis import classify_trend
        from stock_predictor.entities import Trend
        assert classify_trend(100.0, 94.0) == Trend.BEARISH

    def test_neutral(self):
        from stock_predictor.analysis import classify_trend
        from stock_predictor.entities import Trend
        assert classify_trend(100.0, 103.0) == Trend.NEUTRAL
        assert classify_trend(100.0, 97.0) == Trend.NEUTRAL

    def test_zero_current_price(self):
        from stock_predictor.analysis import classify_trend
        from stock_predictor.entities import Trend
        assert classify_trend(0.0, 10.0) == Trend.NEUTRAL


class TestRisk:
    def test_volatility_of_returns(self):
        from stock_predictor.analysis import daily_volatility
        # returns +10% and −10%
        assert daily_volatility([100.0, 110.0, 99.0]) == pytest.approx(0.1)

    def test_flat_series_has_no_volatility(self):
        from stock_predictor.analysis import daily_volatility
        assert daily_volatility([50.0] * 10) == 0.0
        assert daily_volatility([50.0]) == 0.0

    def test_zero_price_returns_are_skipped(self):
        import math
        from stock_predictor.analysis import classify_risk, daily_volatility
        from stock_predictor.entities import RiskLevel
        vol = daily_volatility([0.0, 10.0, 11.0, 12.0])
        assert math.isfinite(vol)
        assert vol == pytest.approx(((0.1 ** 2 + (1 / 11) ** 2) / 2) ** 0.5)
        assert classify_risk(vol) == RiskLevel.HIGH
        assert daily_volatility([0.0, 0.0, 0.0]) == 0.0

    def test_risk_buckets(self):
        from stock_predictor.analysis import classify_risk
        from stock_predictor.entities import RiskLevel
        assert classify_risk(0.01) == RiskLevel.LOW
        assert classify_risk(0.015) == RiskLevel.LOW
        assert classify_risk(0.02) == RiskLevel.MEDIUM
        assert classify_risk(0.03) == RiskLevel.MEDIUM
        assert classify_risk(0.05) == RiskLevel.HIGH


# ---------------------------------------------------------------------------
# Analysis pass tests
# ---------------------------------------------------------------------------


class TestAnalyze:
    def test_prefers_polynomial_on_curved_series(self, service, quadratic_series):
        from stock_predictor.entities import Trend
        bundle = service.analyze("AAPL", quadratic_series, horizon=30)
        assert bundle.model_name == "Polynomial Regression"
        assert bundle.metrics.r_squared == pytest.approx(1.0)
        assert bundle.trend == Trend.BULLISH
        # x = 59 on the same parabola
        assert bundle.target_price == pytest.approx(100 + 0.5 * 59 * 59, rel=1e-6)

    def test_prefers_linear_when_polynomial_is_degenerate(self, service):
        bundle = service.analyze("AAPL", _series([100.0, 110.0]), horizon=5)
        assert bundle.model_name == "Linear Regression"
        assert bundle.metrics.r_squared == pytest.approx(1.0)

    def test_bundle_contents(self, service, quadratic_series):
        bundle = service.analyze("GOOGL", quadratic_series, horizon=7)
        assert bundle.symbol == "GOOGL"
        assert len(bundle.predictions) == 7
        assert bundle.historical == tuple(quadratic_series)
        assert bundle.current_price == quadratic_series[-1].price
        assert bundle.expected_change == pytest.approx(
            bundle.target_price - bundle.current_price
        )
        assert bundle.expected_change_pct == pytest.approx(
            bundle.expected_change / bundle.current_price * 100
        )

    def test_bundle_to_dict(self, service, quadratic_series):
        d = service.analyze("GOOGL", quadratic_series, horizon=3).to_dict()
        assert d["trend"] in {"bullish", "bearish", "neutral"}
        assert d["risk_level"] in {"low", "medium", "high"}
        assert len(d["predictions"]) == 3
        assert set(d["metrics"]) == {"r_squared", "mse", "mae", "accuracy"}

    def test_generates_series_when_missing(self, service):
        from stock_predictor.config import config
        bundle = service.analyze("NFLX")
        assert len(bundle.historical) == config.analysis.history_days
        assert len(bundle.predictions) == config.analysis.horizon_days
        assert all(p.predicted_price >= 0 for p in bundle.predictions)

    def test_fresh_bundle_per_pass(self, service, quadratic_series):
        first = service.analyze("AAPL", quadratic_series, horizon=5)
        second = service.analyze("AAPL", quadratic_series, horizon=5)
        assert first == second
        assert first is not second

    def test_insufficient_data(self, service):
        from stock_predictor.errors import InsufficientDataError
        with pytest.raises(InsufficientDataError):
            service.analyze("AAPL", _series([100.0]))

    def test_invalid_horizon(self, service, quadratic_series):
        from stock_predictor.errors import InvalidHorizonError
        with pytest.raises(InvalidHorizonError):
            service.analyze("AAPL", quadratic_series, horizon=0)

    def test_load_series_rejects_zero_days(self, service):
        from stock_predictor.errors import InvalidInputError
        with pytest.raises(InvalidInputError):
            service.load_series("AAPL", days=0)

    def test_load_series_defaults_to_history_days(self, service):
        from stock_predictor.config import config
        assert len(service.load_series("AAPL")) == config.analysis.history_days


# ---------------------------------------------------------------------------
# Model comparison tests
# ---------------------------------------------------------------------------


class TestCompareModels:
    def test_rows_in_order(self, service, quadratic_series):
        rows = service.compare_models(quadratic_series)
        assert [r.name for r in rows] == [
            "Linear Regression",
            "Polynomial Regression",
            "Moving Average",
        ]
        for r in rows:
            assert 0.0 <= r.metrics.r_squared <= 1.0

    def test_best_model_on_curved_series(self, service, quadratic_series):
        from stock_predictor.analysis import best_model
        best = best_model(service.compare_models(quadratic_series))
        assert best.name == "Polynomial Regression"

    def test_best_model_first_wins_ties(self):
        from stock_predictor.analysis import ModelComparison, best_model
        from stock_predictor.metrics import ModelMetrics
        rows = [
            ModelComparison("A", ModelMetrics(r_squared=0.8)),
            ModelComparison("B", ModelMetrics(r_squared=0.8)),
            ModelComparison("C", ModelMetrics(r_squared=0.5)),
        ]
        assert best_model(rows).name == "A"

    def test_moving_average_flat_fit_on_trend(self, service, quadratic_series):
        rows = {r.name: r for r in service.compare_models(quadratic_series)}
        assert rows["Moving Average"].metrics.r_squared < rows["Linear Regression"].metrics.r_squared

    def test_insufficient_data(self, service):
        from stock_predictor.errors import InsufficientDataError
        with pytest.raises(InsufficientDataError):
            service.compare_models([])
