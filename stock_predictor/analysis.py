"""
Analysis pass for one symbol.

Implements the full flow behind the dashboard:
1. Generate (or accept) the historical series
2. Fit the linear and polynomial models on (index, price)
3. Score each in-sample fit and extrapolate the horizon
4. Keep the model with the higher R²
5. Label the trend and the risk level
6. Return an immutable PredictionBundle

Also builds the model comparison table, which adds the moving-average
baseline next to both regressions.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from stock_predictor.config import PredictionConfig, config
from stock_predictor.data.synthetic import SyntheticSeriesGenerator
from stock_predictor.entities import (
    Observation,
    PredictionPoint,
    RiskLevel,
    Trend,
    prices_of,
)
from stock_predictor.errors import InsufficientDataError
from stock_predictor.forecasting import generate_predictions
from stock_predictor.metrics import ModelMetrics
from stock_predictor.models.base import FittedModel, RegressionModel
from stock_predictor.models.linear import LinearRegressionModel
from stock_predictor.models.moving_average import MovingAverageModel
from stock_predictor.models.polynomial import PolynomialRegressionModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelComparison:
    """One row of the model comparison table."""

    name: str
    metrics: ModelMetrics


@dataclass(frozen=True)
class PredictionBundle:
    """Everything produced by one analysis pass for one symbol."""

    symbol: str
    historical: tuple[Observation, ...]
    predictions: tuple[PredictionPoint, ...]
    metrics: ModelMetrics
    model_name: str
    trend: Trend
    risk_level: RiskLevel

    @property
    def current_price(self) -> float:
        return self.historical[-1].price

    @property
    def target_price(self) -> float:
        return self.predictions[-1].predicted_price

    @property
    def expected_change(self) -> float:
        return self.target_price - self.current_price

    @property
    def expected_change_pct(self) -> float:
        if self.current_price == 0:
            return 0.0
        return self.expected_change / self.current_price * 100.0

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "model_name": self.model_name,
            "trend": self.trend.value,
            "risk_level": self.risk_level.value,
            "current_price": self.current_price,
            "target_price": self.target_price,
            "metrics": self.metrics.to_dict(),
            "predictions": [p.to_dict() for p in self.predictions],
        }


def classify_trend(
    current_price: float,
    future_price: float,
    threshold: float = config.analysis.trend_threshold,
) -> Trend:
    """Bullish/bearish when the relative move exceeds ``threshold``.

    A current price of 0 has no relative move and is neutral.
    """
    if current_price == 0:
        return Trend.NEUTRAL
    change = (future_price - current_price) / current_price
    if change > threshold:
        return Trend.BULLISH
    elif change < -threshold:
        return Trend.BEARISH
    return Trend.NEUTRAL


def daily_volatility(prices: Sequence[float]) -> float:
    """Root mean square of daily simple returns.

    Returns off a zero price are undefined and skipped.
    """
    returns = pd.Series(prices, dtype=float).pct_change().to_numpy()
    returns = returns[np.isfinite(returns)]
    if returns.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(returns ** 2)))


def classify_risk(
    volatility: float,
    medium_threshold: float = config.analysis.risk_medium_threshold,
    high_threshold: float = config.analysis.risk_high_threshold,
) -> RiskLevel:
    if volatility > high_threshold:
        return RiskLevel.HIGH
    elif volatility > medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def best_model(comparisons: Sequence[ModelComparison]) -> ModelComparison:
    """Row with the highest R². The earliest row wins ties."""
    best = comparisons[0]
    for current in comparisons[1:]:
        if current.metrics.r_squared > best.metrics.r_squared:
            best = current
    return best


class AnalysisService:
    """Runs analysis passes and model comparisons.

    Every call works on its own fits and returns new values. Nothing is
    cached between calls.
    """

    def __init__(
        self,
        cfg: PredictionConfig = config,
        generator: Optional[SyntheticSeriesGenerator] = None,
    ) -> None:
        self._cfg = cfg
        self._generator = generator or SyntheticSeriesGenerator(params=cfg.synthetic)

    def load_series(self, symbol: str, days: Optional[int] = None) -> list[Observation]:
        """Fetch the historical series for ``symbol`` from the generator.

        Raises:
            InvalidInputError: If days < 1.
        """
        if days is None:
            days = self._cfg.analysis.history_days
        return self._generator.generate_series(symbol, days=days)

    def analyze(
        self,
        symbol: str,
        series: Optional[Sequence[Observation]] = None,
        horizon: Optional[int] = None,
    ) -> PredictionBundle:
        """Run one full analysis pass.

        Args:
            symbol: Ticker symbol.
            series: Historical observations. Generated when omitted.
            horizon: Days to predict (default from config).

        Returns:
            The PredictionBundle of the model with the higher R².

        Raises:
            InsufficientDataError: If fewer than 2 observations are given.
            InvalidHorizonError: If horizon < 1.
        """
        if series is None:
            series = self.load_series(symbol)
        series = tuple(series)
        self._require_observations(series)
        if horizon is None:
            horizon = self._cfg.analysis.horizon_days

        prices = prices_of(series)
        linear = LinearRegressionModel().fit_series(prices)
        polynomial = PolynomialRegressionModel(
            self._cfg.model.singular_threshold
        ).fit_series(prices)

        linear_metrics = linear.evaluate(prices)
        poly_metrics = polynomial.evaluate(prices)

        if linear_metrics.r_squared > poly_metrics.r_squared:
            chosen, metrics = linear, linear_metrics
        else:
            chosen, metrics = polynomial, poly_metrics

        predictions = generate_predictions(
            series, chosen, horizon, self._cfg.model.z_score
        )

        trend = classify_trend(
            prices[-1],
            predictions[-1].predicted_price,
            self._cfg.analysis.trend_threshold,
        )
        risk = classify_risk(
            daily_volatility(prices),
            self._cfg.analysis.risk_medium_threshold,
            self._cfg.analysis.risk_high_threshold,
        )

        logger.info(
            "%s: chose %s (R²=%.4f) trend=%s risk=%s",
            symbol, chosen.name, metrics.r_squared, trend.value, risk.value,
        )
        return PredictionBundle(
            symbol=symbol,
            historical=series,
            predictions=tuple(predictions),
            metrics=metrics,
            model_name=chosen.name,
            trend=trend,
            risk_level=risk,
        )

    def compare_models(self, series: Sequence[Observation]) -> list[ModelComparison]:
        """Score linear, polynomial and moving-average fits on ``series``."""
        self._require_observations(series)
        prices = prices_of(series)

        candidates: list[RegressionModel] = [
            LinearRegressionModel(),
            PolynomialRegressionModel(self._cfg.model.singular_threshold),
            MovingAverageModel(self._cfg.model.moving_average_window),
        ]
        comparisons = []
        for model in candidates:
            fitted: FittedModel = model.fit_series(prices)
            comparisons.append(
                ModelComparison(name=model.name, metrics=fitted.evaluate(prices))
            )
        return comparisons

    def _require_observations(self, series: Sequence[Observation]) -> None:
        required = self._cfg.analysis.min_observations
        if len(series) < required:
            raise InsufficientDataError(required, len(series))
