"""
Forward predictions with confidence bands.

For a fitted model and its historical series:
1. Compute in-sample residuals over positions 0..n-1
2. Standard error = sqrt(mean(residual²)) (population, not sample-corrected)
3. Extrapolate ``horizon`` calendar days past the last observation
4. Band = prediction ± z·SE, constant across the horizon

The band assumes normal, homoscedastic residuals and does not widen with
forecast distance.
"""

import logging
from datetime import timedelta
from typing import Sequence

import numpy as np

from stock_predictor.config import config
from stock_predictor.entities import (
    ConfidenceInterval,
    Observation,
    PredictionPoint,
    prices_of,
)
from stock_predictor.errors import EmptySeriesError, InvalidHorizonError
from stock_predictor.models.base import FittedModel

logger = logging.getLogger(__name__)


def standard_error(series: Sequence[Observation], model: FittedModel) -> float:
    """Root mean squared in-sample residual of ``model`` over ``series``."""
    if len(series) == 0:
        raise EmptySeriesError("standard_error")
    actual = np.asarray(prices_of(series), dtype=float)
    residuals = actual - model.fitted_values(len(actual))
    return float(np.sqrt(np.mean(residuals ** 2)))


def generate_predictions(
    series: Sequence[Observation],
    model: FittedModel,
    horizon: int = config.analysis.horizon_days,
    z_score: float = config.model.z_score,
) -> list[PredictionPoint]:
    """Extrapolate ``horizon`` daily points past the end of ``series``.

    Args:
        series: Historical observations in time order.
        model: Any fitted model; position i of the series is x = i.
        horizon: Number of future calendar days (default 30).
        z_score: Band multiplier (default 1.96, ≈95%).

    Returns:
        Exactly ``horizon`` PredictionPoints, one per day, in date order.
        Prices and lower bounds are clamped at 0; upper bounds are not.

    Raises:
        EmptySeriesError: If the series is empty.
        InvalidHorizonError: If horizon < 1.
    """
    if horizon < 1:
        raise InvalidHorizonError(horizon)
    if len(series) == 0:
        raise EmptySeriesError("generate_predictions")

    n = len(series)
    last_date = series[-1].date
    margin = z_score * standard_error(series, model)

    predictions: list[PredictionPoint] = []
    for step in range(1, horizon + 1):
        predicted = model.predict(n + step - 1)
        predictions.append(
            PredictionPoint(
                date=last_date + timedelta(days=step),
                predicted_price=max(0.0, predicted),
                confidence_interval=ConfidenceInterval(
                    lower=max(0.0, predicted - margin),
                    upper=predicted + margin,
                ),
            )
        )

    logger.debug(
        "[%s] %d predictions from %s, margin=±%.4f",
        model.name, horizon, last_date, margin,
    )
    return predictions
