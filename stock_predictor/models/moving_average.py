"""
Trailing moving-average baseline.

The baseline has no trend: its fitted curve is the trailing mean repeated
at every position. It is only used as a comparator for the regression
models and never to generate forward predictions.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from stock_predictor.config import config
from stock_predictor.entities import Observation, prices_of
from stock_predictor.errors import EmptySeriesError, InvalidWindowError
from stock_predictor.models.base import FittedModel, RegressionModel

logger = logging.getLogger(__name__)


def trailing_mean(prices: Sequence[float], window: int) -> float:
    """Mean of the last ``window`` prices, or of all when fewer exist."""
    if window < 1:
        raise InvalidWindowError(window)
    if len(prices) == 0:
        raise EmptySeriesError("moving average")
    recent = np.asarray(prices, dtype=float)[-window:]
    return float(np.mean(recent))


def calculate_moving_average(
    series: Sequence[Observation],
    window: int = config.model.moving_average_window,
) -> float:
    """Trailing moving average of a price series.

    Args:
        series: Observations in time order.
        window: Number of trailing observations to average (default 20).

    Returns:
        The arithmetic mean of the last ``window`` prices.

    Raises:
        InvalidWindowError: If window < 1.
        EmptySeriesError: If the series is empty.
    """
    return trailing_mean(prices_of(series), window)


@dataclass(frozen=True)
class MovingAverageFit(FittedModel):
    """Flat line at the trailing mean."""

    level: float
    window: int

    name = "Moving Average"

    def predict(self, x: float) -> float:
        return self.level


class MovingAverageModel(RegressionModel):
    """Fits the flat-line baseline. ``xs`` only sets the series length."""

    name = "Moving Average"

    def __init__(self, window: int = config.model.moving_average_window) -> None:
        if window < 1:
            raise InvalidWindowError(window)
        self._window = window

    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> MovingAverageFit:
        _, y = self._validate(xs, ys, "MovingAverageModel.fit")
        level = trailing_mean(y, self._window)
        logger.debug("[MovingAverage] window=%d level=%.4f", self._window, level)
        return MovingAverageFit(level=level, window=self._window)
