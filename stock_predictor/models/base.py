"""
Abstract base classes for the regression models.

Fitting is split from prediction:

    RegressionModel.fit(xs, ys) → FittedModel
    FittedModel.predict(x)      → float

A FittedModel is an immutable value. Fitting again produces a new one,
so the same fit can be reused by any number of callers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from stock_predictor.metrics import (
    ModelMetrics,
    as_array,
    calculate_metrics,
    check_parallel,
)

logger = logging.getLogger(__name__)


class FittedModel(ABC):
    """Parameters produced by a fit, with a pure ``predict``.

    The prediction generator only depends on this interface.
    """

    name: str = "model"

    @abstractmethod
    def predict(self, x: float) -> float:
        """Evaluate the fitted curve at position ``x``."""
        ...

    def predict_many(self, xs: Sequence[float]) -> np.ndarray:
        """Evaluate the fitted curve at every position in ``xs``."""
        return np.array([self.predict(x) for x in xs], dtype=float)

    def fitted_values(self, n: int) -> np.ndarray:
        """In-sample curve over the historical positions 0..n-1."""
        return self.predict_many(range(n))

    def evaluate(self, ys: Sequence[float]) -> ModelMetrics:
        """Score the in-sample curve against the observed ``ys``."""
        metrics = calculate_metrics(ys, self.fitted_values(len(ys)))
        logger.info("[%s] Evaluation: %s", self.name, metrics)
        return metrics


class RegressionModel(ABC):
    """Strategy interface for the fitting routines.

    Concrete implementations: LinearRegressionModel,
    PolynomialRegressionModel, MovingAverageModel.
    """

    name: str = "model"

    @abstractmethod
    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> FittedModel:
        """Fit the model to (x, y) pairs.

        Args:
            xs: Positions (time indices).
            ys: Observed prices.

        Returns:
            An immutable FittedModel.
        """
        ...

    def fit_series(self, prices: Sequence[float]) -> FittedModel:
        """Fit against positions 0..n-1 of a price series."""
        return self.fit(range(len(prices)), prices)

    @staticmethod
    def _validate(
        xs: Sequence[float], ys: Sequence[float], operation: str
    ) -> tuple[np.ndarray, np.ndarray]:
        x = as_array(xs)
        y = as_array(ys)
        check_parallel(x, y, operation)
        return x, y
