"""
Ordinary least-squares line.

slope     = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
intercept = (Σy − slope·Σx) / n
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from stock_predictor.errors import DegenerateSeriesError
from stock_predictor.models.base import FittedModel, RegressionModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearFit(FittedModel):
    """Fitted line y = slope·x + intercept."""

    slope: float
    intercept: float

    name = "Linear Regression"

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


class LinearRegressionModel(RegressionModel):
    """Closed-form least-squares line over (index, price) pairs."""

    name = "Linear Regression"

    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> LinearFit:
        """Fit the minimal-SSE line.

        Raises:
            EmptySeriesError: If no points are given.
            MismatchedLengthError: If xs and ys differ in length.
            DegenerateSeriesError: If every x is identical (includes n = 1).
        """
        x, y = self._validate(xs, ys, "LinearRegressionModel.fit")
        n = len(x)

        # Rounding leaves a nonzero denominator for repeated float x
        if np.ptp(x) == 0:
            raise DegenerateSeriesError(n)

        sum_x = float(np.sum(x))
        sum_y = float(np.sum(y))
        sum_xy = float(np.sum(x * y))
        sum_xx = float(np.sum(x * x))

        denominator = n * sum_xx - sum_x * sum_x
        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n

        logger.debug(
            "[Linear] Fitted %d points: slope=%.6f intercept=%.6f",
            n, slope, intercept,
        )
        return LinearFit(slope=slope, intercept=intercept)
