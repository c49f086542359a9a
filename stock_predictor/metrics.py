"""
Goodness-of-fit metrics.

Provides:
- Coefficient of determination (R², floored at 0)
- Mean squared error and mean absolute error
- Tolerance accuracy: share of points within 5% relative error
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from stock_predictor.config import config
from stock_predictor.errors import EmptySeriesError, MismatchedLengthError

logger = logging.getLogger(__name__)

DEFAULT_ACCURACY_TOLERANCE = config.model.accuracy_tolerance


@dataclass(frozen=True)
class ModelMetrics:
    """Container for model evaluation metrics.

    ``accuracy`` is a percentage in [0, 100]; ``r_squared`` is in [0, 1].
    """

    r_squared: float = 0.0
    mse: float = 0.0
    mae: float = 0.0
    accuracy: float = 0.0

    def to_dict(self) -> dict:
        return {
            "r_squared": self.r_squared,
            "mse": self.mse,
            "mae": self.mae,
            "accuracy": self.accuracy,
        }

    def __str__(self) -> str:
        return (
            f"R²={self.r_squared:.4f} | MSE={self.mse:.4f} | "
            f"MAE={self.mae:.4f} | Accuracy={self.accuracy:.1f}%"
        )


def as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def check_parallel(actual: np.ndarray, predicted: np.ndarray, operation: str) -> None:
    """Reject empty or unequal-length parallel sequences."""
    if len(actual) != len(predicted):
        raise MismatchedLengthError(len(actual), len(predicted))
    if len(actual) == 0:
        raise EmptySeriesError(operation)


def r_squared(actual: np.ndarray, predicted: np.ndarray) -> float:
    """R² = max(0, 1 − SSE/SST).

    A constant actual series has SST = 0: a perfect prediction scores 1,
    anything else scores 0.
    """
    residuals = actual - predicted
    ss_res = float(np.sum(residuals ** 2))
    ss_tot = float(np.sum((actual - np.mean(actual)) ** 2))
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0
    return max(0.0, 1.0 - ss_res / ss_tot)


def tolerance_accuracy(
    actual: np.ndarray,
    predicted: np.ndarray,
    tolerance: float = DEFAULT_ACCURACY_TOLERANCE,
) -> float:
    """Percentage of points with |actual − predicted| / actual ≤ tolerance.

    Points where actual is 0 count as accurate only on an exact hit.
    """
    abs_err = np.abs(actual - predicted)
    nonzero = actual != 0
    within = np.zeros(len(actual), dtype=bool)
    within[nonzero] = abs_err[nonzero] / np.abs(actual[nonzero]) <= tolerance
    within[~nonzero] = abs_err[~nonzero] == 0
    return float(np.mean(within) * 100.0)


def calculate_metrics(
    actual: Sequence[float],
    predicted: Sequence[float],
    tolerance: float = DEFAULT_ACCURACY_TOLERANCE,
) -> ModelMetrics:
    """Compute R², MSE, MAE and tolerance accuracy for two parallel series.

    Args:
        actual: Observed values.
        predicted: Model output at the same positions.
        tolerance: Relative error counted as accurate (default 5%).

    Returns:
        ModelMetrics for the pair.

    Raises:
        EmptySeriesError: If the series are empty.
        MismatchedLengthError: If the series differ in length.
    """
    y_true = as_array(actual)
    y_pred = as_array(predicted)
    check_parallel(y_true, y_pred, "calculate_metrics")

    residuals = y_true - y_pred
    mse = float(np.mean(residuals ** 2))
    mae = float(np.mean(np.abs(residuals)))

    metrics = ModelMetrics(
        r_squared=r_squared(y_true, y_pred),
        mse=mse,
        mae=mae,
        accuracy=tolerance_accuracy(y_true, y_pred, tolerance),
    )
    logger.debug("Metrics over %d points: %s", len(y_true), metrics)
    return metrics
