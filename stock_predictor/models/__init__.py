"""
Regression models sub-package.

Strategy Pattern — every model implements `RegressionModel`:
    fit(xs, ys) → FittedModel → predict(x)

Concrete models
---------------
- `LinearRegressionModel`     — closed-form least-squares line
- `PolynomialRegressionModel` — degree-2 least squares, 3×3 Cramer solve
- `MovingAverageModel`        — flat trailing-mean baseline (comparison only)
"""

from stock_predictor.models.base import FittedModel, RegressionModel
from stock_predictor.models.linear import LinearFit, LinearRegressionModel
from stock_predictor.models.moving_average import (
    MovingAverageFit,
    MovingAverageModel,
    calculate_moving_average,
)
from stock_predictor.models.polynomial import PolynomialFit, PolynomialRegressionModel

__all__ = [
    "FittedModel",
    "RegressionModel",
    "LinearFit",
    "LinearRegressionModel",
    "PolynomialFit",
    "PolynomialRegressionModel",
    "MovingAverageFit",
    "MovingAverageModel",
    "calculate_moving_average",
]
