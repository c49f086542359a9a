"""
Degree-2 polynomial regression.

Builds the design matrix X with rows [1, x, x²], forms the normal
equations XᵗX·c = Xᵗy and solves the 3×3 system with Cramer's rule.

A (near-)singular XᵗX does not raise: the solver returns [0, 0, 0] and
the resulting fit reports ``is_degenerate``.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from stock_predictor.config import config
from stock_predictor.models.base import FittedModel, RegressionModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolynomialFit(FittedModel):
    """Fitted curve y = c0 + c1·x + c2·x²."""

    coefficients: tuple[float, float, float]
    is_degenerate: bool = False  # solver fell back to zero coefficients

    name = "Polynomial Regression"

    def predict(self, x: float) -> float:
        c0, c1, c2 = self.coefficients
        return c0 + c1 * x + c2 * x * x


def design_matrix(xs: np.ndarray) -> np.ndarray:
    """Rows [1, x, x²] for every x."""
    return np.column_stack([np.ones_like(xs), xs, xs * xs])


def determinant_3x3(a: np.ndarray) -> float:
    """Explicit cofactor expansion along the first row."""
    return float(
        a[0, 0] * (a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1])
        - a[0, 1] * (a[1, 0] * a[2, 2] - a[1, 2] * a[2, 0])
        + a[0, 2] * (a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0])
    )


def solve_3x3(
    a: np.ndarray,
    b: np.ndarray,
    singular_threshold: float = config.model.singular_threshold,
) -> tuple[tuple[float, float, float], bool]:
    """Solve a·c = b by Cramer's rule.

    Returns:
        (solution, singular). The solution is (0, 0, 0) and ``singular``
        is True when |det(a)| is below ``singular_threshold``.
    """
    det = determinant_3x3(a)
    if abs(det) < singular_threshold:
        logger.warning(
            "[Polynomial] Singular normal equations (det=%.3e); "
            "falling back to zero coefficients.",
            det,
        )
        return (0.0, 0.0, 0.0), True

    solution = []
    for col in range(3):
        replaced = np.array(a, dtype=float, copy=True)
        replaced[:, col] = b
        solution.append(determinant_3x3(replaced) / det)
    return (solution[0], solution[1], solution[2]), False


class PolynomialRegressionModel(RegressionModel):
    """Least-squares quadratic over (index, price) pairs."""

    name = "Polynomial Regression"

    def __init__(
        self, singular_threshold: float = config.model.singular_threshold
    ) -> None:
        self._singular_threshold = singular_threshold

    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> PolynomialFit:
        x, y = self._validate(xs, ys, "PolynomialRegressionModel.fit")

        X = design_matrix(x)
        xtx = X.T @ X
        xty = X.T @ y

        coefficients, singular = solve_3x3(xtx, xty, self._singular_threshold)
        logger.debug(
            "[Polynomial] Fitted %d points: coefficients=%s",
            len(x), coefficients,
        )
        return PolynomialFit(coefficients=coefficients, is_degenerate=singular)
