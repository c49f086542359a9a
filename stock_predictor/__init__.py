"""
Stock Price Predictor
=====================

Illustrative stock price prediction on synthetic daily history.

Architecture
------------
- **Data**: random-walk-with-drift series per symbol (no real feed)
- **Models**: Linear · Polynomial (degree 2) · Moving-average baseline
- **Metrics**: R² (floored at 0), MSE, MAE, 5%-tolerance accuracy
- **Forecasting**: horizon of daily points with ±1.96·SE confidence bands
- **Analysis**: best-R² model selection, trend and risk labels

Quick start (CLI)
-----------------
    python -m stock_predictor symbols
    python -m stock_predictor analyze --symbol AAPL --days 180 --horizon 30
    python -m stock_predictor compare --symbol TSLA --seed 7
    python -m stock_predictor generate --symbol MSFT --output msft.csv

Public API
----------
    from stock_predictor import AnalysisService, calculate_metrics
    from stock_predictor import generate_predictions
    from stock_predictor.models import LinearRegressionModel, PolynomialRegressionModel
    from stock_predictor.config import config
"""

# ── Public façade ──────────────────────────────────────────────────
from stock_predictor.analysis import (
    AnalysisService,
    ModelComparison,
    PredictionBundle,
    best_model,
)
from stock_predictor.config import PredictionConfig, config
from stock_predictor.data.synthetic import SyntheticSeriesGenerator, generate_series
from stock_predictor.entities import (
    ConfidenceInterval,
    Observation,
    PredictionPoint,
    RiskLevel,
    Trend,
)
from stock_predictor.forecasting import generate_predictions
from stock_predictor.metrics import ModelMetrics, calculate_metrics
from stock_predictor.models.moving_average import calculate_moving_average

__all__ = [
    "AnalysisService",
    "ModelComparison",
    "PredictionBundle",
    "best_model",
    "PredictionConfig",
    "config",
    "SyntheticSeriesGenerator",
    "generate_series",
    "ConfidenceInterval",
    "Observation",
    "PredictionPoint",
    "RiskLevel",
    "Trend",
    "generate_predictions",
    "ModelMetrics",
    "calculate_metrics",
    "calculate_moving_average",
]
