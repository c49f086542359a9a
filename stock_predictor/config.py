"""
Stock predictor configuration.

Reads deployment settings (history length, horizon, seed) from the
central Settings object (stock_predictor.settings), which loads from .env.

Model and labelling constants are defined here. They are part of the
algorithm, not of the deployment, so they are not read from .env.
"""

from dataclasses import dataclass, field
from typing import Optional


def _load_settings():
    """Lazy-load the settings so a broken .env never blocks imports."""
    try:
        from stock_predictor.settings import settings
        return settings
    except Exception:
        return None


@dataclass(frozen=True)
class ModelConfig:
    """Regression and metric constants."""

    # Polynomial solver: |det(XᵗX)| below this falls back to zero coefficients
    singular_threshold: float = 1e-10

    # Confidence bands (≈95% under a normal residual assumption)
    z_score: float = 1.96

    # A point is "accurate" when its relative error is within this tolerance
    accuracy_tolerance: float = 0.05

    moving_average_window: int = field(default_factory=lambda: (
        _s.moving_average_window if (_s := _load_settings()) else 20
    ))


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one analysis pass and its derived labels."""

    history_days: int = field(default_factory=lambda: (
        _s.history_days if (_s := _load_settings()) else 180
    ))
    horizon_days: int = field(default_factory=lambda: (
        _s.horizon_days if (_s := _load_settings()) else 30
    ))
    min_observations: int = 2

    # Trend: relative change between current price and final prediction
    trend_threshold: float = 0.05

    # Risk: RMS of daily simple returns
    risk_medium_threshold: float = 0.015
    risk_high_threshold: float = 0.03


@dataclass(frozen=True)
class SyntheticConfig:
    """Random-walk parameters for the synthetic price generator."""

    initial_price_min: float = 50.0
    initial_price_span: float = 100.0
    drift_span: float = 0.02           # daily drift in [-1%, 1%)
    volatility_min: float = 0.03
    volatility_span: float = 0.05      # daily volatility in [3%, 8%)
    price_floor: float = 1.0
    volume_min: int = 100_000
    volume_span: int = 1_000_000
    seed: Optional[int] = field(default_factory=lambda: (
        _s.random_seed if (_s := _load_settings()) else None
    ))


@dataclass(frozen=True)
class PredictionConfig:
    """Top-level configuration aggregating all sub-configs."""

    model: ModelConfig = field(default_factory=ModelConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    synthetic: SyntheticConfig = field(default_factory=SyntheticConfig)

    popular_symbols: tuple[str, ...] = (
        "AAPL", "GOOGL", "MSFT", "AMZN", "TSLA", "META", "NFLX", "NVDA",
    )


# Singleton instance
config = PredictionConfig()
