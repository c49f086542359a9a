"""
Synthetic daily price series.

Stands in for a market-data feed. Each series is a multiplicative random
walk with drift:

    price += (u − 0.5)·volatility·price + drift·price
    price  = max(price, 1)

``drift`` and ``volatility`` are drawn once per series. Without a seed the
output is different on every call.
"""

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from stock_predictor.config import SyntheticConfig, config
from stock_predictor.entities import Observation
from stock_predictor.errors import InvalidInputError

logger = logging.getLogger(__name__)

POPULAR_SYMBOLS = config.popular_symbols


class SyntheticSeriesGenerator:
    """Generates random-walk price histories for any ticker symbol."""

    def __init__(
        self,
        seed: Optional[int] = None,
        params: SyntheticConfig = config.synthetic,
    ) -> None:
        self._params = params
        self._rng = np.random.default_rng(seed if seed is not None else params.seed)

    def generate_series(
        self,
        symbol: str,
        days: int = 365,
        end_date: Optional[date] = None,
    ) -> list[Observation]:
        """Generate ``days`` consecutive daily observations.

        The series starts ``days`` days before ``end_date`` (today by
        default) and ends the day before it.

        Args:
            symbol: Ticker symbol. Only used for logging.
            days: Number of observations.
            end_date: Day after the last observation.

        Returns:
            Observations with prices rounded to 2 decimals.
        """
        if days < 1:
            raise InvalidInputError(f"days must be at least 1, got {days}")

        p = self._params
        rng = self._rng
        start = (end_date or date.today()) - timedelta(days=days)

        price = rng.random() * p.initial_price_span + p.initial_price_min
        drift = (rng.random() - 0.5) * p.drift_span
        volatility = p.volatility_min + rng.random() * p.volatility_span

        series: list[Observation] = []
        for i in range(days):
            random_change = (rng.random() - 0.5) * volatility * price
            price = max(price + random_change + drift * price, p.price_floor)
            series.append(
                Observation(
                    date=start + timedelta(days=i),
                    price=round(price, 2),
                    volume=int(rng.random() * p.volume_span) + p.volume_min,
                )
            )

        logger.info(
            "Generated %d days for %s (drift=%.4f, volatility=%.4f)",
            days, symbol, drift, volatility,
        )
        return series


def generate_series(
    symbol: str,
    days: int = 365,
    seed: Optional[int] = None,
    end_date: Optional[date] = None,
) -> list[Observation]:
    """Convenience wrapper around a fresh SyntheticSeriesGenerator."""
    return SyntheticSeriesGenerator(seed=seed).generate_series(
        symbol, days=days, end_date=end_date
    )


def series_to_frame(series: Sequence[Observation]) -> pd.DataFrame:
    """Tabular view of a series (columns: date, price, volume)."""
    return pd.DataFrame(
        {
            "date": pd.to_datetime([obs.date for obs in series]),
            "price": [obs.price for obs in series],
            "volume": pd.array([obs.volume for obs in series], dtype="Int64"),
        }
    )
