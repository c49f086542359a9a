"""
Value objects shared across the stock predictor.

All entities are immutable. An analysis pass creates them fresh and
never updates them in place.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Sequence


class Trend(Enum):
    """Direction of the predicted move over the horizon."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class RiskLevel(Enum):
    """Risk bucket derived from historical daily volatility."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Observation:
    """A single day's price for a symbol. Its position in the series is x."""

    date: date
    price: float
    volume: Optional[int] = None


@dataclass(frozen=True)
class ConfidenceInterval:
    """Band around a point prediction."""

    lower: float
    upper: float


@dataclass(frozen=True)
class PredictionPoint:
    """Predicted price for one future calendar day."""

    date: date
    predicted_price: float
    confidence_interval: ConfidenceInterval

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "predicted_price": self.predicted_price,
            "confidence_interval": {
                "lower": self.confidence_interval.lower,
                "upper": self.confidence_interval.upper,
            },
        }


def prices_of(series: Sequence[Observation]) -> list[float]:
    """Extract the price column of a series, in time order."""
    return [obs.price for obs in series]
