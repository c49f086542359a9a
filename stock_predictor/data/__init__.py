"""
Input data sub-package.

- `SyntheticSeriesGenerator` — random-walk-with-drift daily price history
- `series_to_frame`          — pandas view of a series for export
"""

from stock_predictor.data.synthetic import (
    POPULAR_SYMBOLS,
    SyntheticSeriesGenerator,
    generate_series,
    series_to_frame,
)

__all__ = [
    "POPULAR_SYMBOLS",
    "SyntheticSeriesGenerator",
    "generate_series",
    "series_to_frame",
]
