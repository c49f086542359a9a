"""
Utilities sub-package.

- `configure_logging` — stdout logging setup shared by the CLI and scripts
"""

from stock_predictor.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
